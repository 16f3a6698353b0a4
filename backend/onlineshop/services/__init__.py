"""Services Layer — business logic behind the HTTP routes.

Invariants:
    - Routes depend on the EmployeeService protocol, never on a concrete class
    - Services own all reads and writes of ORM entities
"""
