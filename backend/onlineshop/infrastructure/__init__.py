"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All SQLAlchemy failures mapped to core errors before leaving this layer
"""
