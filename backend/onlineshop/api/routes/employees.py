"""Employee Routes — CRUD endpoints for the employee resource.

Invariants:
    - Every handler awaits exactly one EmployeeService method
    - Request bodies are validated by Pydantic before the handler runs;
      invalid bodies never reach the service (400 via error_handlers)
    - EmployeeNotFoundError propagates to the global handler (404)
    - DELETE always answers 200 with an empty body
    - Path ids outside 1..MAX_EMPLOYEE_ID answer 400 and never reach the service

Design Decisions:
    - Service injected with Depends(get_employee_service): the only seam tests replace
    - Create answers 200 (not 201): clients of the employee API expect 200 on every success
"""

from fastapi import APIRouter, Depends, Path, Response, status

from onlineshop.schemas.employee import (
    MAX_EMPLOYEE_ID, EmployeeRequest, EmployeeResponse, EmployeeUpdateRequest,
)
from onlineshop.services.employee_service import (
    EmployeeService, get_employee_service,
)

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeResponse])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """List all employees."""
    return await service.get_all_employees()


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee_by_id(
    employee_id: int = Path(ge=1, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
):
    """Get one employee by id."""
    return await service.get_employee_by_id(employee_id)


@router.post(
    "", response_model=EmployeeResponse, status_code=status.HTTP_200_OK,
)
async def create_employee(
    body: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee and return it with its assigned id."""
    return await service.create_employee(body)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    body: EmployeeUpdateRequest,
    employee_id: int = Path(ge=1, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
):
    """Apply a partial update to an employee."""
    return await service.update_employee(employee_id, body)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
)
async def delete_employee(
    employee_id: int = Path(ge=1, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee. Unknown ids are accepted silently."""
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_200_OK)
