"""Employee Service — business logic and persistence access for the employee resource.

Invariants:
    - get_employee_by_id / update_employee raise EmployeeNotFoundError for unknown ids
    - delete_employee is idempotent: unknown ids are a logged no-op, never an error
    - get_all_employees returns employees ordered by id ascending
    - update_employee applies only fields present in the request and stamps updated_at

Design Decisions:
    - EmployeeService is a Protocol: routes depend on the interface, tests inject
      a double through app.dependency_overrides[get_employee_service]
    - Results returned as EmployeeResponse, so doubles never need ORM objects
"""

import logging
from datetime import datetime, timezone
from typing import Protocol

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from onlineshop.core.errors import EmployeeNotFoundError
from onlineshop.infrastructure.database import get_db
from onlineshop.models.employee import Employee as EmployeeModel
from onlineshop.schemas.employee import (
    EmployeeRequest, EmployeeResponse, EmployeeUpdateRequest,
)

logger = logging.getLogger(__name__)


class EmployeeService(Protocol):
    """Operations the employee routes delegate to."""

    async def get_all_employees(self) -> list[EmployeeResponse]: ...

    async def get_employee_by_id(self, employee_id: int) -> EmployeeResponse: ...

    async def create_employee(self, request: EmployeeRequest) -> EmployeeResponse: ...

    async def update_employee(
        self, employee_id: int, request: EmployeeUpdateRequest,
    ) -> EmployeeResponse: ...

    async def delete_employee(self, employee_id: int) -> None: ...


class SqlEmployeeService:
    """EmployeeService backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_all_employees(self) -> list[EmployeeResponse]:
        result = await self._db.execute(
            select(EmployeeModel).order_by(EmployeeModel.id),
        )
        return [
            EmployeeResponse.model_validate(e) for e in result.scalars().all()
        ]

    async def get_employee_by_id(self, employee_id: int) -> EmployeeResponse:
        employee = await self._get_or_raise(employee_id)
        return EmployeeResponse.model_validate(employee)

    async def create_employee(self, request: EmployeeRequest) -> EmployeeResponse:
        employee = EmployeeModel(
            name=request.name,
            position=request.position,
            salary=request.salary,
        )
        self._db.add(employee)
        await self._db.commit()
        await self._db.refresh(employee)
        logger.info(
            "Employee created", extra={"employee_id": employee.id},
        )
        return EmployeeResponse.model_validate(employee)

    async def update_employee(
        self, employee_id: int, request: EmployeeUpdateRequest,
    ) -> EmployeeResponse:
        employee = await self._get_or_raise(employee_id)
        for field_name, value in request.changes().items():
            setattr(employee, field_name, value)
        employee.updated_at = datetime.now(timezone.utc)
        await self._db.commit()
        await self._db.refresh(employee)
        logger.info(
            "Employee updated", extra={"employee_id": employee_id},
        )
        return EmployeeResponse.model_validate(employee)

    async def delete_employee(self, employee_id: int) -> None:
        employee = await self._db.get(EmployeeModel, employee_id)
        if employee is None:
            logger.warning(
                f"Employee {employee_id} already absent, nothing to delete",
                extra={"employee_id": employee_id},
            )
            return
        await self._db.delete(employee)
        await self._db.commit()
        logger.info(
            "Employee deleted", extra={"employee_id": employee_id},
        )

    async def _get_or_raise(self, employee_id: int) -> EmployeeModel:
        employee = await self._db.get(EmployeeModel, employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee


def get_employee_service(
    db: AsyncSession = Depends(get_db),
) -> EmployeeService:
    """FastAPI dependency, overridden in tests with a double."""
    return SqlEmployeeService(db)
