"""Employee Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - EmployeeRequest.name/position: 1-100 chars after stripping, never empty
    - EmployeeRequest.salary: optional, 0..MAX_EMPLOYEE_ID
    - EmployeeUpdateRequest accepts any subset of fields, but at least one, and no unknown fields
    - EmployeeResponse carries the audit timestamps as nullable fields

Design Decisions:
    - Strip runs before the length constraints, so padding never counts toward max_length
    - Separate update schema: PUT bodies are partial, POST bodies are complete
"""

from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator,
)

# Largest value a signed 64-bit BIGINT column holds
MAX_EMPLOYEE_ID = 2**63 - 1


def _strip_text(field_name: str, v: Any) -> Any:
    if v is None:
        raise ValueError(f"{field_name} cannot be null")
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v


class EmployeeRequest(BaseModel):
    """Employee creation body."""
    name: str = Field(min_length=1, max_length=100)
    position: str = Field(min_length=1, max_length=100)
    salary: int | None = Field(None, ge=0, le=MAX_EMPLOYEE_ID)

    @field_validator("name", "position", mode="before")
    @classmethod
    def strip_text(cls, v: Any, info: ValidationInfo) -> Any:
        return _strip_text(info.field_name, v)


class EmployeeUpdateRequest(BaseModel):
    """Employee update body. Only the fields sent are applied."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=100)
    position: str | None = Field(None, min_length=1, max_length=100)
    salary: int | None = Field(None, ge=0, le=MAX_EMPLOYEE_ID)

    @field_validator("name", "position", mode="before")
    @classmethod
    def strip_text(cls, v: Any, info: ValidationInfo) -> Any:
        return _strip_text(info.field_name, v)

    @model_validator(mode="after")
    def require_any_field(self):
        if not self.model_fields_set:
            raise ValueError(
                "At least one of 'name', 'position' or 'salary' must be provided",
            )
        return self

    def changes(self) -> dict:
        """Fields explicitly present in the request body."""
        return self.model_dump(exclude_unset=True)


class EmployeeResponse(BaseModel):
    """Public-facing employee data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    position: str
    salary: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
