"""Employee ORM — persisted employee record.

Invariants:
    - id is an autoincrement integer primary key assigned by the database
    - name and position are non-nullable
    - created_at set once on insert; updated_at set by the service on every update

Design Decisions:
    - BigInteger id with an Integer variant on SQLite: SQLite only autoincrements
      INTEGER PRIMARY KEY columns
    - salary nullable: the create request makes it optional
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from onlineshop.db.base import Base

EmployeeIdType = BigInteger().with_variant(Integer, "sqlite")


class Employee(Base):
    """Employee entity. Only the service layer creates or mutates it."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        EmployeeIdType, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} name={self.name!r} position={self.position!r}>"
