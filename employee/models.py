from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Boolean, Float
from core.database import Base

class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # lookup key, uniqueness is not enforced
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    married: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)

    salary: Mapped[float | None] = mapped_column(Float, nullable=True)
    years_in_company: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, name={self.name!r}, email={self.email!r})"
