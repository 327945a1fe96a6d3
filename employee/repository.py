import logging
from typing import Optional, List

from fastapi import Depends
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database import get_db
from .models import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Record store for Employee rows, bound to one session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Employee]:
        stmt = select(Employee).order_by(Employee.id.asc())
        return list(self.db.scalars(stmt))

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def find_by_email(self, email: str) -> Optional[Employee]:
        # email is not unique, the oldest row wins
        stmt = select(Employee).where(Employee.email == email).order_by(Employee.id.asc())
        return self.db.scalars(stmt).first()

    def find_by_married(self, married: bool) -> List[Employee]:
        stmt = select(Employee).where(Employee.married == married).order_by(Employee.id.asc())
        return list(self.db.scalars(stmt))

    def find_all_by_age_after(self, age: int) -> List[Employee]:
        stmt = select(Employee).where(Employee.age > age).order_by(Employee.id.asc())
        return list(self.db.scalars(stmt))

    def exists_by_id(self, employee_id: int) -> bool:
        stmt = select(Employee.id).where(Employee.id == employee_id)
        return self.db.scalars(stmt).first() is not None

    def save(self, employee: Employee) -> Employee:
        """Insert when there is no id, otherwise overwrite the row with that id."""
        try:
            if employee.id is None:
                self.db.add(employee)
            else:
                employee = self.db.merge(employee)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(employee)
        return employee

    def delete_by_id(self, employee_id: int) -> None:
        db_employee = self.db.get(Employee, employee_id)
        if not db_employee:
            return
        try:
            self.db.delete(db_employee)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def delete_all(self) -> int:
        try:
            result = self.db.execute(delete(Employee))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.info("Deleted %s employees", result.rowcount)
        return result.rowcount


def get_employee_repository(db: Session = Depends(get_db)) -> EmployeeRepository:
    return EmployeeRepository(db)
