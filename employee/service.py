import logging

from .models import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

JUNIOR_SALARY = 24000.0
MID_SALARY = 40000.0
SENIOR_SALARY = 60000.0


def salary_for_years(years_in_company: int) -> float:
    # exactly 5 years falls through to the senior tier
    if years_in_company < 5:
        return JUNIOR_SALARY
    elif 5 < years_in_company < 20:
        return MID_SALARY
    return SENIOR_SALARY


def calculate_salary(repo: EmployeeRepository, employee: Employee) -> Employee:
    """Assign the salary tier for the employee's years in company and persist it.

    Employees without years_in_company are returned untouched and nothing is written.
    """
    if employee.years_in_company is None:
        logger.debug("Employee %s has no years in company, salary left as is", employee.id)
        return employee
    employee.salary = salary_for_years(employee.years_in_company)
    return repo.save(employee)


def sample_employee() -> Employee:
    return Employee(
        name="Bob Esponja",
        email="bob@crustaceo.com",
        married=False,
        age=23,
        address="Fondo de Bikini",
        salary=50000.0,
    )


def seed_sample_employee(repo: EmployeeRepository) -> Employee:
    employee = repo.save(sample_employee())
    logger.info("Seeded sample employee id=%s", employee.id)
    return employee
