import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from core.config_loader import settings
from .models import Employee
from .repository import EmployeeRepository, get_employee_repository
from .schema import EmployeeSchema, EmployeePayload
from . import service

logger = logging.getLogger(__name__)

employee_router = APIRouter(prefix="/employees", tags=["Employees"])

NOT_FOUND = "employee not found"


# List all employees
def list_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    logger.debug("REST request to find all employees")
    return repo.find_all()

# Get employee by id
def employee_detail(
    employee_id: int = Path(..., description="Employee primary key"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    ):
    logger.info("REST request to find one employee by id: %s", employee_id)
    obj = repo.find_by_id(employee_id)
    if not obj:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return obj

# Get employee by email
def employee_by_email(
    email: str = Path(..., description="Exact email address"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    ):
    logger.info("REST request to find one employee by email: %s", email)
    obj = repo.find_by_email(email)
    if not obj:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return obj

# Filter by married status, an empty result is a 404
def employees_by_married(
    married: bool = Path(..., description="Married status"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    ):
    logger.debug("REST request to filter employees by married status: %s", married)
    rows = repo.find_by_married(married)
    if not rows:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return rows

# Filter by age strictly greater than, an empty result is a 404
def employees_by_age_greater(
    age: int = Path(..., description="Exclusive lower bound for age"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    ):
    logger.debug("REST request to filter employees by age greater than: %s", age)
    rows = repo.find_all_by_age_after(age)
    if not rows:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return rows

# Calculate and persist salary tier
def employee_calculate_salary(
    employee_id: int = Path(..., description="Employee primary key"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    ):
    logger.debug("REST request to calculate salary of employee id: %s", employee_id)
    obj = repo.find_by_id(employee_id)
    if not obj:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return service.calculate_salary(repo, obj)

# Create employee
def employee_post(
    payload: EmployeePayload,
    response: Response,
    repo: EmployeeRepository = Depends(get_employee_repository),
    ):
    logger.debug("REST request to save an employee: %s", payload)
    if payload.id is not None:
        logger.warning("Creating employee with an id: %s", payload.id)
        raise HTTPException(status_code=400, detail="a new employee cannot already have an id")
    obj = repo.save(Employee(**payload.model_dump()))
    response.headers["Location"] = f"{settings.API_PREFIX}{employee_router.prefix}/{obj.id}"
    return obj

# Update employee, the whole record is overwritten
def employee_put(payload: EmployeePayload, repo: EmployeeRepository = Depends(get_employee_repository)):
    logger.debug("REST request to update an employee: %s", payload)
    if payload.id is None:
        logger.warning("Updating employee without id")
        raise HTTPException(status_code=400, detail="employee id is required for update")
    return repo.save(Employee(**payload.model_dump()))

# Delete employee
def employee_delete(
    employee_id: int = Path(..., description="Employee primary key"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    ):
    logger.debug("REST request to delete an employee by id: %s", employee_id)
    if not repo.exists_by_id(employee_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    repo.delete_by_id(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Delete every employee
def employees_delete_all(repo: EmployeeRepository = Depends(get_employee_repository)):
    logger.debug("REST request to delete all employees")
    repo.delete_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# method, path, handler, route options
EMPLOYEE_ROUTES = [
    ("GET", "", list_employees,
        dict(response_model=list[EmployeeSchema], summary="Find all employees, no filter or pagination")),
    ("GET", "/{employee_id}", employee_detail,
        dict(response_model=EmployeeSchema, summary="Find one employee by id")),
    ("GET", "/email/{email}", employee_by_email,
        dict(response_model=EmployeeSchema, summary="Find one employee by email")),
    ("GET", "/married/{married}", employees_by_married,
        dict(response_model=list[EmployeeSchema], summary="Filter employees by married status")),
    ("GET", "/age-greater/{age}", employees_by_age_greater,
        dict(response_model=list[EmployeeSchema], summary="Filter employees older than age")),
    ("GET", "/calculate-salary/{employee_id}", employee_calculate_salary,
        dict(response_model=EmployeeSchema, summary="Calculate and store salary from years in company")),
    ("POST", "", employee_post,
        dict(response_model=EmployeeSchema, status_code=status.HTTP_201_CREATED, summary="Create employee")),
    ("PUT", "", employee_put,
        dict(response_model=EmployeeSchema, summary="Update employee")),
    ("DELETE", "/{employee_id}", employee_delete,
        dict(status_code=status.HTTP_204_NO_CONTENT, response_class=Response, summary="Delete employee by id")),
    ("DELETE", "", employees_delete_all,
        dict(status_code=status.HTTP_204_NO_CONTENT, response_class=Response, summary="Delete all employees")),
]

for method, path, endpoint, options in EMPLOYEE_ROUTES:
    employee_router.add_api_route(path, endpoint, methods=[method], **options)
