from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# wire format is camelCase (yearsInCompany), snake_case is accepted on input too
class EmployeeBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    married: Optional[bool] = None
    age: Optional[int] = None
    address: Optional[str] = None
    salary: Optional[float] = None
    years_in_company: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeSchema(EmployeeBase):
    id: int
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# PUBLIC payload for both POST and PUT, the handler decides what a missing id means
class EmployeePayload(EmployeeBase):
    id: Optional[int] = None
