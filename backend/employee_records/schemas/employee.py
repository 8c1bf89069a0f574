"""
Request and response payloads for employee endpoints.

Keys are camelCase on the wire (``firstName``, ``hireDate``, ``isActive``);
snake_case names are accepted on input as well.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class EmployeeSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeCreate(EmployeeSchema):
    """Payload for creating an employee.

    Required fields are typed as optional so that missing values reach the
    service, which reports them as validation errors.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = None
    hire_date: Optional[date] = None
    is_active: Optional[bool] = None

    @field_validator("salary", "hire_date", mode="before")
    @classmethod
    def _blank_as_none(cls, value):
        # The web client sends "" for an empty salary or hire date
        if isinstance(value, str) and not value.strip():
            return None
        return value


class EmployeeUpdate(EmployeeCreate):
    """Payload for updating an employee.

    Only fields present in the request are applied; omitted fields keep
    their stored values.
    """


class EmployeeResponse(EmployeeSchema):
    """Schema for employee response"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = None
    hire_date: Optional[date] = None
    is_active: bool = True
