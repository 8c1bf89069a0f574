"""
Employee service: the business-facing contract over the employee store.

Lookups by id raise ``EmployeeNotFoundError`` instead of returning ``None``,
creates and updates are validated here before reaching the store.
"""

import logging
import math
from typing import Any, Dict, List

from employee_records.core.exceptions import (
    DuplicateEmailError,
    EmployeeNotFoundError,
    EmployeeValidationError,
)
from employee_records.models.employee import Employee
from employee_records.repositories.employee import EmployeeRepository
from employee_records.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger("employee_records.services")

REQUIRED_FIELDS = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "Email",
}
TEXT_FIELDS = ("first_name", "last_name", "email", "phone_number", "department", "position")
MUTABLE_FIELDS = TEXT_FIELDS + ("salary", "hire_date", "is_active")


def _normalize(values: Dict[str, Any]) -> Dict[str, Any]:
    """Trim text fields; blank text becomes None."""
    normalized = dict(values)
    for field in TEXT_FIELDS:
        value = normalized.get(field)
        if isinstance(value, str):
            normalized[field] = value.strip() or None
    return normalized


def _validate(values: Dict[str, Any]) -> None:
    for field, label in REQUIRED_FIELDS.items():
        if not values.get(field):
            raise EmployeeValidationError(f"{label} is required", field=field)

    salary = values.get("salary")
    if salary is not None and not math.isfinite(salary):
        raise EmployeeValidationError("Salary must be a finite number", field="salary")
    if salary is not None and salary < 0:
        raise EmployeeValidationError("Salary must not be negative", field="salary")

    if values.get("is_active") is None:
        raise EmployeeValidationError("Active flag must be true or false", field="is_active")


class EmployeeService:
    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def get_all_employees(self) -> List[Employee]:
        return await self.repository.find_all()

    async def get_employee_by_id(self, employee_id: int) -> Employee:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        values = _normalize(data.model_dump())
        if values.get("is_active") is None:
            values["is_active"] = True
        _validate(values)

        if await self.repository.exists_by_email(values["email"]):
            logger.info(f"Rejected employee create: email {values['email']!r} already in use")
            raise DuplicateEmailError(values["email"])

        employee = await self.repository.save(Employee(**values))
        logger.info(f"Created employee {employee.id} ({employee.email})")
        return employee

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> Employee:
        """
        Apply the fields present in ``data`` to an existing employee.

        Omitted fields keep their stored values; fields sent explicitly,
        including null for optional ones, replace them.
        """
        employee = await self.get_employee_by_id(employee_id)
        changes = _normalize(data.model_dump(exclude_unset=True))

        merged = {field: getattr(employee, field) for field in MUTABLE_FIELDS}
        merged.update(changes)
        _validate(merged)

        new_email = changes.get("email")
        if new_email is not None and new_email != employee.email:
            if await self.repository.exists_by_email_excluding(new_email, employee_id):
                logger.info(f"Rejected update of employee {employee_id}: email {new_email!r} already in use")
                raise DuplicateEmailError(new_email)

        for field, value in changes.items():
            setattr(employee, field, value)

        employee = await self.repository.save(employee)
        logger.info(f"Updated employee {employee_id} fields={sorted(changes)}")
        return employee

    async def delete_employee(self, employee_id: int) -> None:
        await self.get_employee_by_id(employee_id)
        await self.repository.delete_by_id(employee_id)
        logger.info(f"Deleted employee {employee_id}")

    async def get_employees_by_department(self, department: str) -> List[Employee]:
        return await self.repository.find_by_department(department)

    async def get_active_employees(self) -> List[Employee]:
        return await self.repository.find_by_is_active(True)
