# Services Package
from employee_records.services.employee_service import EmployeeService

__all__ = ["EmployeeService"]
