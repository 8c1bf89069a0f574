from employee_records.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate

__all__ = ["EmployeeCreate", "EmployeeResponse", "EmployeeUpdate"]
