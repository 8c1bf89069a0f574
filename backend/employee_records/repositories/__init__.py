from employee_records.repositories.employee import EmployeeRepository, SQLAlchemyEmployeeRepository

__all__ = ["EmployeeRepository", "SQLAlchemyEmployeeRepository"]
