from employee_records.models.employee import Employee

__all__ = ["Employee"]
