"""
Domain errors raised by the employee store and service.

The HTTP layer maps each of these to a status code in ``employee_records.main``.
"""

from typing import Optional


class EmployeeRecordsError(Exception):
    """Base class for all employee record errors."""

    status_code: int = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class EmployeeNotFoundError(EmployeeRecordsError):
    """Raised when no employee exists with the requested id."""

    status_code = 404

    def __init__(self, employee_id: int):
        super().__init__(f"Employee not found with id: {employee_id}")
        self.employee_id = employee_id


class EmployeeValidationError(EmployeeRecordsError):
    """Raised when a required field is missing or a value is out of range."""

    status_code = 400

    def __init__(self, detail: str, field: Optional[str] = None):
        super().__init__(detail)
        self.field = field


class DuplicateEmailError(EmployeeRecordsError):
    """Raised when the email is already used by another employee."""

    status_code = 409

    def __init__(self, email: str):
        super().__init__(f"Email already exists: {email}")
        self.email = email


class ConstraintViolationError(EmployeeRecordsError):
    """Raised when the database rejects a write (unique or not-null constraint)."""

    status_code = 409
