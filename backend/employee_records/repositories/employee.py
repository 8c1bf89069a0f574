"""
Employee store: persistence primitives for the ``employees`` table.

``EmployeeRepository`` is the interface the service depends on;
``SQLAlchemyEmployeeRepository`` implements it on an async SQLAlchemy session.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_records.core.exceptions import ConstraintViolationError
from employee_records.models.employee import Employee

logger = logging.getLogger("employee_records.repositories")


class EmployeeRepository(ABC):
    @abstractmethod
    async def save(self, employee: Employee) -> Employee:
        """Insert or update ``employee`` and return the persisted instance.

        Raises:
            ConstraintViolationError: if the database rejects the write
        """

    @abstractmethod
    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        pass

    @abstractmethod
    async def find_all(self) -> List[Employee]:
        pass

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> None:
        pass

    @abstractmethod
    async def find_by_department(self, department: str) -> List[Employee]:
        pass

    @abstractmethod
    async def find_by_is_active(self, is_active: bool) -> List[Employee]:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def exists_by_email_excluding(self, email: str, employee_id: int) -> bool:
        """Like ``exists_by_email`` but ignores the employee with ``employee_id``."""


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, employee: Employee) -> Employee:
        email = employee.email
        self.db.add(employee)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            logger.warning(f"Rejected write for employee email={email!r}: {exc.orig}")
            raise ConstraintViolationError(
                f"Employee violates a database constraint: {exc.orig}"
            ) from exc
        await self.db.refresh(employee)
        return employee

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return await self.db.get(Employee, employee_id)

    async def find_all(self) -> List[Employee]:
        result = await self.db.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())

    async def delete_by_id(self, employee_id: int) -> None:
        await self.db.execute(delete(Employee).where(Employee.id == employee_id))
        await self.db.commit()

    async def find_by_department(self, department: str) -> List[Employee]:
        result = await self.db.execute(
            select(Employee).where(Employee.department == department).order_by(Employee.id)
        )
        return list(result.scalars().all())

    async def find_by_is_active(self, is_active: bool) -> List[Employee]:
        result = await self.db.execute(
            select(Employee).where(Employee.is_active == is_active).order_by(Employee.id)
        )
        return list(result.scalars().all())

    async def exists_by_email(self, email: str) -> bool:
        return bool(await self.db.scalar(select(exists().where(Employee.email == email))))

    async def exists_by_email_excluding(self, email: str, employee_id: int) -> bool:
        return bool(
            await self.db.scalar(
                select(exists().where(Employee.email == email, Employee.id != employee_id))
            )
        )
