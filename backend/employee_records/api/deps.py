from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_records.db.session import AsyncSessionLocal
from employee_records.repositories.employee import EmployeeRepository, SQLAlchemyEmployeeRepository
from employee_records.services.employee_service import EmployeeService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


def get_employee_repository(db: AsyncSession = Depends(get_db)) -> EmployeeRepository:
    return SQLAlchemyEmployeeRepository(db)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)
