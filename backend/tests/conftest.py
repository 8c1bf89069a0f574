"""
Shared test fixtures and configuration for Employee Records tests.
"""
import os
from datetime import date
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "true"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "false"

from employee_records.db.base import Base  # noqa: E402
from employee_records.models.employee import Employee  # noqa: E402
from employee_records.repositories.employee import (  # noqa: E402
    EmployeeRepository,
    SQLAlchemyEmployeeRepository,
)
from employee_records.services.employee_service import EmployeeService  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test, shared across sessions via StaticPool."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session) -> SQLAlchemyEmployeeRepository:
    return SQLAlchemyEmployeeRepository(db_session)


@pytest.fixture
def employee_service(repository) -> EmployeeService:
    return EmployeeService(repository)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app, with get_db pointed at the test database."""
    from employee_records.api.deps import get_db
    from employee_records.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def mock_repository():
    """Create a mock employee repository."""
    repository = AsyncMock(spec=EmployeeRepository)
    repository.find_by_id.return_value = None
    repository.find_all.return_value = []
    repository.find_by_department.return_value = []
    repository.find_by_is_active.return_value = []
    repository.exists_by_email.return_value = False
    repository.exists_by_email_excluding.return_value = False

    async def _save(employee):
        if employee.id is None:
            employee.id = 1
        return employee

    repository.save.side_effect = _save
    return repository


@pytest.fixture
def mock_request():
    """Create a mock FastAPI request object."""
    request = MagicMock()
    request.cookies = {}
    request.headers = {}
    request.url = MagicMock()
    request.url.path = "/api/employees"
    request.method = "GET"
    return request


@pytest.fixture
def sample_employee_payload():
    """Full camelCase payload as sent by the web client."""
    return {
        "firstName": "Ana",
        "lastName": "Lee",
        "email": "ana@x.com",
        "phoneNumber": "+1-555-0100",
        "department": "Engineering",
        "position": "Backend Developer",
        "salary": 85000.0,
        "hireDate": "2024-01-15",
        "isActive": True,
    }


@pytest.fixture
def employee_factory():
    """Build unsaved Employee instances with sensible defaults."""
    def make_employee(**overrides) -> Employee:
        values = {
            "first_name": "Ana",
            "last_name": "Lee",
            "email": "ana@x.com",
            "phone_number": None,
            "department": "Engineering",
            "position": "Backend Developer",
            "salary": 85000.0,
            "hire_date": date(2024, 1, 15),
            "is_active": True,
        }
        values.update(overrides)
        return Employee(**values)

    return make_employee
