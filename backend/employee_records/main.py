import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from employee_records.api import api_router
from employee_records.core.config import settings
from employee_records.core.exceptions import EmployeeRecordsError
from employee_records.core.logging_config import setup_logging, RequestLoggingMiddleware
from employee_records.db.session import check_db_connection, create_tables, engine

# Configure structured logging (JSON in production, colored in development)
setup_logging()
logger = logging.getLogger("employee_records")

SERVICE_VERSION = "1.0.0"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds basic security headers to all responses.
    """
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


class ErrorResponse(BaseModel):
    """Standardized error response format."""
    error: str
    detail: str | None = None
    timestamp: str
    path: str | None = None


class HealthResponse(BaseModel):
    """Health check response format."""
    status: str
    service: str
    version: str
    environment: str
    checks: dict[str, bool]


def _error_response(request: Request, status_code: int, error: str, detail: str | None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error,
            detail=detail,
            timestamp=datetime.now(timezone.utc).isoformat(),
            path=request.url.path,
        ).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        await create_tables()
        logger.info("Database tables ensured (AUTO_CREATE_TABLES)")
    logger.info(f"{settings.PROJECT_NAME} started (environment={settings.ENVIRONMENT})")
    yield
    await engine.dispose()
    logger.info(f"{settings.PROJECT_NAME} stopped")


app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    description="CRUD API for employee records",
    version=SERVICE_VERSION,
    docs_url="/docs" if settings.DEBUG else None,  # Disable docs in production
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)


@app.exception_handler(EmployeeRecordsError)
async def employee_records_exception_handler(request: Request, exc: EmployeeRecordsError) -> JSONResponse:
    """
    Maps domain errors to their HTTP status: not found 404, validation 400,
    duplicate email and constraint violations 409.
    """
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.__class__.__name__}: {exc.detail}")
    return _error_response(request, exc.status_code, exc.__class__.__name__, exc.detail)


# Global exception handler - catches all unhandled exceptions
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Returns a consistent 500 response. In production, internal details are hidden.
    """
    error_id = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S%f")

    logger.error(
        f"Unhandled exception [{error_id}]: {exc} (path={request.url.path}, method={request.method})",
        exc_info=exc,
    )

    if settings.ENVIRONMENT.lower() == "production":
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            f"An unexpected error occurred. Reference ID: {error_id}",
        )

    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, exc.__class__.__name__, str(exc))


# When credentials are needed, we must specify exact origins (not "*")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(SecurityHeadersMiddleware)

# Request logging middleware with timing and request IDs
app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router, prefix=settings.API_PREFIX)

# Exposes /metrics for Prometheus when ENABLE_METRICS=true
instrumentator = Instrumentator(
    should_group_status_codes=False,
    should_ignore_untemplated=True,
    should_respect_env_var=True,
    excluded_handlers=["/health", "/metrics"],
)
instrumentator.instrument(app).expose(app, include_in_schema=False)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Reports database connectivity; 503 when the database is unreachable.
    """
    db_healthy = await check_db_connection()

    response = HealthResponse(
        status="healthy" if db_healthy else "unhealthy",
        service="employee-records",
        version=SERVICE_VERSION,
        environment=settings.ENVIRONMENT,
        checks={"database": db_healthy},
    )

    if not db_healthy:
        logger.warning(f"Health check failed: {response.checks}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump(),
        )

    return response


@app.get("/")
async def root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME} API"}
