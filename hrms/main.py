import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .database import create_tables, SessionLocal
from .exceptions import HRMSError
from .repositories.departments import DepartmentRepository
from .repositories.employees import EmployeeRepository
from .models.employee import EmployeeRole
from .routers import auth, admin, departments, employees
from .utils.logging_config import setup_logging, get_logger, set_request_context, clear_request_context
from .utils.rate_limiter import limiter

setup_logging(level=settings.log_level, json_format=settings.log_json)
logger = get_logger("hrms")


def bootstrap_admin() -> None:
    """Create the configured admin (and its department) when no admin exists yet"""
    if not settings.has_bootstrap_admin:
        return

    db = SessionLocal()
    try:
        employees_repo = EmployeeRepository(db)
        if employees_repo.has_admin():
            logger.info("Admin employee already exists")
            return

        departments_repo = DepartmentRepository(db)
        department = departments_repo.find_by_name(settings.bootstrap_admin_department)
        if not department:
            department = departments_repo.create(
                settings.bootstrap_admin_department,
                "System administration"
            )

        employees_repo.create({
            "name": settings.bootstrap_admin_name,
            "email": settings.bootstrap_admin_email,
            "password": settings.bootstrap_admin_password,
            "role": EmployeeRole.ADMIN.value,
            "department_id": department.id,
        })
        logger.info("Created bootstrap admin %s", settings.bootstrap_admin_email)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting hrms (environment: %s)", settings.environment)
    logger.info("CORS origins: %s", settings.cors_origins)

    create_tables()
    bootstrap_admin()

    yield

    logger.info("Shutting down hrms")


app = FastAPI(
    title="HRMS API",
    description="Departments, employees and task assignment",
    version="1.0.0",
    lifespan=lifespan
)

# Rate limiter state
app.state.limiter = limiter


# ================================
# CORS MIDDLEWARE - MUST BE FIRST!
# ================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# Security Headers Middleware
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


# Request ID Middleware
class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])
        request.state.request_id = request_id
        set_request_context(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.api_request(
                request.method,
                request.url.path,
                response.status_code,
                round((time.perf_counter() - started) * 1000, 2)
            )
            return response
        finally:
            clear_request_context()


app.add_middleware(RequestIdMiddleware)
app.add_middleware(SecurityHeadersMiddleware)


# ================================
# ERROR HANDLERS
# ================================

@app.exception_handler(HRMSError)
async def hrms_error_handler(request: Request, exc: HRMSError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "error": errors}
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "error": str(exc.orig)}
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logging.getLogger("hrms.database").exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"message": "Server error", "error": str(exc)}
    )


# Rate limit handler
@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"message": "Too many requests, try again later", "error": str(exc.detail)}
    )


# Include routers
app.include_router(auth.router)
app.include_router(admin.router)
app.include_router(departments.router)
app.include_router(employees.router)


@app.get("/")
async def root():
    return {
        "message": "HRMS API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
