"""
Shared fixtures: in-memory SQLite database, API client and token helpers.
"""
import os

# Settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-characters")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("BOOTSTRAP_ADMIN_EMAIL", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hrms import models  # noqa: F401
from hrms.database import Base, get_db, enable_sqlite_foreign_keys
from hrms.main import app
from hrms.models.employee import EmployeeRole
from hrms.repositories import DepartmentRepository, EmployeeRepository
from hrms.services.token_service import get_token_service

DEFAULT_PASSWORD = "Secret123"


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """API client sharing the test session"""
    def override_get_db():
        try:
            yield db_session
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_department(db_session):
    def _make(name="Engineering", description="Builds things"):
        return DepartmentRepository(db_session).create(name, description)
    return _make


@pytest.fixture
def make_employee(db_session):
    def _make(department, name="Alice", email=None, role=EmployeeRole.EMPLOYEE.value, **fields):
        return EmployeeRepository(db_session).create({
            "name": name,
            "email": email or f"{name.lower()}@acme.com",
            "password": fields.pop("password", DEFAULT_PASSWORD),
            "role": role,
            "department_id": department.id,
            **fields,
        })
    return _make


@pytest.fixture
def token_for():
    """Issue a token for an employee record"""
    def _issue(employee, **kwargs):
        return get_token_service().issue(employee.id, employee.email, employee.is_admin, **kwargs)
    return _issue


@pytest.fixture
def auth_headers(token_for):
    def _headers(employee):
        return {"Authorization": f"Bearer {token_for(employee)}"}
    return _headers


@pytest.fixture
def admin(make_department, make_employee):
    department = make_department("Administration", "System administration")
    return make_employee(department, name="Root", email="root@acme.com", role=EmployeeRole.ADMIN.value)


@pytest.fixture
def admin_headers(admin, auth_headers):
    return auth_headers(admin)
