"""
Settings validation and bootstrap admin
"""
import pytest
from pydantic import ValidationError

from hrms import main
from hrms.config import Settings
from hrms.repositories import EmployeeRepository


class TestSettings:

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            Settings(SECRET_KEY="too-short")

    def test_empty_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            Settings(SECRET_KEY="")

    def test_defaults(self):
        settings = Settings(SECRET_KEY="x" * 32)

        assert settings.algorithm == "HS256"
        assert settings.access_token_expire_minutes == 60
        assert settings.task_due_days == 7

    def test_cors_origins_are_split_and_deduplicated(self):
        settings = Settings(
            SECRET_KEY="x" * 32,
            ALLOWED_ORIGINS="https://a.example.org/, https://b.example.org,https://a.example.org"
        )
        assert settings.cors_origins == ["https://a.example.org", "https://b.example.org"]


class TestBootstrapAdmin:

    @pytest.fixture
    def bootstrap_settings(self, monkeypatch, engine):
        from sqlalchemy.orm import sessionmaker

        configured = Settings(
            SECRET_KEY="x" * 32,
            BOOTSTRAP_ADMIN_EMAIL="boss@acme.com",
            BOOTSTRAP_ADMIN_PASSWORD="Secret123",
        )
        monkeypatch.setattr(main, "settings", configured)
        monkeypatch.setattr(main, "SessionLocal", sessionmaker(bind=engine))
        return configured

    def test_creates_admin_once(self, bootstrap_settings, db_session):
        main.bootstrap_admin()
        main.bootstrap_admin()

        employees = EmployeeRepository(db_session)
        admin = employees.find_by_email("boss@acme.com")
        assert admin.is_admin
        assert admin.department.name == "Administration"
        assert admin.compare_password("Secret123")
        assert len(employees.find_all()) == 1

    def test_skipped_without_credentials(self, monkeypatch, engine, db_session):
        from sqlalchemy.orm import sessionmaker

        monkeypatch.setattr(main, "settings", Settings(SECRET_KEY="x" * 32, BOOTSTRAP_ADMIN_EMAIL=""))
        monkeypatch.setattr(main, "SessionLocal", sessionmaker(bind=engine))

        main.bootstrap_admin()

        assert EmployeeRepository(db_session).find_all() == []

    def test_mixed_case_email_can_log_in(self, monkeypatch, engine, client):
        from sqlalchemy.orm import sessionmaker

        monkeypatch.setattr(main, "settings", Settings(
            SECRET_KEY="x" * 32,
            BOOTSTRAP_ADMIN_EMAIL="Boss@ACME.com",
            BOOTSTRAP_ADMIN_PASSWORD="Secret123",
        ))
        monkeypatch.setattr(main, "SessionLocal", sessionmaker(bind=engine))
        main.bootstrap_admin()

        response = client.post("/auth/login", json={"email": "Boss@ACME.com", "password": "Secret123"})

        assert response.status_code == 200
        me = client.get("/auth/me", headers={"Authorization": f"Bearer {response.json()['token']}"})
        assert me.json()["email"] == "boss@acme.com"
        assert me.json()["isAdmin"] is True
