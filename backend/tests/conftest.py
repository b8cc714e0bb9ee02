"""Shared fixtures: in-memory database, API client and row factories."""

import os
import tempfile
from datetime import datetime

# Settings are read at import time, so configure before importing jobmatch
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["CACHE_ENABLED"] = "false"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="jobmatch-logs-")
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from jobmatch.core.database import Base, SessionLocal, engine, init_db
from jobmatch.core.security import create_access_token
from jobmatch.main import app
from jobmatch.models import Admin, Company, JobListing
from jobmatch.services.auth_service import AuthService
from jobmatch.services.profile_service import ProfileService


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for every test."""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(database):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(database):
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def make_user(db):
    """Create an auth identity (no profile) and return it."""
    def _make(email="seeker@example.com", password="secret123", full_name=None):
        return AuthService(db).create_identity(email, password, full_name)
    return _make


@pytest.fixture
def make_profile(db):
    def _make(user):
        return ProfileService(db).ensure_profile(user)
    return _make


@pytest.fixture
def make_company(db):
    def _make(name="Acme", industry=None, description=None, admin_id=None):
        company = Company(name=name, industry=industry, description=description, admin_id=admin_id)
        db.add(company)
        db.commit()
        db.refresh(company)
        return company
    return _make


@pytest.fixture
def make_job(db):
    def _make(company, title="Backend Engineer", created_at=None, is_active=True):
        job = JobListing(
            company_id=company.id,
            title=title,
            description="Build and run the services behind the product.",
            is_active=is_active,
            created_at=created_at or datetime(2024, 1, 1, 12, 0, 0),
        )
        db.add(job)
        db.commit()
        db.refresh(job)
        return job
    return _make


@pytest.fixture
def make_admin(db):
    """Grant platform admin rights to an existing identity."""
    def _make(user):
        admin = Admin(user_id=user.id)
        db.add(admin)
        db.commit()
        return admin
    return _make


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}
    return _headers
