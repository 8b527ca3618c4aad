"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An in-memory SQLite store with the Jobly tables
- Repositories and seeded companies, jobs and users
- FastAPI test client and auth tokens
"""

import os

# Settings are read at import time; keep hashing cheap in tests
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool

from jobly.core.database import Base, get_store, init_db
from jobly.core.security import create_access_token
from jobly.core.store import Store
from jobly.crud import CompanyRepository, JobRepository, UserRepository
from jobly.schemas.company import CompanyCreateRequest
from jobly.schemas.job import JobCreateRequest
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite only enforces foreign keys (and ON DELETE CASCADE) when asked to."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


init_db()


@pytest.fixture
def store():
    """
    Store client over a fresh set of tables for each test.
    """
    Base.metadata.create_all(bind=engine)
    try:
        yield Store(engine)
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def company_repo(store):
    return CompanyRepository(store)


@pytest.fixture
def job_repo(store):
    return JobRepository(store)


@pytest.fixture
def user_repo(store):
    return UserRepository(store)


@pytest.fixture
def seed(company_repo, job_repo, user_repo):
    """
    Three companies, four jobs and two users (u1 regular, admin).

    Returns the created job ids keyed by title.
    """
    for handle, name, num_employees in [("c1", "C1", 1), ("c2", "C2", 2), ("c3", "C3", 3)]:
        company_repo.create(CompanyCreateRequest(
            handle=handle,
            name=name,
            description=f"Desc{handle[-1]}",
            num_employees=num_employees,
            logo_url=f"http://{handle}.img",
        ))

    jobs = [
        JobCreateRequest(title="prompt engineer", salary=120000, equity="0.55", company_handle="c1"),
        JobCreateRequest(title="technical designer", salary=110000, equity="0.4", company_handle="c2"),
        JobCreateRequest(title="data analyst", salary=90000, equity="0", company_handle="c1"),
        JobCreateRequest(title="support lead", salary=None, equity=None, company_handle="c3"),
    ]
    job_ids = {job.title: job_repo.create(job).id for job in jobs}

    user_repo.register(
        username="u1", password="password1", first_name="U1F", last_name="U1L",
        email="user1@user.com", is_admin=False,
    )
    user_repo.register(
        username="admin", password="password2", first_name="AdF", last_name="AdL",
        email="admin@user.com", is_admin=True,
    )
    return job_ids


@pytest.fixture
def client(store):
    """
    FastAPI test client with the store dependency pointed at the test database.
    """
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def u1_headers():
    token = create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}
