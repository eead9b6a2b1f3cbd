"""
Pytest configuration and shared fixtures.

The app is exercised against a fresh in-memory SQLite database per test.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import jobboard.models  # noqa: F401
from jobboard.db.base import Base, get_db
from jobboard.main import app
from jobboard.models import Company, JobPosting


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def company(db_session) -> Company:
    row = Company(
        name="Acme Corp",
        email="hr@acme.example",
        password="s3cret-hash",
        location="Berlin",
        job_posts=[],
    )
    db_session.add(row)
    db_session.commit()
    db_session.refresh(row)
    return row


@pytest.fixture
def job_payload(company) -> Dict[str, Any]:
    """Valid create/update body for the `company` fixture."""
    return {
        "jobTitle": "Backend Engineer",
        "jobType": "Full-time",
        "location": "Berlin, Germany",
        "salary": 65000,
        "vacancies": 2,
        "experience": 3,
        "desc": "Build and run our job board APIs.",
        "requirements": "Python, SQL",
        "user": {"userId": str(company.id)},
    }


@pytest.fixture
def make_job(db_session, company):
    """Insert a posting directly; successive calls get increasing created_at."""
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(**overrides) -> JobPosting:
        counter["n"] += 1
        fields = dict(
            job_title="Engineer",
            job_type="Full-time",
            location="Remote",
            salary=50000,
            vacancies=1,
            experience=2,
            detail={"desc": "desc", "requirements": "reqs"},
            company_id=company.id,
            created_at=base + timedelta(minutes=counter["n"]),
        )
        fields.update(overrides)
        job = JobPosting(**fields)
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make


@pytest.fixture
def missing_id() -> str:
    return str(uuid.uuid4())
