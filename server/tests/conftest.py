from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import meetcross.models  # noqa: F401
from meetcross.auth.client import AuthClient
from meetcross.auth.deps import get_current_profile, get_session_factory
from meetcross.auth.identity import IdentityService
from meetcross.auth.session import SessionManager
from meetcross.core.db import Base, get_db
from meetcross.main import app
from meetcross.models.member import Member
from meetcross.models.profile import Profile
from meetcross.schemas.profile import ProfileRecord

SQLALCHEMY_TEST_URL = "sqlite+pysqlite:///:memory:"
engine = create_engine(SQLALCHEMY_TEST_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def override_get_db() -> Generator[Session, None, None]:
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session_factory() -> sessionmaker:
    return TestingSessionLocal


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def identity(session_factory) -> IdentityService:
    return IdentityService(session_factory)


@pytest.fixture()
def auth_client(identity) -> AuthClient:
    return AuthClient(identity)


@pytest.fixture()
def manager(auth_client, session_factory) -> SessionManager:
    return SessionManager(auth_client, session_factory)


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    app.dependency_overrides.clear()
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: TestingSessionLocal
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def authorize(client: TestClient):
    def _apply(profile: ProfileRecord):
        app.dependency_overrides[get_current_profile] = lambda: profile

    yield _apply
    app.dependency_overrides.pop(get_current_profile, None)


def _profile(session: Session, name: str, email: str, role: str) -> ProfileRecord:
    row = Profile(name=name, email=email, role=role)
    session.add(row)
    session.commit()
    return ProfileRecord.from_orm(row)


@pytest.fixture()
def admin_profile(db_session: Session) -> ProfileRecord:
    return _profile(db_session, "Grace Admin", "admin@example.com", "Admin")


@pytest.fixture()
def staff_profile(db_session: Session) -> ProfileRecord:
    return _profile(db_session, "Sam Staff", "staff@example.com", "Staff")


@pytest.fixture()
def treasurer_profile(db_session: Session) -> ProfileRecord:
    return _profile(db_session, "Tess Treasurer", "treasurer@example.com", "Treasurer")


@pytest.fixture()
def make_member(db_session: Session):
    def _create(first_name: str, last_name: str, **fields) -> Member:
        member = Member(first_name=first_name, last_name=last_name, status=fields.pop("status", "Active"), **fields)
        db_session.add(member)
        db_session.commit()
        db_session.refresh(member)
        return member

    return _create


@pytest.fixture()
def sample_member(make_member) -> Member:
    return make_member("Abeba", "Tesfaye", gender="Female", birth_date=date(1990, 1, 1))
