"""Shared fixtures for the EcoCampus test-suite."""

import os

os.environ.setdefault("ECOCAMPUS_DATABASE_URL", "sqlite+pysqlite://")
os.environ.setdefault("ECOCAMPUS_ROSTER_REFRESH_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ecocampus.core.database import Base, get_db
from ecocampus.main import create_app
from ecocampus.models import User
from ecocampus.schemas import RosterEntry
from ecocampus.services.roster_cache import roster_cache


@pytest.fixture
def scenario_roster():
    return [
        RosterEntry(id="a", display_name="Jane Doe", affiliation="SYBAF", lifetime_points=500),
        RosterEntry(id="b", display_name="John Roe", affiliation="FYBCOM", lifetime_points=700),
        RosterEntry(id="c", display_name="Amy Lee", affiliation="SYBAF", lifetime_points=300),
    ]


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    yield factory
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_users(db_session):
    users = [
        User(id="a", full_name="Jane Doe", email="jane@example.edu", course="SYBAF", lifetime_points=500),
        User(id="b", full_name="John Roe", email="john@example.edu", course="FYBCOM", lifetime_points=700),
        User(
            id="c",
            full_name="Amy Lee",
            email="amy@example.edu",
            course="SYBAF",
            lifetime_points=300,
            profile_img_url="https://img.example.edu/amy.png",
        ),
    ]
    db_session.add_all(users)
    db_session.commit()
    return users


@pytest.fixture(autouse=True)
def _reset_roster_cache():
    roster_cache.clear()
    yield
    roster_cache.clear()


@pytest.fixture
def client(session_factory):
    app = create_app()

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    return TestClient(app)
