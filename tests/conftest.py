"""Test configuration.

Most tests run against an in-memory SQLite database, which honours
DEFERRABLE INITIALLY DEFERRED foreign keys once ``PRAGMA foreign_keys`` is on.
Tests marked ``database`` talk to the PostgreSQL server in DATABASE_URL and
only run with TEST_DATABASE=1 (see ``make test``).
"""
import os

import dotenv

# Set *before* any project imports so app.config can build its settings.
# A DATABASE_URL from the environment or .env is kept for the PostgreSQL tests.
dotenv.load_dotenv()
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.db.session import Base, get_db, make_engine
from app.db.models.todo import Label, Todo, TodoLabel  # noqa: F401 - registers the tables
from app.main import app

RUN_DATABASE_TESTS = os.environ.get("TEST_DATABASE") == "1"


def pytest_collection_modifyitems(config, items):
    if RUN_DATABASE_TESTS:
        return
    skip = pytest.mark.skip(reason="needs PostgreSQL, set TEST_DATABASE=1")
    for item in items:
        if "database" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def engine():
    test_engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def pg_engine():
    pg = make_engine(settings.DATABASE_URL)
    yield pg
    pg.dispose()


@pytest.fixture
def pg_db(pg_engine):
    session = sessionmaker(bind=pg_engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
