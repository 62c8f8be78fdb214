# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from db import create_db_engine
from location_store import close_all, get_default_store, open_or_create
from main import app
from models import Base
from models.location import Location  # noqa: F401 - register with Base

# Small seed list so tests that do not care about the reference data stay fast.
TEST_SEED = (
    ("Seed Alpha", 43.65, -79.38),
    ("Seed Beta", 43.77, -79.23),
    ("Seed Gamma", 43.59, -79.64),
)


@pytest.fixture(scope="session")
def engine():
    """One in-memory engine for repository tests; create tables once."""
    eng = create_db_engine("sqlite:///:memory:")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    """Function-scoped session; each test runs in a transaction that is rolled back."""
    connection = engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, join_transaction_mode="create_savepoint")
    try:
        yield session
    finally:
        session.close()
        if trans.is_active:
            trans.rollback()
        connection.close()


@pytest.fixture
def db_path(tmp_path):
    """Path of a fresh store file for this test."""
    return tmp_path / "spotfinder_test.sqlite"


@pytest.fixture
def store(db_path):
    """Shared store on a fresh file, seeded with TEST_SEED; disposed on teardown."""
    try:
        yield open_or_create(db_path, seed_locations=TEST_SEED)
    finally:
        close_all()


@pytest.fixture
def empty_store(db_path):
    """Shared store on a fresh file with no seed data."""
    try:
        yield open_or_create(db_path, seed_locations=())
    finally:
        close_all()


@pytest.fixture
def client(store):
    """API test client; overrides get_default_store with the test store, cleared on teardown."""
    app.dependency_overrides[get_default_store] = lambda: store
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
