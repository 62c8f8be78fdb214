"""Unit tests: schema version bookkeeping on an in-memory database."""
import pytest
from alembic.script import ScriptDirectory
from sqlalchemy import inspect, text

from db import create_db_engine
from location_store.errors import SchemaVersionError
from location_store.migrations import (
    SCHEMA_VERSION,
    MigrationResult,
    alembic_config,
    current_version,
    migrate,
    revision_for,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def mem_engine():
    eng = create_db_engine("sqlite:///:memory:")
    yield eng
    eng.dispose()


def test_schema_version_matches_newest_revision():
    """SCHEMA_VERSION is the head of the shipped revision chain."""
    script = ScriptDirectory.from_config(alembic_config())
    assert int(script.get_current_head()) == SCHEMA_VERSION


def test_revision_for_pads_to_four_digits():
    assert revision_for(2) == "0002"


def test_migration_result_flags_recreated_table():
    assert MigrationResult(0, 2).table_recreated is True
    assert MigrationResult(1, 2).table_recreated is True
    assert MigrationResult(2, 2).table_recreated is False


def test_fresh_database_is_version_zero(mem_engine):
    with mem_engine.connect() as conn:
        assert current_version(conn) == 0


def test_migrate_creates_location_table(mem_engine):
    """First migrate creates the table and records the version."""
    with mem_engine.begin() as conn:
        result = migrate(conn)
        assert result == MigrationResult(0, SCHEMA_VERSION)
        columns = {c["name"] for c in inspect(conn).get_columns("location")}
        assert columns == {"id", "address", "latitude", "longitude"}
        assert current_version(conn) == SCHEMA_VERSION


def test_migrate_at_current_version_is_noop(mem_engine):
    with mem_engine.begin() as conn:
        migrate(conn)
        conn.execute(text("INSERT INTO location (address, latitude, longitude) VALUES ('Kept', 1.0, 2.0)"))
        result = migrate(conn)
        assert result.table_recreated is False
        assert conn.execute(text("SELECT COUNT(*) FROM location")).scalar() == 1


def test_migrate_to_newer_version_drops_rows(mem_engine):
    """Upgrading from version 1 recreates the table; old rows are gone."""
    with mem_engine.begin() as conn:
        migrate(conn, target_version=1)
        conn.execute(text("INSERT INTO location (address, latitude, longitude) VALUES ('Old', 1.0, 2.0)"))
        result = migrate(conn, target_version=2)
        assert result == MigrationResult(1, 2)
        assert conn.execute(text("SELECT COUNT(*) FROM location")).scalar() == 0


def test_migrate_refuses_downgrade(mem_engine):
    with mem_engine.begin() as conn:
        migrate(conn, target_version=2)
        with pytest.raises(SchemaVersionError):
            migrate(conn, target_version=1)
        assert current_version(conn) == 2


def test_unrecognized_revision_raises(mem_engine):
    with mem_engine.begin() as conn:
        conn.execute(text("CREATE TABLE alembic_version (version_num VARCHAR(32) NOT NULL)"))
        conn.execute(text("INSERT INTO alembic_version VALUES ('ea5f507c967c')"))
        with pytest.raises(SchemaVersionError):
            current_version(conn)


def test_unversioned_location_table_is_refused(mem_engine):
    """A location table with no recorded revision (e.g. PRAGMA user_version only) is left alone."""
    with mem_engine.begin() as conn:
        conn.execute(text("CREATE TABLE location (id INTEGER PRIMARY KEY, address TEXT NOT NULL UNIQUE)"))
        conn.execute(text("PRAGMA user_version = 2"))
        with pytest.raises(SchemaVersionError, match="no recorded schema version"):
            migrate(conn)
        assert current_version(conn) == 0
