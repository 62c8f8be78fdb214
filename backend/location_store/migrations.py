"""Schema versioning for the location table, driven by Alembic revisions.

Revision ids are zero-padded integers ("0001", "0002", ...) so the persisted
Alembic revision doubles as the schema version number. Every revision after
the first drops the location table and recreates it: bumping the version
discards stored locations, and the store reseeds the new table.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy import inspect
from sqlalchemy.engine import Connection

from location_store.errors import SchemaVersionError

LOG = logging.getLogger(__name__)

SCHEMA_VERSION = 2

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


@dataclass(frozen=True)
class MigrationResult:
    """Schema version before and after a migrate() call."""

    previous_version: int
    current_version: int

    @property
    def table_recreated(self) -> bool:
        """True when the location table was created or dropped and recreated."""
        return self.previous_version < self.current_version


def revision_for(version: int) -> str:
    return f"{version:04d}"


def alembic_config(connection: Optional[Connection] = None) -> Config:
    """Alembic config pointing at the bundled revisions, optionally bound to a connection."""
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    if connection is not None:
        cfg.attributes["connection"] = connection
    return cfg


def current_version(connection: Connection) -> int:
    """Persisted schema version, or 0 for a database that was never initialized."""
    revision = MigrationContext.configure(connection).get_current_revision()
    if revision is None:
        return 0
    try:
        return int(revision)
    except ValueError:
        raise SchemaVersionError(f"Unrecognized schema revision {revision!r}") from None


def migrate(connection: Connection, target_version: int = SCHEMA_VERSION) -> MigrationResult:
    """Bring the schema on ``connection`` to ``target_version``.

    Raises SchemaVersionError when the persisted version is newer than the
    target (a downgrade is refused rather than guessed at), or when a
    location table exists without a recorded version.
    """
    previous = current_version(connection)
    if previous > target_version:
        raise SchemaVersionError(
            f"Database schema version {previous} is newer than supported version {target_version}"
        )
    if previous == target_version:
        LOG.debug("Location schema already at version %d", previous)
        return MigrationResult(previous, previous)

    if previous == 0:
        if inspect(connection).has_table("location"):
            # Written by a tool that tracks its version elsewhere, e.g. PRAGMA user_version.
            raise SchemaVersionError(
                "Database has a location table but no recorded schema version; refusing to migrate it"
            )
        LOG.info("Creating location table at schema version %d", target_version)
    else:
        LOG.warning(
            "Migrating location table from schema version %d to %d; stored locations are dropped",
            previous,
            target_version,
        )
    command.upgrade(alembic_config(connection), revision_for(target_version))
    return MigrationResult(previous, target_version)
