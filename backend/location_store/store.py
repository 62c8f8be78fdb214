"""Address-keyed location store: one instance per backing database, shared process-wide."""
import logging
import threading
from pathlib import Path
from typing import Iterable, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, resolve_database_url
from location_store.errors import DuplicateAddressError
from location_store.migrations import SCHEMA_VERSION, MigrationResult, migrate
from location_store.seed import SEED_LOCATIONS, load_seed_locations
from models.location import Location
from repositories import location_repository as repo
from utils.config import DATABASE_URL

LOG = logging.getLogger(__name__)

_UNIQUE_ADDRESS_VIOLATION = "UNIQUE constraint failed: location.address"


class LocationStore:
    """CRUD over the location table of one SQLite database.

    Every operation runs in its own short-lived session and is a single
    atomic statement, so instances can be shared between threads. Records
    returned are detached from any session.
    """

    def __init__(
        self,
        url: str,
        *,
        schema_version: int = SCHEMA_VERSION,
        seed_locations: Iterable[tuple[str, float, float]] = SEED_LOCATIONS,
    ):
        self.url = url
        self.schema_version = schema_version
        self.seed_locations = tuple(seed_locations)
        self._engine = create_db_engine(url)
        self._session_factory = sessionmaker(bind=self._engine, autoflush=False, expire_on_commit=False)

    def open(self) -> MigrationResult:
        """Migrate the schema and seed a freshly (re)created table in one transaction."""
        with self._engine.begin() as connection:
            result = migrate(connection, self.schema_version)
            if result.table_recreated:
                session = Session(
                    bind=connection,
                    join_transaction_mode="create_savepoint",
                    expire_on_commit=False,
                )
                try:
                    load_seed_locations(session, self.seed_locations)
                finally:
                    session.close()
        return result

    def dispose(self) -> None:
        """Close pooled connections."""
        self._engine.dispose()

    def find(self, address: str) -> Optional[Location]:
        with self._session_factory() as session:
            return repo.get_location_by_address(session, address)

    def insert(self, address: str, latitude: float, longitude: float) -> int:
        """Store a new location and return its id. Raises DuplicateAddressError if the address exists."""
        with self._session_factory() as session:
            try:
                loc = repo.create_location(session, address, latitude, longitude)
            except IntegrityError as e:
                # Driver message only; str(e) also carries the bound address.
                if _UNIQUE_ADDRESS_VIOLATION in str(e.orig):
                    raise DuplicateAddressError(address) from e
                raise
        LOG.debug("Inserted location %r with id %d", address, loc.id)
        return loc.id

    def update(self, address: str, latitude: float, longitude: float) -> int:
        """Overwrite coordinates for ``address``. Returns 1 if updated, 0 if no such address."""
        with self._session_factory() as session:
            rows = repo.update_location_by_address(session, address, latitude, longitude)
        LOG.debug("Updated %d location(s) for %r", rows, address)
        return rows

    def delete(self, address: str) -> int:
        """Remove ``address``. Returns 1 if deleted, 0 if no such address."""
        with self._session_factory() as session:
            rows = repo.delete_location_by_address(session, address)
        LOG.debug("Deleted %d location(s) for %r", rows, address)
        return rows

    def count(self) -> int:
        with self._session_factory() as session:
            return repo.count_locations(session)

    def list_all(self) -> list[Location]:
        with self._session_factory() as session:
            return repo.list_locations(session)


_stores: dict[str, LocationStore] = {}
_stores_lock = threading.Lock()


def open_or_create(location: Union[str, Path], **store_kw) -> LocationStore:
    """Return the shared store for ``location`` (a SQLAlchemy URL or a file path).

    The first call opens the store (creating, migrating and seeding as
    needed); later calls, including concurrent ones, get the same instance.
    ``store_kw`` only applies to that first call.
    """
    url = resolve_database_url(location)
    store = _stores.get(url)
    if store is not None:
        return store
    with _stores_lock:
        store = _stores.get(url)
        if store is None:
            store = LocationStore(url, **store_kw)
            try:
                store.open()
            except Exception:
                store.dispose()
                raise
            _stores[url] = store
            LOG.info("Opened location store at %s", url)
    return store


def close(location: Union[str, Path]) -> None:
    """Dispose and forget the shared store for ``location``, if any."""
    url = resolve_database_url(location)
    with _stores_lock:
        store = _stores.pop(url, None)
    if store is not None:
        store.dispose()


def close_all() -> None:
    """Dispose and forget every shared store (app shutdown, tests)."""
    with _stores_lock:
        stores = list(_stores.values())
        _stores.clear()
    for store in stores:
        store.dispose()


def get_default_store() -> LocationStore:
    """Shared store for the configured DATABASE_URL (FastAPI dependency)."""
    return open_or_create(DATABASE_URL)
