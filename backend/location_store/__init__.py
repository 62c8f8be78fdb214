# Location store: schema migration, CRUD, seed data, shared instances
from location_store.errors import DuplicateAddressError, LocationStoreError, SchemaVersionError
from location_store.migrations import SCHEMA_VERSION, MigrationResult
from location_store.seed import SEED_LOCATIONS
from location_store.store import LocationStore, close, close_all, get_default_store, open_or_create

__all__ = [
    "DuplicateAddressError",
    "LocationStore",
    "LocationStoreError",
    "MigrationResult",
    "SCHEMA_VERSION",
    "SEED_LOCATIONS",
    "SchemaVersionError",
    "close",
    "close_all",
    "get_default_store",
    "open_or_create",
]
