"""Exceptions raised by the location store."""


class LocationStoreError(Exception):
    """Base class for location store failures."""


class DuplicateAddressError(LocationStoreError):
    """Insert of an address that is already stored."""

    def __init__(self, address: str):
        super().__init__(f"Location already exists: {address!r}")
        self.address = address


class SchemaVersionError(LocationStoreError):
    """Persisted schema version cannot be brought to the requested version."""
