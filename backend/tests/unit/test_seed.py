"""Unit tests: seed list data quality and the seed loader."""
import pytest

from location_store.seed import SEED_LOCATIONS, load_seed_locations
from repositories.location_repository import count_locations, get_location_by_address

pytestmark = pytest.mark.unit


def test_seed_list_covers_more_than_one_hundred_places():
    """The reference dataset has over one hundred entries."""
    assert len(SEED_LOCATIONS) == 119


def test_seed_addresses_are_unique():
    """No address repeats, otherwise later entries would be dropped at load time."""
    addresses = [address for address, _, _ in SEED_LOCATIONS]
    assert len(addresses) == len(set(addresses))


def test_seed_entries_are_well_typed():
    """Every entry is a non-empty address with float coordinates."""
    for address, latitude, longitude in SEED_LOCATIONS:
        assert address and address == address.strip()
        assert isinstance(latitude, float)
        assert isinstance(longitude, float)


def test_load_seed_locations_inserts_every_entry(db_session):
    """load_seed_locations inserts each triple and returns the count."""
    entries = [("Seed One", 1.0, 2.0), ("Seed Two", 3.0, 4.0)]
    assert load_seed_locations(db_session, entries) == 2
    assert count_locations(db_session) == 2
    loc = get_location_by_address(db_session, "Seed Two")
    assert (loc.latitude, loc.longitude) == (3.0, 4.0)


def test_load_seed_locations_skips_repeated_address(db_session):
    """A repeated address fails on its own; the first entry and later entries still load."""
    entries = [("Dup", 1.0, 1.0), ("Dup", 9.0, 9.0), ("After Dup", 2.0, 2.0)]
    assert load_seed_locations(db_session, entries) == 2
    assert count_locations(db_session) == 2
    assert get_location_by_address(db_session, "Dup").latitude == 1.0
    assert get_location_by_address(db_session, "After Dup") is not None
