"""Location repository: get by address, list, count, create, update, delete."""
from typing import Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from models.location import Location


def get_location_by_address(session: Session, address: str) -> Optional[Location]:
    """Return the location with this exact address or None.

    Ordered by id so that a corrupt table with repeated addresses still yields
    the oldest row deterministically.
    """
    result = session.execute(
        select(Location).where(Location.address == address).order_by(Location.id).limit(1)
    )
    return result.scalars().first()


def list_locations(session: Session) -> list[Location]:
    """Return all locations."""
    result = session.execute(select(Location).order_by(Location.address))
    return list(result.scalars().all())


def count_locations(session: Session) -> int:
    """Return the number of locations."""
    result = session.execute(select(func.count()).select_from(Location))
    return result.scalar() or 0


def create_location(session: Session, address: str, latitude: float, longitude: float) -> Location:
    """Create a location, commit, and return it with its assigned id.

    Raises IntegrityError if the address already exists.
    """
    loc = Location(address=address, latitude=latitude, longitude=longitude)
    session.add(loc)
    session.commit()
    session.refresh(loc)
    return loc


def update_location_by_address(session: Session, address: str, latitude: float, longitude: float) -> int:
    """Overwrite latitude/longitude of the location with this address. Returns rows affected."""
    result = session.execute(
        update(Location)
        .where(Location.address == address)
        .values(latitude=latitude, longitude=longitude)
        .execution_options(synchronize_session=False)
    )
    session.commit()
    return result.rowcount


def delete_location_by_address(session: Session, address: str) -> int:
    """Delete the location with this address. Returns rows affected."""
    result = session.execute(
        delete(Location)
        .where(Location.address == address)
        .execution_options(synchronize_session=False)
    )
    session.commit()
    return result.rowcount
