"""Location API routes.

Path operations are plain functions, so FastAPI runs each store call on its
worker threadpool and hands the result back to the event loop.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from location_store import DuplicateAddressError, LocationStore, get_default_store
from schemas.locations import (
    LocationCoordinates,
    LocationCreate,
    LocationDeleteResponse,
    LocationResponse,
    LocationUpdateResponse,
)

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[LocationResponse])
def list_locations(store: LocationStore = Depends(get_default_store)) -> list[LocationResponse]:
    """List all stored locations, for plotting."""
    return [LocationResponse.model_validate(loc) for loc in store.list_all()]


@router.get("/{address:path}", response_model=LocationResponse)
def get_location(address: str, store: LocationStore = Depends(get_default_store)) -> LocationResponse:
    """Look up a location by exact address."""
    loc = store.find(address.strip())
    if loc is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address not found in database")
    return LocationResponse.model_validate(loc)


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    body: LocationCreate,
    store: LocationStore = Depends(get_default_store),
) -> LocationResponse:
    """Add a location. An address that is already stored is a conflict, never an update."""
    if store.find(body.address) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Location already exists in the table")
    try:
        location_id = store.insert(body.address, body.latitude, body.longitude)
    except DuplicateAddressError as e:
        # Lost a race with a concurrent insert of the same address.
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Location already exists in the table",
        ) from e
    LOG.info("Added location %r", body.address)
    return LocationResponse(
        id=location_id,
        address=body.address,
        latitude=body.latitude,
        longitude=body.longitude,
    )


@router.put("/{address:path}", response_model=LocationUpdateResponse)
def update_location(
    address: str,
    body: LocationCoordinates,
    store: LocationStore = Depends(get_default_store),
) -> LocationUpdateResponse:
    """Overwrite the coordinates of an existing address."""
    address = address.strip()
    rows = store.update(address, body.latitude, body.longitude)
    if rows == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address not found to update")
    return LocationUpdateResponse(
        address=address,
        latitude=body.latitude,
        longitude=body.longitude,
        rows_affected=rows,
    )


@router.delete("/{address:path}", response_model=LocationDeleteResponse)
def delete_location(address: str, store: LocationStore = Depends(get_default_store)) -> LocationDeleteResponse:
    """Delete a location by address."""
    address = address.strip()
    rows = store.delete(address)
    if rows == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address not found to delete")
    return LocationDeleteResponse(address=address, rows_affected=rows)
