"""Pydantic schemas for location API."""
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Address = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=512)]
# Any finite number; NaN and infinity cannot be plotted and SQLite stores NaN as NULL.
Coordinate = Annotated[float, Field(allow_inf_nan=False)]


class LocationCoordinates(BaseModel):
    """Payload for updating a location; coordinates are stored as given, without range checks."""

    latitude: Coordinate
    longitude: Coordinate


class LocationCreate(LocationCoordinates):
    """Payload for adding a location."""

    address: Address


class LocationResponse(BaseModel):
    """Location in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    address: str
    latitude: float
    longitude: float


class LocationUpdateResponse(BaseModel):
    """Result of PUT /locations/{address}."""

    address: str
    latitude: float
    longitude: float
    rows_affected: int


class LocationDeleteResponse(BaseModel):
    """Result of DELETE /locations/{address}."""

    address: str
    rows_affected: int
