# Schemas package
from .health import HealthResponse
from .locations import (
    LocationCoordinates,
    LocationCreate,
    LocationDeleteResponse,
    LocationResponse,
    LocationUpdateResponse,
)

__all__ = [
    "HealthResponse",
    "LocationCoordinates",
    "LocationCreate",
    "LocationDeleteResponse",
    "LocationResponse",
    "LocationUpdateResponse",
]
