"""API route handlers."""
from fastapi import APIRouter, Depends

from location_store import LocationStore, get_default_store
from schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(store: LocationStore = Depends(get_default_store)) -> HealthResponse:
    """Health check endpoint: schema version and number of stored locations."""
    return HealthResponse(schema_version=store.schema_version, location_count=store.count())
