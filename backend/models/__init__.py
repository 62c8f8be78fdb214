"""SQLAlchemy declarative base; location_store models register here."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all DB models (also Alembic's target metadata)."""
