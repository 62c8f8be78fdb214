"""Location model for DB persistence."""
from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Location(Base):
    """Location table: id, address, latitude, longitude."""

    __tablename__ = "location"
    # AUTOINCREMENT so SQLite never hands out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address: Mapped[str] = mapped_column(String(512), unique=True, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"Location(id={self.id!r}, address={self.address!r}, latitude={self.latitude!r}, longitude={self.longitude!r})"
