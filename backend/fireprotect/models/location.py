"""Location model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fireprotect.database import Base
from fireprotect.models._defaults import new_id, utcnow


class Location(Base):
    """Physical monitoring site, optionally wired to a ThingSpeak channel."""

    __tablename__ = "locations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    region: Mapped[str] = mapped_column(String(200), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    thingspeak_channel_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    thingspeak_read_key: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # normal / warning / alert - informational, never derived by the evaluator
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="normal")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    alerts: Mapped[list["Alert"]] = relationship(
        back_populates="location",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def sensor_enabled(self) -> bool:
        return bool(self.thingspeak_channel_id) and bool(self.thingspeak_read_key)


# Import here to avoid circular imports
from fireprotect.models.alert import Alert  # noqa: E402, F401
