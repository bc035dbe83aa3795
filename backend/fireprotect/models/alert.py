"""Alert model."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fireprotect.database import Base
from fireprotect.models._defaults import new_id, utcnow


class Alert(Base):
    """Incident synthesized from a sensor reading that breached a threshold."""

    __tablename__ = "alerts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    location_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("locations.id", ondelete="CASCADE"), nullable=False
    )
    alert_type: Mapped[str] = mapped_column(String(20), nullable=False)
    severity: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    sensor_values: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    resolved_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    location: Mapped["Location"] = relationship(back_populates="alerts")

    __table_args__ = (
        Index("ix_alerts_location_time", "location_id", "timestamp"),
        Index("ix_alerts_status", "status"),
    )


# Import here to avoid circular imports
from fireprotect.models.location import Location  # noqa: E402, F401
