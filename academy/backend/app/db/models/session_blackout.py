from datetime import date, datetime
from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..session import Base


class SessionBlackout(Base):
    __tablename__ = "session_blackouts"
    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_session_blackout_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str | None] = mapped_column(Text)
    # NULL blocks every location
    location_id: Mapped[str | None] = mapped_column(ForeignKey("locations.id"))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    location = relationship("Location")

    @property
    def location_name(self) -> str | None:
        return self.location.name if self.location else None
