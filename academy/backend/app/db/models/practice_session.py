import datetime as dt
from enum import Enum as PyEnum
from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..session import Base


class SessionStatus(str, PyEnum):
    active = "Active"
    cancelled = "Cancelled"


class PracticeSession(Base):
    __tablename__ = "sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    class_id: Mapped[str] = mapped_column(ForeignKey("classes.id"), nullable=False)
    coach_id: Mapped[str | None] = mapped_column(ForeignKey("coaches.id"))
    # Effective location: explicit location or the class location at write time
    location_id: Mapped[str | None] = mapped_column(ForeignKey("locations.id"), index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    time: Mapped[str | None] = mapped_column(String(32))
    court: Mapped[str | None] = mapped_column(String(32))
    notes: Mapped[str | None] = mapped_column(Text)
    status: Mapped[SessionStatus] = mapped_column(
        Enum(
            SessionStatus,
            name="sessionstatus",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        default=SessionStatus.active,
        server_default=SessionStatus.active.value,
        nullable=False,
    )
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    training_class = relationship("TrainingClass", back_populates="sessions")
    coach = relationship("Coach")
    location = relationship("Location")
    participants = relationship(
        "SessionParticipant",
        back_populates="session",
        cascade="all, delete-orphan",
    )

    @property
    def class_name(self) -> str | None:
        return self.training_class.name if self.training_class else None

    @property
    def coach_name(self) -> str | None:
        return self.coach.name if self.coach else None

    @property
    def location_name(self) -> str | None:
        return self.location.name if self.location else None
