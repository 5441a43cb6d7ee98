import datetime as dt
from sqlalchemy import Boolean, Date, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column
from ..session import Base


class AttendanceEntry(Base):
    __tablename__ = "attendance_log"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date | None] = mapped_column(Date, index=True)
    location_id: Mapped[str | None] = mapped_column(String(32))
    # Historical reference only, survives session removal
    session_id: Mapped[int | None] = mapped_column(Integer)
    class_id: Mapped[str | None] = mapped_column(String(32), index=True)
    coach_id: Mapped[str | None] = mapped_column(String(32))
    player_id: Mapped[str | None] = mapped_column(String(32), index=True)
    player_name: Mapped[str | None] = mapped_column(String(255))
    present: Mapped[bool] = mapped_column(Boolean, default=False)
    late: Mapped[bool] = mapped_column(Boolean, default=False)
    remarks: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
