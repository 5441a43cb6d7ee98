import datetime as dt
from ..models.practice_session import SessionStatus
from pydantic import BaseModel, Field


class PracticeSessionWrite(BaseModel):
    # Required fields are checked by the service so errors read the same as other rejections
    name: str | None = None
    class_id: str | None = None
    coach_id: str | None = None
    location_id: str | None = None
    date: str | None = None
    time: str | None = None
    court: str | None = None
    notes: str | None = None


class PracticeSession(BaseModel):
    id: int
    name: str
    class_id: str
    coach_id: str | None = None
    location_id: str | None = None
    date: dt.date
    time: str | None = None
    court: str | None = None
    notes: str | None = None
    status: SessionStatus
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    class_name: str | None = None
    coach_name: str | None = None
    location_name: str | None = None

    class Config:
        from_attributes = True


class SessionGenerate(BaseModel):
    start_date: str | None = None
    end_date: str | None = None
    class_id: str | None = None
    location_id: str | None = None


class SkippedBreakdown(BaseModel):
    closed: int = 0
    blackout: int = 0
    duplicate: int = 0


class SessionGenerateResult(BaseModel):
    ok: bool = True
    created: int
    skipped: int
    skipped_breakdown: SkippedBreakdown = Field(default_factory=SkippedBreakdown)
