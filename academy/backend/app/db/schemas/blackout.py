from datetime import date, datetime
from pydantic import BaseModel


class SessionBlackoutCreate(BaseModel):
    start_date: str | None = None
    end_date: str | None = None
    reason: str | None = None
    location_id: str | None = None


class SessionBlackout(BaseModel):
    id: int
    start_date: date
    end_date: date
    reason: str | None = None
    location_id: str | None = None
    location_name: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class SessionBlackoutCreated(BaseModel):
    ok: bool = True
    id: int
    cancelled: int
