from datetime import datetime
from pydantic import BaseModel


class SessionParticipantCreate(BaseModel):
    player_id: str | None = None
    player_name: str | None = None


class SessionParticipant(BaseModel):
    id: int
    session_id: int
    player_id: str | None = None
    player_name: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True
