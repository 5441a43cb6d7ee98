from datetime import datetime
from typing import Any
from pydantic import BaseModel
from ..models.audit_log import ActorType


class Activity(BaseModel):
    id: int
    actor_type: ActorType
    actor_id: int | None = None
    action: str
    payload: dict[str, Any] | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
