"""Batch materialization of practice sessions over a date range.

Each open day gets one session per configured slot. Closure days, blackout
windows and already scheduled slots are skipped; the whole batch is committed
once so a failure part way through leaves nothing behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from sqlalchemy.orm import Session

from ..core.constants import (
    AUTO_GENERATED_NOTE,
    DEFAULT_SESSION_SLOTS,
    SYSTEM_CLASS_ID,
    SYSTEM_CLASS_NAME,
    SYSTEM_CLASS_STATUS,
    SessionSlot,
)
from ..db import models
from .blackout_service import blackout_covers
from .calendar import format_date, iter_dates, parse_date_only, weekday_index
from .schedule_rules import (
    ScheduleValidationError,
    configured_closed_weekdays,
    resolve_effective_location,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationResult:
    created: int = 0
    closed: int = 0
    blackout: int = 0
    duplicate: int = 0
    sessions: list[models.PracticeSession] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return self.closed + self.blackout + self.duplicate

    def skipped_breakdown(self) -> dict[str, int]:
        return {
            "closed": self.closed,
            "blackout": self.blackout,
            "duplicate": self.duplicate,
        }


def ensure_system_class(db: Session) -> str:
    if db.get(models.TrainingClass, SYSTEM_CLASS_ID) is None:
        db.add(
            models.TrainingClass(
                id=SYSTEM_CLASS_ID,
                name=SYSTEM_CLASS_NAME,
                status=SYSTEM_CLASS_STATUS,
                location_id=None,
                day=None,
                court=None,
            )
        )
        db.flush()
    return SYSTEM_CLASS_ID


def _slot_taken(db: Session, day: date, time: str, location_id: str | None) -> bool:
    query = db.query(models.PracticeSession.id).filter(
        models.PracticeSession.date == day,
        models.PracticeSession.time == time,
        models.PracticeSession.status != models.SessionStatus.cancelled,
    )
    if location_id:
        query = query.filter(models.PracticeSession.location_id == location_id)
    else:
        query = query.filter(models.PracticeSession.location_id.is_(None))
    return db.query(query.exists()).scalar()


def generate_sessions(
    db: Session,
    *,
    start_date: str | date | None,
    end_date: str | date | None,
    class_id: str | None = None,
    location_id: str | None = None,
    slots: Sequence[SessionSlot] = DEFAULT_SESSION_SLOTS,
    closed_weekdays: frozenset[int] | None = None,
    actor_id: int | None = None,
) -> GenerationResult:
    start = parse_date_only(start_date)
    end = parse_date_only(end_date)
    if start is None or end is None:
        raise ScheduleValidationError("Start and end date required")
    if end < start:
        raise ScheduleValidationError("End date must be after start date")
    if closed_weekdays is None:
        closed_weekdays = configured_closed_weekdays()

    result = GenerationResult()
    try:
        session_class_id = class_id or ensure_system_class(db)
        location_id = resolve_effective_location(db, session_class_id, location_id)
        # Snapshot; windows added mid-run are not consulted
        blackouts = db.query(models.SessionBlackout).all()

        for day in iter_dates(start, end):
            if weekday_index(day) in closed_weekdays:
                result.closed += len(slots)
                continue
            if blackout_covers(blackouts, day, location_id):
                result.blackout += len(slots)
                continue
            for slot in slots:
                if _slot_taken(db, day, slot.time, location_id):
                    result.duplicate += 1
                    continue
                session = models.PracticeSession(
                    name=slot.name,
                    class_id=session_class_id,
                    coach_id=None,
                    location_id=location_id,
                    date=day,
                    time=slot.time,
                    court=None,
                    notes=AUTO_GENERATED_NOTE,
                    status=models.SessionStatus.active,
                )
                db.add(session)
                # Later duplicate checks in this batch must see it
                db.flush()
                result.sessions.append(session)
                result.created += 1

        db.add(
            models.AuditLog(
                actor_type=models.ActorType.admin
                if actor_id is not None
                else models.ActorType.system,
                actor_id=actor_id,
                action="sessions_generated",
                payload={
                    "start_date": format_date(start),
                    "end_date": format_date(end),
                    "class_id": session_class_id,
                    "location_id": location_id,
                    "created": result.created,
                    "skipped": result.skipped,
                },
            )
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Sessions generated",
        extra={
            "start_date": format_date(start),
            "end_date": format_date(end),
            "created": result.created,
            "skipped": result.skipped,
        },
    )
    return result


__all__ = ["GenerationResult", "ensure_system_class", "generate_sessions"]
