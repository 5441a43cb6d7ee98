"""Facility blackout windows and their cascade onto scheduled sessions."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from ..core.constants import BLACKOUT_CANCEL_MARKER, BLACKOUT_NOTE_SEPARATOR
from ..db import models
from .calendar import format_date, parse_date_only
from .schedule_rules import ScheduleValidationError

logger = logging.getLogger(__name__)


def list_blackouts(db: Session) -> list[models.SessionBlackout]:
    return (
        db.query(models.SessionBlackout)
        .options(selectinload(models.SessionBlackout.location))
        .order_by(
            models.SessionBlackout.start_date.desc(),
            models.SessionBlackout.id.desc(),
        )
        .all()
    )


def blackout_covers(
    windows: Iterable[models.SessionBlackout],
    day: date,
    location_id: str | None,
) -> bool:
    return any(
        window.start_date <= day <= window.end_date
        and (not window.location_id or window.location_id == location_id)
        for window in windows
    )


def is_blocked(db: Session, day: date, location_id: str | None) -> bool:
    query = db.query(models.SessionBlackout.id).filter(
        models.SessionBlackout.start_date <= day,
        models.SessionBlackout.end_date >= day,
    )
    if location_id:
        query = query.filter(
            or_(
                models.SessionBlackout.location_id.is_(None),
                models.SessionBlackout.location_id == location_id,
            )
        )
    else:
        query = query.filter(models.SessionBlackout.location_id.is_(None))
    return db.query(query.exists()).scalar()


def annotate_cancellation(notes: str | None) -> str:
    if not notes:
        return BLACKOUT_CANCEL_MARKER
    if BLACKOUT_CANCEL_MARKER in notes:
        return notes
    return f"{notes}{BLACKOUT_NOTE_SEPARATOR}{BLACKOUT_CANCEL_MARKER}"


def cancel_sessions_in_window(
    db: Session,
    start_date: date,
    end_date: date,
    location_id: str | None,
) -> int:
    """Cancel every session inside the window without committing.

    A window without a location reaches sessions at every location.
    """

    query = db.query(models.PracticeSession).filter(
        models.PracticeSession.date >= start_date,
        models.PracticeSession.date <= end_date,
    )
    if location_id:
        query = query.filter(models.PracticeSession.location_id == location_id)
    sessions = query.all()
    for session in sessions:
        session.status = models.SessionStatus.cancelled
        session.notes = annotate_cancellation(session.notes)
    return len(sessions)


def create_blackout(
    db: Session,
    *,
    start_date: str | date | None,
    end_date: str | date | None,
    reason: str | None = None,
    location_id: str | None = None,
    actor_id: int | None = None,
) -> tuple[models.SessionBlackout, int]:
    if not start_date or not end_date:
        raise ScheduleValidationError("Date range required")
    start = parse_date_only(start_date)
    end = parse_date_only(end_date)
    if start is None or end is None:
        raise ScheduleValidationError("Invalid blackout date")
    if end < start:
        raise ScheduleValidationError("End date must be after start date")

    location_id = location_id or None
    try:
        blackout = models.SessionBlackout(
            start_date=start,
            end_date=end,
            reason=reason or None,
            location_id=location_id,
        )
        db.add(blackout)
        db.flush()
        cancelled = cancel_sessions_in_window(db, start, end, location_id)
        db.add(
            models.AuditLog(
                actor_type=models.ActorType.admin
                if actor_id is not None
                else models.ActorType.system,
                actor_id=actor_id,
                action="blackout_created",
                payload={
                    "blackout_id": blackout.id,
                    "start_date": format_date(start),
                    "end_date": format_date(end),
                    "location_id": location_id,
                    "cancelled": cancelled,
                },
            )
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(blackout)
    logger.info(
        "Blackout created",
        extra={
            "blackout_id": blackout.id,
            "location_id": location_id,
            "cancelled": cancelled,
        },
    )
    return blackout, cancelled


def delete_blackout(db: Session, blackout_id: int) -> None:
    # Sessions cancelled by this window stay cancelled
    blackout = db.get(models.SessionBlackout, blackout_id)
    if blackout is None:
        return
    db.delete(blackout)
    db.commit()
    logger.info("Blackout deleted", extra={"blackout_id": blackout_id})


__all__ = [
    "list_blackouts",
    "blackout_covers",
    "is_blocked",
    "annotate_cancellation",
    "cancel_sessions_in_window",
    "create_blackout",
    "delete_blackout",
]
