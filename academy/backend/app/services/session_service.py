from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import Session, selectinload

from ..db import models
from .blackout_service import is_blocked
from .calendar import day_matches, parse_date_only, weekday_index
from .schedule_rules import (
    SchedulePolicyError,
    ScheduleValidationError,
    configured_closed_weekdays,
    ensure_open_day,
    resolve_effective_location,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionFields:
    name: str | None
    class_id: str | None
    date: str | date | None
    coach_id: str | None = None
    location_id: str | None = None
    time: str | None = None
    court: str | None = None
    notes: str | None = None


def _validated_values(
    db: Session,
    fields: SessionFields,
    closed_weekdays: frozenset[int] | None,
) -> dict:
    if not fields.name or not fields.class_id or not fields.date:
        raise ScheduleValidationError("Session name, batch, and date required")
    session_date = parse_date_only(fields.date)
    if session_date is None:
        raise ScheduleValidationError("Invalid session date")
    if closed_weekdays is None:
        closed_weekdays = configured_closed_weekdays()
    try:
        ensure_open_day(session_date, closed_weekdays)
        location_id = resolve_effective_location(db, fields.class_id, fields.location_id)
        if is_blocked(db, session_date, location_id):
            raise SchedulePolicyError("Sessions are blocked on this date")
    except SchedulePolicyError as exc:
        logger.info(
            "Session rejected",
            extra={"session_date": session_date.isoformat(), "reason": str(exc)},
        )
        raise
    return {
        "name": fields.name,
        "class_id": fields.class_id,
        "coach_id": fields.coach_id or None,
        "location_id": location_id,
        "date": session_date,
        "time": fields.time or None,
        "court": fields.court or None,
        "notes": fields.notes or None,
    }


def create_session(
    db: Session,
    fields: SessionFields,
    *,
    closed_weekdays: frozenset[int] | None = None,
) -> models.PracticeSession:
    values = _validated_values(db, fields, closed_weekdays)
    session = models.PracticeSession(status=models.SessionStatus.active, **values)
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def update_session(
    db: Session,
    session: models.PracticeSession,
    fields: SessionFields,
    *,
    closed_weekdays: frozenset[int] | None = None,
) -> models.PracticeSession:
    values = _validated_values(db, fields, closed_weekdays)
    for key, value in values.items():
        setattr(session, key, value)
    db.commit()
    db.refresh(session)
    return session


def delete_session(db: Session, session_id: int) -> None:
    # Attendance rows keep their session_id; they are historical records
    session = db.get(models.PracticeSession, session_id)
    if session is None:
        return
    db.delete(session)
    db.commit()


def list_sessions(
    db: Session,
    *,
    from_date: date | None = None,
    to_date: date | None = None,
    location_id: str | None = None,
    status: models.SessionStatus | None = None,
    day: str | None = None,
) -> list[models.PracticeSession]:
    query = db.query(models.PracticeSession).options(
        selectinload(models.PracticeSession.training_class),
        selectinload(models.PracticeSession.coach),
        selectinload(models.PracticeSession.location),
    )
    if from_date:
        query = query.filter(models.PracticeSession.date >= from_date)
    if to_date:
        query = query.filter(models.PracticeSession.date <= to_date)
    if location_id:
        query = query.filter(models.PracticeSession.location_id == location_id)
    if status:
        query = query.filter(models.PracticeSession.status == status)
    sessions = query.order_by(
        models.PracticeSession.date.desc(),
        models.PracticeSession.id.desc(),
    ).all()
    if day:
        sessions = [s for s in sessions if day_matches(day, weekday_index(s.date))]
    return sessions


def list_participants(db: Session, session_id: int) -> list[models.SessionParticipant]:
    return (
        db.query(models.SessionParticipant)
        .filter(models.SessionParticipant.session_id == session_id)
        .order_by(models.SessionParticipant.id.desc())
        .all()
    )


def add_participant(
    db: Session,
    session_id: int,
    *,
    player_id: str | None = None,
    player_name: str | None = None,
) -> models.SessionParticipant:
    name = (player_name or "").strip()
    if not name and player_id:
        player = db.get(models.Player, player_id)
        name = player.name if player else ""
    if not name:
        raise ScheduleValidationError("Student name required")
    if player_id:
        existing = (
            db.query(models.SessionParticipant)
            .filter_by(session_id=session_id, player_id=player_id)
            .first()
        )
        if existing:
            return existing
    participant = models.SessionParticipant(
        session_id=session_id,
        player_id=player_id or None,
        player_name=name,
    )
    db.add(participant)
    db.commit()
    db.refresh(participant)
    return participant


def remove_participant(db: Session, session_id: int, participant_id: int) -> None:
    participant = (
        db.query(models.SessionParticipant)
        .filter_by(id=participant_id, session_id=session_id)
        .first()
    )
    if participant is None:
        return
    db.delete(participant)
    db.commit()


__all__ = [
    "SessionFields",
    "create_session",
    "update_session",
    "delete_session",
    "list_sessions",
    "list_participants",
    "add_participant",
    "remove_participant",
]
