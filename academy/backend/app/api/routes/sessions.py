from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models, schemas
from ...services import session_generator, session_service
from ...services.schedule_rules import ScheduleError

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _bad_request(exc: ScheduleError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _fields(payload: schemas.PracticeSessionWrite) -> session_service.SessionFields:
    return session_service.SessionFields(**payload.model_dump())


@router.get("", response_model=list[schemas.PracticeSession])
def list_sessions(
    from_date: date | None = None,
    to_date: date | None = None,
    location_id: str | None = None,
    status_filter: models.SessionStatus | None = Query(None, alias="status"),
    day: str | None = None,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.STAFF_ROLES)),
):
    return session_service.list_sessions(
        db,
        from_date=from_date,
        to_date=to_date,
        location_id=location_id,
        status=status_filter,
        day=day,
    )


@router.post("")
def create_session(
    payload: schemas.PracticeSessionWrite,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    try:
        session = session_service.create_session(db, _fields(payload))
    except ScheduleError as exc:
        raise _bad_request(exc) from exc
    return {"ok": True, "id": session.id}


@router.post("/generate", response_model=schemas.SessionGenerateResult)
def generate_sessions(
    payload: schemas.SessionGenerate,
    db: Session = Depends(get_db),
    admin: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    try:
        result = session_generator.generate_sessions(
            db,
            start_date=payload.start_date,
            end_date=payload.end_date,
            class_id=payload.class_id,
            location_id=payload.location_id,
            actor_id=admin.id,
        )
    except ScheduleError as exc:
        raise _bad_request(exc) from exc
    return schemas.SessionGenerateResult(
        created=result.created,
        skipped=result.skipped,
        skipped_breakdown=schemas.SkippedBreakdown(**result.skipped_breakdown()),
    )


@router.put("/{session_id}")
def update_session(
    session_id: int,
    payload: schemas.PracticeSessionWrite,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    session = db.get(models.PracticeSession, session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    try:
        session_service.update_session(db, session, _fields(payload))
    except ScheduleError as exc:
        raise _bad_request(exc) from exc
    return {"ok": True}


@router.delete("/{session_id}")
def delete_session(
    session_id: int,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    session_service.delete_session(db, session_id)
    return {"ok": True}


@router.get("/{session_id}/participants", response_model=list[schemas.SessionParticipant])
def list_participants(
    session_id: int,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.STAFF_ROLES)),
):
    return session_service.list_participants(db, session_id)


@router.post("/{session_id}/participants")
def add_participant(
    session_id: int,
    payload: schemas.SessionParticipantCreate,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    if not db.get(models.PracticeSession, session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    try:
        session_service.add_participant(
            db,
            session_id,
            player_id=payload.player_id,
            player_name=payload.player_name,
        )
    except ScheduleError as exc:
        raise _bad_request(exc) from exc
    return {"ok": True}


@router.delete("/{session_id}/participants/{participant_id}")
def remove_participant(
    session_id: int,
    participant_id: int,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    session_service.remove_participant(db, session_id, participant_id)
    return {"ok": True}
