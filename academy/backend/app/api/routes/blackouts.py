from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models, schemas
from ...services import blackout_service
from ...services.schedule_rules import ScheduleError

router = APIRouter(prefix="/session-blackouts", tags=["session-blackouts"])


@router.get("", response_model=list[schemas.SessionBlackout])
def list_blackouts(
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.STAFF_ROLES)),
):
    return blackout_service.list_blackouts(db)


@router.post("", response_model=schemas.SessionBlackoutCreated)
def create_blackout(
    payload: schemas.SessionBlackoutCreate,
    db: Session = Depends(get_db),
    admin: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    try:
        blackout, cancelled = blackout_service.create_blackout(
            db,
            start_date=payload.start_date,
            end_date=payload.end_date,
            reason=payload.reason,
            location_id=payload.location_id,
            actor_id=admin.id,
        )
    except ScheduleError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return schemas.SessionBlackoutCreated(id=blackout.id, cancelled=cancelled)


@router.delete("/{blackout_id}")
def delete_blackout(
    blackout_id: int,
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.EDITOR_ROLES)),
):
    blackout_service.delete_blackout(db, blackout_id)
    return {"ok": True}
