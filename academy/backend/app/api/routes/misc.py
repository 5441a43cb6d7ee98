from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models, schemas

router = APIRouter(tags=["misc"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/activities", response_model=list[schemas.Activity])
def list_activities(
    db: Session = Depends(get_db),
    _: models.AdminUser = Depends(deps.require_roles(*deps.STAFF_ROLES)),
):
    return (
        db.query(models.AuditLog)
        .order_by(models.AuditLog.id.desc())
        .limit(10)
        .all()
    )
