from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from sqlalchemy.orm import Session
from ...core import security
from ...core.auth import authenticate_admin
from ...db.session import get_db
from .. import deps


router = APIRouter(prefix="/auth", tags=["auth"])


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: dict


@router.post("/login", response_model=TokenResponse)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    admin = authenticate_admin(db, form_data.username, form_data.password)
    if not admin:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = security.create_access_token({"sub": str(admin.id), "role": admin.role.value})
    admin.last_login_at = datetime.now(timezone.utc)
    db.commit()
    return TokenResponse(
        access_token=token,
        user={"id": admin.id, "login": admin.login, "role": admin.role.value},
    )


@router.get("/me")
def me(current=Depends(deps.get_current_admin)):
    admin = current
    return {"id": admin.id, "login": admin.login, "role": admin.role.value}
