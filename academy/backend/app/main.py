import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api.routes import auth, blackouts, sessions, misc
from .db.session import Base, engine, SessionLocal
from .config import get_settings
from .services.admin import ensure_admin_exists
from .services.schedule_rules import configured_closed_weekdays


logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Sports Academy API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(blackouts.router, prefix="/api/v1")
app.include_router(sessions.router, prefix="/api/v1")
app.include_router(misc.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event() -> None:
    settings = get_settings()
    # Fail fast on a bad CLOSED_WEEKDAYS value
    closed = configured_closed_weekdays()
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        ensure_admin_exists(session, settings.default_admin_login, settings.default_admin_password)
    logger.info("Academy API started", extra={"closed_weekdays": sorted(closed)})
