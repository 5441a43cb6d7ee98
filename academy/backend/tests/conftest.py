import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import deps
from app.api.routes import auth, blackouts, misc, sessions
from app.db.session import Base, get_db
from app.db import models


@pytest.fixture()
def db_session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def academy(db_session):
    """Two locations and one batch at each."""

    db_session.add_all(
        [
            models.Location(id="LOC-1", name="Main Hall"),
            models.Location(id="LOC-2", name="Community Court"),
            models.Coach(id="C-1", name="Ravi"),
        ]
    )
    db_session.flush()
    db_session.add_all(
        [
            models.TrainingClass(id="B-101", name="Beginners", location_id="LOC-1", day="Mon"),
            models.TrainingClass(id="B-201", name="Juniors", location_id="LOC-2", day="Wed"),
        ]
    )
    db_session.commit()
    return db_session


@pytest.fixture()
def make_session(academy):
    def _make(*, day: date, location_id: str | None = "LOC-1", **kwargs):
        values = {
            "name": "Evening",
            "class_id": "B-101",
            "time": "15.30-17.00",
            "status": models.SessionStatus.active,
        }
        values.update(kwargs)
        session = models.PracticeSession(date=day, location_id=location_id, **values)
        academy.add(session)
        academy.commit()
        academy.refresh(session)
        return session

    return _make

@pytest.fixture()
def api_client():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    TestingSessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )
    Base.metadata.create_all(bind=engine)

    current = {"role": models.AdminRole.admin}

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    def override_get_current_admin():
        return models.AdminUser(id=1, login="owner", role=current["role"])

    test_app = FastAPI()
    for router in (auth.router, blackouts.router, sessions.router, misc.router):
        test_app.include_router(router, prefix="/api/v1")
    test_app.dependency_overrides[get_db] = override_get_db
    test_app.dependency_overrides[deps.get_current_admin] = override_get_current_admin

    with TestClient(test_app) as client:
        yield client, TestingSessionLocal, current

    test_app.dependency_overrides.clear()
