from sqlalchemy.orm import Session
from ..db.session import SessionLocal
from ..db import models
from ..config import get_settings
from .admin import create_staff_user, ensure_admin_exists


def seed(session: Session) -> None:
    settings = get_settings()
    ensure_admin_exists(session, settings.default_admin_login, settings.default_admin_password)
    if session.query(models.AdminUser).filter_by(role=models.AdminRole.coach).count() == 0:
        create_staff_user(session, "supervisor", "supervisor2222", models.AdminRole.supervisor)
        create_staff_user(session, "coach", "coach1111", models.AdminRole.coach)
    if session.query(models.Location).count() == 0:
        session.add_all(
            [
                models.Location(id="LOC-1", name="Main Hall"),
                models.Location(id="LOC-2", name="Community Court"),
            ]
        )
        session.flush()
        session.add_all(
            [
                models.TrainingClass(
                    id="B-101", name="Beginners", status="Active",
                    location_id="LOC-1", day="Mon", court="1",
                ),
                models.TrainingClass(
                    id="B-201", name="Intermediate", status="Active",
                    location_id="LOC-2", day="Wed", court="2",
                ),
            ]
        )
    if session.query(models.Coach).count() == 0:
        session.add(models.Coach(id="C-1", name="Head Coach", status="Active"))
    session.commit()


if __name__ == "__main__":
    with SessionLocal() as session:
        seed(session)
        print("Seed data created")
