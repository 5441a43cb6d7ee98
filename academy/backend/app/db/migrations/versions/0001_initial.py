"""Initial scheduling schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "locations",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "classes",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("status", sa.String(length=32)),
        sa.Column("location_id", sa.String(length=32), sa.ForeignKey("locations.id")),
        sa.Column("day", sa.String(length=32)),
        sa.Column("court", sa.String(length=32)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "coaches",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("phone", sa.String(length=32)),
        sa.Column("status", sa.String(length=32)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "players",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("class_id", sa.String(length=32), sa.ForeignKey("classes.id")),
        sa.Column("level", sa.String(length=32)),
        sa.Column("status", sa.String(length=32)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    session_status = sa.Enum("Active", "Cancelled", name="sessionstatus")

    op.create_table(
        "sessions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("class_id", sa.String(length=32), sa.ForeignKey("classes.id"), nullable=False),
        sa.Column("coach_id", sa.String(length=32), sa.ForeignKey("coaches.id")),
        sa.Column("location_id", sa.String(length=32), sa.ForeignKey("locations.id")),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=32)),
        sa.Column("court", sa.String(length=32)),
        sa.Column("notes", sa.Text()),
        sa.Column("status", session_status, nullable=False, server_default="Active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_sessions_date", "sessions", ["date"])
    op.create_index("ix_sessions_location_id", "sessions", ["location_id"])

    op.create_table(
        "session_blackouts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.Text()),
        sa.Column("location_id", sa.String(length=32), sa.ForeignKey("locations.id")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("end_date >= start_date", name="ck_session_blackout_range"),
    )

    op.create_table(
        "session_participants",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "session_id",
            sa.Integer(),
            sa.ForeignKey("sessions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("player_id", sa.String(length=32)),
        sa.Column("player_name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(
        "ix_session_participants_session_id", "session_participants", ["session_id"]
    )

    op.create_table(
        "attendance_log",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date()),
        sa.Column("location_id", sa.String(length=32)),
        sa.Column("session_id", sa.Integer()),
        sa.Column("class_id", sa.String(length=32)),
        sa.Column("coach_id", sa.String(length=32)),
        sa.Column("player_id", sa.String(length=32)),
        sa.Column("player_name", sa.String(length=255)),
        sa.Column("present", sa.Boolean(), server_default=sa.false()),
        sa.Column("late", sa.Boolean(), server_default=sa.false()),
        sa.Column("remarks", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_attendance_log_date", "attendance_log", ["date"])
    op.create_index("ix_attendance_log_class_id", "attendance_log", ["class_id"])
    op.create_index("ix_attendance_log_player_id", "attendance_log", ["player_id"])

    admin_role = sa.Enum("admin", "supervisor", "coach", name="adminrole")

    op.create_table(
        "admin_users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("login", sa.String(length=64), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", admin_role, server_default="coach"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("last_login_at", sa.DateTime(timezone=True)),
    )

    actor_type = sa.Enum("admin", "system", name="actortype")

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("actor_type", actor_type),
        sa.Column("actor_id", sa.Integer()),
        sa.Column("action", sa.String(length=255)),
        sa.Column("payload", sa.JSON()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("audit_logs")
    op.drop_table("admin_users")
    op.drop_index("ix_attendance_log_player_id", table_name="attendance_log")
    op.drop_index("ix_attendance_log_class_id", table_name="attendance_log")
    op.drop_index("ix_attendance_log_date", table_name="attendance_log")
    op.drop_table("attendance_log")
    op.drop_index("ix_session_participants_session_id", table_name="session_participants")
    op.drop_table("session_participants")
    op.drop_table("session_blackouts")
    op.drop_index("ix_sessions_location_id", table_name="sessions")
    op.drop_index("ix_sessions_date", table_name="sessions")
    op.drop_table("sessions")
    op.drop_table("players")
    op.drop_table("coaches")
    op.drop_table("classes")
    op.drop_table("locations")
    sa.Enum(name="actortype").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="adminrole").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="sessionstatus").drop(op.get_bind(), checkfirst=True)
