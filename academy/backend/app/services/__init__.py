from . import (
    blackout_service,
    calendar,
    schedule_rules,
    session_generator,
    session_service,
)
__all__ = [
    "blackout_service",
    "calendar",
    "schedule_rules",
    "session_generator",
    "session_service",
]
