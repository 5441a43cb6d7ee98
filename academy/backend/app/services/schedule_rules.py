from datetime import date

from sqlalchemy.orm import Session

from ..config import get_settings
from ..db import models
from .calendar import describe_weekdays, parse_weekdays, weekday_index


class ScheduleError(Exception):
    pass


class ScheduleValidationError(ScheduleError):
    """Missing or malformed input; nothing was written."""


class SchedulePolicyError(ScheduleError):
    """Closure day or blackout conflict."""


def configured_closed_weekdays() -> frozenset[int]:
    # An empty setting means the facility never closes
    return parse_weekdays(get_settings().closed_weekdays)


def ensure_open_day(day: date, closed_weekdays: frozenset[int]) -> None:
    if weekday_index(day) in closed_weekdays:
        raise SchedulePolicyError(
            f"Sessions are blocked on {describe_weekdays(closed_weekdays)}"
        )


def resolve_effective_location(
    db: Session, class_id: str, location_id: str | None
) -> str | None:
    if location_id:
        return location_id
    training_class = db.get(models.TrainingClass, class_id)
    if training_class is None:
        return None
    return training_class.location_id or None


__all__ = [
    "ScheduleError",
    "ScheduleValidationError",
    "SchedulePolicyError",
    "configured_closed_weekdays",
    "ensure_open_day",
    "resolve_effective_location",
]
