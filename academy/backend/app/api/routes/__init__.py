from . import (
    auth,
    blackouts,
    sessions,
    misc,
)

__all__ = [
    "auth",
    "blackouts",
    "sessions",
    "misc",
]
