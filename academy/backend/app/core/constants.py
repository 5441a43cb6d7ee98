"""Common application-wide constants."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionSlot:
    name: str
    time: str


# The academy's two standard daily training slots
DEFAULT_SESSION_SLOTS: tuple[SessionSlot, ...] = (
    SessionSlot(name="Session 1", time="15.30-17.00"),
    SessionSlot(name="Session 2", time="17.00-18.30"),
)

# Notes marker added to sessions cancelled by a blackout window
BLACKOUT_CANCEL_MARKER = "Cancelled: blackout"
BLACKOUT_NOTE_SEPARATOR = " | "

AUTO_GENERATED_NOTE = "Auto-generated"

# Placeholder class used when generated sessions are not tied to a batch
SYSTEM_CLASS_ID = "SYS-SESSION"
SYSTEM_CLASS_NAME = "General Session"
SYSTEM_CLASS_STATUS = "System"


__all__ = [
    "SessionSlot",
    "DEFAULT_SESSION_SLOTS",
    "BLACKOUT_CANCEL_MARKER",
    "BLACKOUT_NOTE_SEPARATOR",
    "AUTO_GENERATED_NOTE",
    "SYSTEM_CLASS_ID",
    "SYSTEM_CLASS_NAME",
    "SYSTEM_CLASS_STATUS",
]
