from .session import (
    PracticeSession,
    PracticeSessionWrite,
    SessionGenerate,
    SessionGenerateResult,
    SkippedBreakdown,
)
from .blackout import SessionBlackout, SessionBlackoutCreate, SessionBlackoutCreated
from .participant import SessionParticipant, SessionParticipantCreate
from .activity import Activity
