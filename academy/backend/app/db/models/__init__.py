from .location import Location
from .training_class import TrainingClass
from .coach import Coach
from .player import Player
from .practice_session import PracticeSession, SessionStatus
from .session_blackout import SessionBlackout
from .session_participant import SessionParticipant
from .attendance import AttendanceEntry
from .admin_user import AdminUser, AdminRole
from .audit_log import AuditLog, ActorType
