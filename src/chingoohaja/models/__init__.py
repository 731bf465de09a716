"""Domain models package."""

from chingoohaja.models.call_session import CallSession
from chingoohaja.models.call_session_schemas import (
    CallSessionRead,
    ConnectionQualityUpdate,
    TokenIssueRequest,
)
from chingoohaja.models.enums import ConsentType, ReportReason, SessionEvent, SessionStatus
from chingoohaja.models.report_schemas import (
    ConsentTypeRead,
    ReportReasonRead,
    ReportUserRequest,
)

__all__ = [
    "CallSession",
    "CallSessionRead",
    "ConnectionQualityUpdate",
    "ConsentType",
    "ConsentTypeRead",
    "ReportReason",
    "ReportReasonRead",
    "ReportUserRequest",
    "SessionEvent",
    "SessionStatus",
    "TokenIssueRequest",
]
