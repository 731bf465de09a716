"""
Enums for domain models.
Enums provide type safety and clarity. Validation for categorical fields.
"""

import enum

from chingoohaja.core.errors import InvalidArgumentError


class SessionStatus(str, enum.Enum):
    """Call session lifecycle states."""

    READY = "READY"  # token issued, not yet in the channel
    JOINED = "JOINED"
    LEFT = "LEFT"
    EXPIRED = "EXPIRED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({SessionStatus.LEFT, SessionStatus.EXPIRED, SessionStatus.FAILED})


class SessionEvent(str, enum.Enum):
    """Events that drive call session transitions."""

    JOIN = "JOIN"
    LEAVE = "LEAVE"
    EXPIRE = "EXPIRE"
    FAIL = "FAIL"


class ReportReason(str, enum.Enum):
    """Reason codes for user-submitted reports."""

    INAPPROPRIATE_LANGUAGE = "INAPPROPRIATE_LANGUAGE"
    HARASSMENT = "HARASSMENT"
    SPAM = "SPAM"
    INAPPROPRIATE_CONTENT = "INAPPROPRIATE_CONTENT"
    OFFENSIVE_BEHAVIOR = "OFFENSIVE_BEHAVIOR"
    PRIVACY_VIOLATION = "PRIVACY_VIOLATION"
    OTHER = "OTHER"

    @property
    def description(self) -> str:
        return REPORT_REASON_DESCRIPTIONS[self]

    @classmethod
    def from_code(cls, code: str) -> "ReportReason":
        """Parse a reason code, case-insensitive."""
        if not isinstance(code, str) or not code.strip():
            raise InvalidArgumentError("Report reason is required")
        try:
            return cls(code.strip().upper())
        except ValueError as e:
            raise InvalidArgumentError(
                f"Unknown report reason: {code}",
                details={"reason": code, "allowed": [r.value for r in cls]},
            ) from e


REPORT_REASON_DESCRIPTIONS: dict[ReportReason, str] = {
    ReportReason.INAPPROPRIATE_LANGUAGE: "부적절한 언어 사용",
    ReportReason.HARASSMENT: "괴롭힘",
    ReportReason.SPAM: "스팸/광고",
    ReportReason.INAPPROPRIATE_CONTENT: "부적절한 내용",
    ReportReason.OFFENSIVE_BEHAVIOR: "불쾌한 행동",
    ReportReason.PRIVACY_VIOLATION: "개인정보 침해",
    ReportReason.OTHER: "기타",
}


class ConsentType(str, enum.Enum):
    """Categories of recorded user consent."""

    REQUIRED_PRIVACY = "REQUIRED_PRIVACY"  # personal data collection and use
    OPTIONAL_DATA_USAGE = "OPTIONAL_DATA_USAGE"  # de-identified analytics and research

    @property
    def is_required(self) -> bool:
        return self is ConsentType.REQUIRED_PRIVACY

    @classmethod
    def required_types(cls) -> list["ConsentType"]:
        """Consent types a user must agree to before using the service."""
        return [c for c in cls if c.is_required]
