"""Pydantic schemas for user reports and consent categories."""

from pydantic import BaseModel, Field, field_validator

from chingoohaja.core.validators import sanitize_html
from chingoohaja.models.enums import ConsentType, ReportReason

REPORT_DETAILS_MAX_LENGTH = 500


class ReportUserRequest(BaseModel):
    """Schema for reporting another user. Records a reason code only."""

    call_id: int | None = Field(None, ge=1, description="Optional: call the report refers to")
    reason: ReportReason
    details: str | None = Field(None, max_length=REPORT_DETAILS_MAX_LENGTH)

    @field_validator("reason", mode="before")
    @classmethod
    def parse_reason(cls, v):
        """Accept reason codes in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("details")
    @classmethod
    def validate_details(cls, v: str | None) -> str | None:
        """Sanitize free-text details."""
        return sanitize_html(v)


class ReportReasonRead(BaseModel):
    """Reason code with its display description."""

    code: ReportReason
    description: str

    @classmethod
    def from_reason(cls, reason: ReportReason) -> "ReportReasonRead":
        return cls(code=reason, description=reason.description)

    @classmethod
    def all(cls) -> list["ReportReasonRead"]:
        """Every reason, in declaration order."""
        return [cls.from_reason(r) for r in ReportReason]


class ConsentTypeRead(BaseModel):
    """Consent category with its required flag."""

    code: ConsentType
    required: bool

    @classmethod
    def from_type(cls, consent_type: ConsentType) -> "ConsentTypeRead":
        return cls(code=consent_type, required=consent_type.is_required)
