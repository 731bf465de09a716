# File: src/chingoohaja/models/call_session_schemas.py
"""Pydantic schemas for CallSession input and output."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chingoohaja.core.config import get_settings
from chingoohaja.core.validators import validate_channel_id
from chingoohaja.models.enums import SessionStatus


class TokenIssueRequest(BaseModel):
    """Schema for requesting a channel token."""

    channel_id: str = Field(..., description="RTC channel the session is scoped to")
    expiration_seconds: int | None = Field(
        None, gt=0, description="Optional: token TTL (default: configured TTL)"
    )

    @field_validator("channel_id")
    @classmethod
    def validate_channel(cls, v: str) -> str:
        """Validate channel identifier."""
        return validate_channel_id(v)

    @field_validator("expiration_seconds")
    @classmethod
    def validate_expiration(cls, v: int | None) -> int | None:
        """Cap TTL at the configured maximum."""
        if v is None:
            return None
        max_ttl = get_settings().max_token_ttl_seconds
        if v > max_ttl:
            raise ValueError(f"TTL cannot exceed {max_ttl} seconds")
        return v

    @property
    def ttl_seconds(self) -> int:
        return self.expiration_seconds or get_settings().token_ttl_seconds


class ConnectionQualityUpdate(BaseModel):
    """Schema for reporting connection quality while joined."""

    quality: int = Field(..., ge=1, le=6, description="1: excellent ... 6: down")
    bitrate: int = Field(..., ge=0, description="Audio bitrate (kbps)")
    packet_loss: float = Field(..., ge=0.0, le=100.0, description="Packet loss (%)")


class CallSessionRead(BaseModel):
    """Schema for reading call session data."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    channel_id: str
    status: SessionStatus
    token_issued_at: datetime
    token_expires_at: datetime
    joined_at: datetime | None = None
    left_at: datetime | None = None
    ended_at: datetime | None = None
    failure_reason: str | None = None
    connection_quality: int | None = None
    audio_bitrate: int | None = None
    packet_loss_rate: float | None = None
