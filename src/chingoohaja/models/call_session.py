# File: src/chingoohaja/models/call_session.py
"""CallSession model for one participant's RTC channel access window."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chingoohaja.models.enums import SessionStatus
from chingoohaja.utils.datetime import ensure_utc, seconds_between


class CallSession(BaseModel):
    """Call session model.

    Created in READY when a token is issued. Mutated only through
    ``chingoohaja.core.session_lifecycle``; callers must hold exclusive
    access to an instance for the duration of an operation.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    channel_id: str = Field(..., min_length=1, max_length=64)
    status: SessionStatus = SessionStatus.READY

    token_issued_at: datetime
    token_expires_at: datetime

    joined_at: datetime | None = None
    left_at: datetime | None = None
    ended_at: datetime | None = None

    failure_reason: str | None = None

    # Connection quality (1: excellent ... 6: down)
    connection_quality: int | None = Field(None, ge=1, le=6)
    audio_bitrate: int | None = Field(None, ge=0)
    packet_loss_rate: float | None = Field(None, ge=0.0, le=100.0)

    @model_validator(mode="after")
    def validate_token_window(self) -> "CallSession":
        """Token must expire strictly after it was issued."""
        if ensure_utc(self.token_expires_at) <= ensure_utc(self.token_issued_at):
            raise ValueError("token_expires_at must be after token_issued_at")
        return self

    # CALCULATED PROPERTIES
    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.JOINED

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def is_token_expired(self, now: datetime) -> bool:
        """True once ``now`` has reached the token expiry."""
        return ensure_utc(now) >= ensure_utc(self.token_expires_at)

    def remaining_token_seconds(self, now: datetime) -> int:
        """Seconds until the token expires, floored at 0."""
        return seconds_between(now, self.token_expires_at)

    def duration_seconds(self, now: datetime) -> int | None:
        """Time spent in the channel.

        Measured from ``joined_at`` to ``left_at`` (or ``ended_at``, or ``now``
        while still joined). None if the session never joined.
        """
        if self.joined_at is None:
            return None

        end = self.left_at or self.ended_at or now
        return seconds_between(self.joined_at, end)

    def __repr__(self) -> str:
        return (
            f"<CallSession(id={self.id}, channel_id={self.channel_id}, "
            f"status={self.status.value})>"
        )
