# File: tests/test_call_session_properties.py
"""Tests for CallSession model validation and derived properties."""

from datetime import timedelta, timezone

import pytest
from pydantic import ValidationError

from chingoohaja.core.config import get_settings
from chingoohaja.models import CallSession, SessionStatus
from chingoohaja.utils.datetime import ensure_utc, seconds_between, to_local
from tests.factories import T0, CallSessionFactory, at


class TestCallSessionModel:
    """Test model-level invariants."""

    def test_defaults(self):
        """Test new model defaults to READY with a generated ID."""
        session = CallSession(channel_id="room-1", token_issued_at=T0, token_expires_at=at(60))

        assert session.status == SessionStatus.READY
        assert session.id is not None
        assert session.joined_at is None
        assert session.failure_reason is None

    def test_expiry_must_follow_issue(self):
        """Test tokenExpiresAt > tokenIssuedAt is enforced."""
        with pytest.raises(ValidationError, match="must be after"):
            CallSession(channel_id="room-1", token_issued_at=T0, token_expires_at=T0)

    def test_status_must_be_defined_value(self):
        """Test unknown statuses are rejected on assignment."""
        session = CallSessionFactory.create()
        with pytest.raises(ValidationError):
            session.status = "PAUSED"
        assert session.status == SessionStatus.READY

    def test_repr(self):
        """Test repr shows channel and status."""
        session = CallSessionFactory.create(channel_id="room-9")
        assert "channel_id=room-9" in repr(session)
        assert "status=READY" in repr(session)


class TestDerivedProperties:
    """Test calculated values."""

    def test_is_token_expired_boundary(self, ready_session):
        """Test expiry is inclusive of tokenExpiresAt."""
        assert not ready_session.is_token_expired(at(59))
        assert ready_session.is_token_expired(at(60))

    def test_remaining_token_seconds(self, ready_session):
        """Test remaining time floors at zero."""
        assert ready_session.remaining_token_seconds(at(15)) == 45
        assert ready_session.remaining_token_seconds(at(90)) == 0

    def test_duration_none_before_join(self, ready_session):
        """Test duration is None if never joined."""
        assert ready_session.duration_seconds(at(30)) is None

    def test_duration_while_joined_uses_now(self, joined_session):
        """Test ongoing duration is measured to now."""
        assert joined_session.duration_seconds(at(40)) == 30

    def test_duration_after_leave(self):
        """Test finished duration is joined -> left."""
        session = CallSessionFactory.left()
        assert session.duration_seconds(at(500)) == 10

    def test_duration_after_failure_uses_ended_at(self):
        """Test failed session measures to the failure time."""
        session = CallSessionFactory.failed()
        assert session.duration_seconds(at(500)) == 5

    def test_active_and_terminal_flags(self, joined_session):
        """Test flags track status."""
        assert joined_session.is_active
        assert not joined_session.is_terminal


class TestDatetimeUtils:
    """Test timezone helpers."""

    def test_ensure_utc_converts_offsets(self):
        """Test aware datetimes are converted to UTC."""
        kst = to_local(T0)
        assert kst.utcoffset() == timedelta(hours=9)
        assert ensure_utc(kst) == T0
        assert ensure_utc(kst).tzinfo == timezone.utc

    def test_to_local_reads_timezone_at_call_time(self, monkeypatch):
        """Test APP_TIMEZONE changes apply without reimporting the module."""
        monkeypatch.setenv("APP_TIMEZONE", "UTC")
        assert to_local(T0).utcoffset() == timedelta(0)

        monkeypatch.setenv("APP_TIMEZONE", "America/New_York")
        get_settings.cache_clear()
        assert to_local(T0).utcoffset() == timedelta(hours=-5)

    def test_seconds_between_floors_at_zero(self):
        """Test negative spans are floored."""
        assert seconds_between(at(10), at(0)) == 0
        assert seconds_between(at(0), at(10)) == 10
