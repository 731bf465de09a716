"""Tests for pydantic schema validation."""

import pytest
from pydantic import ValidationError

from chingoohaja.models import (
    CallSessionRead,
    ConnectionQualityUpdate,
    ConsentType,
    ConsentTypeRead,
    ReportReason,
    ReportReasonRead,
    ReportUserRequest,
    SessionStatus,
    TokenIssueRequest,
)
from tests.factories import CallSessionFactory


class TestTokenIssueRequest:
    """Test token request schema."""

    def test_valid_request(self):
        """Test channel and TTL are accepted."""
        req = TokenIssueRequest(channel_id="  room-1 ", expiration_seconds=600)
        assert req.channel_id == "room-1"
        assert req.ttl_seconds == 600

    def test_default_ttl(self, monkeypatch):
        """Test missing TTL falls back to configured default."""
        monkeypatch.setenv("CALL_TOKEN_TTL_SECONDS", "1800")
        req = TokenIssueRequest(channel_id="room-1")
        assert req.ttl_seconds == 1800

    @pytest.mark.parametrize("ttl", [0, -10, 86401])
    def test_invalid_ttl_rejected(self, ttl):
        """Test TTL must be in (0, max]."""
        with pytest.raises(ValidationError):
            TokenIssueRequest(channel_id="room-1", expiration_seconds=ttl)

    def test_invalid_channel_rejected(self):
        """Test channel ID validation."""
        with pytest.raises(ValidationError, match="cannot exceed 64"):
            TokenIssueRequest(channel_id="c" * 65)


class TestConnectionQualityUpdate:
    """Test connection quality schema."""

    def test_valid_metrics(self):
        """Test in-range metrics pass."""
        update = ConnectionQualityUpdate(quality=6, bitrate=0, packet_loss=100.0)
        assert update.quality == 6

    @pytest.mark.parametrize(
        "payload",
        [
            {"quality": 0, "bitrate": 10, "packet_loss": 0.0},
            {"quality": 3, "bitrate": -1, "packet_loss": 0.0},
            {"quality": 3, "bitrate": 10, "packet_loss": 101.0},
        ],
    )
    def test_out_of_range_rejected(self, payload):
        """Test range checks."""
        with pytest.raises(ValidationError):
            ConnectionQualityUpdate(**payload)


class TestReportUserRequest:
    """Test report submission schema."""

    def test_reason_parsed_case_insensitive(self):
        """Test reason code is normalized."""
        req = ReportUserRequest(reason="spam")
        assert req.reason is ReportReason.SPAM
        assert req.call_id is None
        assert req.details is None

    def test_reason_required(self):
        """Test missing reason fails."""
        with pytest.raises(ValidationError):
            ReportUserRequest(details="no reason")

    def test_unknown_reason_rejected(self):
        """Test closed set of reasons."""
        with pytest.raises(ValidationError):
            ReportUserRequest(reason="ABUSE")

    def test_details_max_length(self):
        """Test details cannot exceed 500 chars."""
        with pytest.raises(ValidationError):
            ReportUserRequest(reason="OTHER", details="x" * 501)

    def test_details_html_stripped(self):
        """Test details are sanitized."""
        req = ReportUserRequest(reason="OTHER", details="<b>욕설</b>을 사용했습니다.")
        assert req.details == "욕설을 사용했습니다."


class TestReadSchemas:
    """Test read-side schemas."""

    def test_call_session_read_from_model(self):
        """Test CallSessionRead reads attributes from a session."""
        session = CallSessionFactory.failed()
        read = CallSessionRead.model_validate(session)

        assert read.id == session.id
        assert read.status == SessionStatus.FAILED
        assert read.failure_reason == "network-error"

    def test_report_reason_listing(self):
        """Test all reasons listed with descriptions."""
        listing = ReportReasonRead.all()
        assert len(listing) == 7
        assert listing[0].code is ReportReason.INAPPROPRIATE_LANGUAGE
        assert listing[0].description == "부적절한 언어 사용"

    def test_consent_type_read(self):
        """Test consent type exposes its required flag."""
        read = ConsentTypeRead.from_type(ConsentType.OPTIONAL_DATA_USAGE)
        assert read.model_dump(mode="json") == {
            "code": "OPTIONAL_DATA_USAGE",
            "required": False,
        }
