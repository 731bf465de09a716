# File: src/chingoohaja/core/session_lifecycle.py
"""Call session lifecycle: transition table and operations.

All operations take the current time explicitly and never read the clock.
Callers own a session exclusively while an operation runs; sessions share
no state with each other.

Expiry policy: ``join`` on an expired token raises ``ExpiredError`` and
leaves the session READY. The move to EXPIRED only happens in
``check_expiry``.
"""

from datetime import datetime, timedelta

from chingoohaja.core.config import get_settings
from chingoohaja.core.errors import ExpiredError, InvalidArgumentError, InvalidTransitionError
from chingoohaja.core.logging import get_logger
from chingoohaja.core.validators import (
    validate_channel_id,
    validate_connection_quality,
    validate_failure_reason,
    validate_ttl,
)
from chingoohaja.models.call_session import CallSession
from chingoohaja.models.enums import SessionEvent, SessionStatus
from chingoohaja.utils.datetime import ensure_utc

# Legal (status, event) -> next status. Anything missing is rejected.
TRANSITIONS: dict[tuple[SessionStatus, SessionEvent], SessionStatus] = {
    (SessionStatus.READY, SessionEvent.JOIN): SessionStatus.JOINED,
    (SessionStatus.READY, SessionEvent.EXPIRE): SessionStatus.EXPIRED,
    (SessionStatus.READY, SessionEvent.FAIL): SessionStatus.FAILED,
    (SessionStatus.JOINED, SessionEvent.LEAVE): SessionStatus.LEFT,
    (SessionStatus.JOINED, SessionEvent.EXPIRE): SessionStatus.EXPIRED,
    (SessionStatus.JOINED, SessionEvent.FAIL): SessionStatus.FAILED,
}

# Status each event aims for, used to describe rejected transitions
EVENT_TARGETS: dict[SessionEvent, SessionStatus] = {
    SessionEvent.JOIN: SessionStatus.JOINED,
    SessionEvent.LEAVE: SessionStatus.LEFT,
    SessionEvent.EXPIRE: SessionStatus.EXPIRED,
    SessionEvent.FAIL: SessionStatus.FAILED,
}


def transition(status: SessionStatus, event: SessionEvent) -> SessionStatus:
    """Pure transition function.

    Args:
        status: Current session status
        event: Triggering event

    Returns:
        The next status

    Raises:
        InvalidTransitionError: If the event is not legal from ``status``
    """
    try:
        return TRANSITIONS[(status, event)]
    except KeyError:
        raise InvalidTransitionError(
            current_status=status.value,
            target_status=EVENT_TARGETS[event].value,
            event=event.value,
        ) from None


def allowed_events(status: SessionStatus) -> list[SessionEvent]:
    """Events that are legal from ``status``."""
    return [event for (source, event) in TRANSITIONS if source == status]


def _session_logger(session: CallSession):
    return get_logger(__name__).bind(session_id=str(session.id), channel_id=session.channel_id)


def _apply(session: CallSession, event: SessionEvent, now: datetime) -> SessionStatus:
    """Run the transition for ``event`` and stamp terminal timestamps."""
    log = _session_logger(session)
    previous = session.status

    try:
        target = transition(previous, event)
    except InvalidTransitionError:
        log.warning(
            "session.transition_rejected",
            status=previous.value,
            transition_event=event.value,
        )
        raise

    session.status = target
    if target.is_terminal:
        session.ended_at = now

    log.info(
        f"session.{event.value.lower()}",
        from_status=previous.value,
        to_status=target.value,
    )
    return target


def _to_ttl(ttl: timedelta | int | float) -> timedelta:
    try:
        return validate_ttl(ttl)
    except ValueError as e:
        raise InvalidArgumentError(str(e), details={"ttl": str(ttl)}) from e


def issue_token(
    channel_id: str,
    ttl: timedelta | int | float | None,
    now: datetime,
) -> CallSession:
    """Create a READY session whose token is valid for ``ttl``.

    Args:
        channel_id: RTC channel the session is scoped to
        ttl: Token lifetime as timedelta or seconds (None: configured default)
        now: Issue time

    Raises:
        InvalidArgumentError: If ``ttl <= 0``, above the maximum, or the
            channel ID is malformed
    """
    if ttl is None:
        ttl = get_settings().token_ttl_seconds

    try:
        channel_id = validate_channel_id(channel_id)
    except ValueError as e:
        raise InvalidArgumentError(str(e), details={"channel_id": channel_id}) from e

    lifetime = _to_ttl(ttl)
    issued_at = ensure_utc(now)

    session = CallSession(
        channel_id=channel_id,
        status=SessionStatus.READY,
        token_issued_at=issued_at,
        token_expires_at=issued_at + lifetime,
    )

    _session_logger(session).info(
        "session.token_issued",
        token_expires_at=session.token_expires_at.isoformat(),
        ttl_seconds=int(lifetime.total_seconds()),
    )
    return session


def join(session: CallSession, now: datetime) -> CallSession:
    """READY -> JOINED.

    Raises:
        InvalidTransitionError: If the session is not READY
        ExpiredError: If the token has expired (status stays READY)
    """
    now = ensure_utc(now)

    if session.status == SessionStatus.READY and session.is_token_expired(now):
        _session_logger(session).warning(
            "session.join_expired",
            token_expires_at=session.token_expires_at.isoformat(),
        )
        raise ExpiredError(token_expires_at=session.token_expires_at, now=now)

    _apply(session, SessionEvent.JOIN, now)
    session.joined_at = now
    return session


def leave(session: CallSession, now: datetime) -> CallSession:
    """JOINED -> LEFT.

    Raises:
        InvalidTransitionError: If the session is not JOINED
    """
    now = ensure_utc(now)
    _apply(session, SessionEvent.LEAVE, now)
    session.left_at = now
    return session


def mark_failed(session: CallSession, reason: str, now: datetime) -> CallSession:
    """READY/JOINED -> FAILED, recording ``reason``.

    Raises:
        InvalidArgumentError: If ``reason`` is empty
        InvalidTransitionError: If the session is already terminal
    """
    try:
        reason = validate_failure_reason(reason)
    except ValueError as e:
        raise InvalidArgumentError(str(e), details={"reason": reason}) from e

    now = ensure_utc(now)
    _apply(session, SessionEvent.FAIL, now)
    session.failure_reason = reason
    return session


def check_expiry(session: CallSession, now: datetime) -> bool:
    """Expire the session if its token has run out.

    Idempotent: terminal sessions and unexpired tokens are left untouched.

    Returns:
        True if the session moved to EXPIRED on this call
    """
    now = ensure_utc(now)

    if session.is_terminal or not session.is_token_expired(now):
        return False

    _apply(session, SessionEvent.EXPIRE, now)
    return True


def refresh_token(
    session: CallSession,
    ttl: timedelta | int | float | None,
    now: datetime,
) -> CallSession:
    """Re-issue the token of a live session, extending its expiry.

    Terminal sessions are never revived.

    Raises:
        InvalidTransitionError: If the session is terminal
        ExpiredError: If the current token already expired
        InvalidArgumentError: If ``ttl`` is invalid
    """
    now = ensure_utc(now)

    if session.is_terminal:
        raise InvalidTransitionError(
            current_status=session.status.value,
            target_status=session.status.value,
            event="REFRESH",
        )

    if session.is_token_expired(now):
        raise ExpiredError(token_expires_at=session.token_expires_at, now=now)

    if ttl is None:
        ttl = get_settings().token_ttl_seconds
    lifetime = _to_ttl(ttl)

    session.token_issued_at = now
    session.token_expires_at = now + lifetime

    _session_logger(session).info(
        "session.token_refreshed",
        status=session.status.value,
        token_expires_at=session.token_expires_at.isoformat(),
    )
    return session


def update_connection_quality(
    session: CallSession,
    quality: int,
    bitrate: int,
    packet_loss: float,
) -> CallSession:
    """Record connection metrics for a JOINED session.

    Raises:
        InvalidTransitionError: If the session is not JOINED
        InvalidArgumentError: If a metric has the wrong type or is out of range
    """
    if not session.is_active:
        raise InvalidTransitionError(
            current_status=session.status.value,
            target_status=None,
            event="UPDATE_QUALITY",
        )

    try:
        validate_connection_quality(quality, bitrate, packet_loss)
    except ValueError as e:
        raise InvalidArgumentError(
            str(e),
            details={"quality": quality, "bitrate": bitrate, "packet_loss": packet_loss},
        ) from e

    # All three values are checked above, so none of these assignments can fail
    session.connection_quality = quality
    session.audio_bitrate = bitrate
    session.packet_loss_rate = float(packet_loss)
    return session
