# File: src/chingoohaja/core/validators.py
"""Reusable validation utilities for input sanitization."""

import math
import re
from datetime import timedelta

from chingoohaja.core.config import get_settings

# Printable ASCII only (no control characters), as accepted by the RTC SDK
CHANNEL_ID_PATTERN = re.compile(r"^[\x20-\x7e]+$")
CHANNEL_ID_MAX_LENGTH = 64

QUALITY_MIN = 1
QUALITY_MAX = 6


def validate_channel_id(value: str | None) -> str:
    """
    Validate an RTC channel identifier.

    Args:
        value: Channel ID to validate

    Returns:
        Stripped channel ID

    Raises:
        ValueError: If not a string, empty, too long, or containing non-printable characters
    """
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Channel ID must be a string, got {type(value).__name__}")

    if value is None or not value.strip():
        raise ValueError("Channel ID cannot be empty")

    cleaned = value.strip()

    if len(cleaned) > CHANNEL_ID_MAX_LENGTH:
        raise ValueError(f"Channel ID cannot exceed {CHANNEL_ID_MAX_LENGTH} characters")

    if not CHANNEL_ID_PATTERN.match(cleaned):
        raise ValueError("Channel ID can only contain printable ASCII characters")

    return cleaned


def validate_ttl(value: timedelta | int | float, max_seconds: int | None = None) -> timedelta:
    """
    Validate a token time-to-live.

    Args:
        value: TTL as timedelta or number of seconds
        max_seconds: Upper bound (default: configured max TTL)

    Returns:
        TTL as timedelta

    Raises:
        ValueError: If not positive, not finite, or above the maximum
    """
    if max_seconds is None:
        max_seconds = get_settings().max_token_ttl_seconds

    if isinstance(value, bool):
        raise ValueError(f"Invalid TTL: {value!r}")

    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, (int, float)):
        seconds = float(value)
    else:
        raise ValueError(f"Invalid TTL: {value!r}")

    if math.isnan(seconds) or math.isinf(seconds):
        raise ValueError(f"Invalid TTL: {value!r}")

    if seconds <= 0:
        raise ValueError("TTL must be greater than 0 seconds")

    if seconds > max_seconds:
        raise ValueError(f"TTL cannot exceed {max_seconds} seconds")

    return timedelta(seconds=seconds)


def validate_failure_reason(value: str | None, max_length: int = 255) -> str:
    """Validate a connection failure reason."""
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Failure reason must be a string, got {type(value).__name__}")

    if value is None or not value.strip():
        raise ValueError("Failure reason cannot be empty")

    cleaned = value.strip()
    if len(cleaned) > max_length:
        raise ValueError(f"Failure reason cannot exceed {max_length} characters")
    return cleaned


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_connection_quality(quality: int, bitrate: int, packet_loss: float) -> None:
    """
    Validate connection quality metrics.

    Quality follows the RTC network quality scale: 1 (excellent) to 6 (down).

    Raises:
        ValueError: If any metric has the wrong type or is out of range
    """
    if not _is_int(quality) or not _is_int(bitrate):
        raise ValueError("Quality and bitrate must be integers")

    if isinstance(packet_loss, bool) or not isinstance(packet_loss, (int, float)):
        raise ValueError("Packet loss rate must be a number")

    if quality < QUALITY_MIN or quality > QUALITY_MAX:
        raise ValueError(f"Quality must be between {QUALITY_MIN} and {QUALITY_MAX}")

    if bitrate < 0:
        raise ValueError("Bitrate cannot be negative")

    if math.isnan(packet_loss) or packet_loss < 0.0 or packet_loss > 100.0:
        raise ValueError("Packet loss rate must be between 0.0 and 100.0")


def sanitize_html(value: str | None) -> str | None:
    """
    Strip/escape HTML tags to prevent XSS.

    Args:
        value: Text that may contain HTML

    Returns:
        Sanitized text or None if empty
    """
    if not value:
        return None

    # Remove all HTML tags
    cleaned = re.sub(r"<[^>]+>", "", value)

    # Escape remaining special chars
    cleaned = (
        cleaned.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )

    return cleaned.strip() if cleaned.strip() else None
