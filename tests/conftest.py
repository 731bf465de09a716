# File: tests/conftest.py
"""Pytest configuration and fixtures."""

import pytest
from structlog.testing import capture_logs

from chingoohaja.core.config import get_settings
from chingoohaja.core.logging import set_session_id
from tests.factories import CallSessionFactory


@pytest.fixture(autouse=True)
def reset_context():
    """Fresh settings and session-id context for each test."""
    get_settings.cache_clear()
    set_session_id("no-session-id")
    yield
    get_settings.cache_clear()


@pytest.fixture
def captured_logs():
    """Capture structlog events emitted during a test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def ready_session():
    """READY session on room-1, issued at T0 with a 60s token."""
    return CallSessionFactory.create()


@pytest.fixture
def joined_session():
    """JOINED session on room-1, joined at T0+10s."""
    return CallSessionFactory.joined()


@pytest.fixture(params=["left", "expired", "failed"])
def terminal_session(request):
    """Each terminal status in turn."""
    return getattr(CallSessionFactory, request.param)()
