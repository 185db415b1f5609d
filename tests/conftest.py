"""
Pytest configuration for the landing-site backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import AsyncMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("RESEND_API_KEY", "re_test_key")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("NOTIFICATION_TIMEZONE", "Europe/Paris")


@pytest.fixture
def admin_email(monkeypatch):
    """Pin the admin address regardless of the developer's .env file."""
    from backend.config import settings

    monkeypatch.setattr(settings, "ADMIN_EMAIL", "admin@example.com")
    return "admin@example.com"


@pytest.fixture
def no_admin_email(monkeypatch):
    """Simulate a deployment where ADMIN_EMAIL was never configured."""
    from backend.config import settings

    monkeypatch.setattr(settings, "ADMIN_EMAIL", "")


@pytest.fixture
def mock_transport():
    """
    Mock email transport.
    send() is an AsyncMock returning a fake Resend message id.
    """
    transport = AsyncMock()
    transport.send.return_value = "msg_test_123"
    return transport


@pytest.fixture
def failing_transport():
    """Mock email transport whose provider call fails."""
    transport = AsyncMock()
    transport.send.side_effect = RuntimeError("401 invalid API key re_test_key")
    return transport
