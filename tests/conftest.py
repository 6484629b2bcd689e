"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from gsheets_mcp.auth import CredentialSession
from gsheets_mcp.config import Settings
from gsheets_mcp.sheets import GoogleSheetsClient


@pytest.fixture
def make_settings(tmp_path: Path):
    """Build Settings with no credentials configured unless overridden."""

    def factory(**overrides) -> Settings:
        values = {
            "google_oauth_token": None,
            "google_client_id": None,
            "google_client_secret": None,
            "google_credentials_path": tmp_path / "credentials.json",
            "server_name": "google-sheets-mcp",
            "log_level": "INFO",
        }
        values.update(overrides)
        return Settings(**values)

    return factory


@pytest.fixture
def mock_session() -> Mock:
    """A credential session that always hands out the same handle."""
    session = Mock(spec=CredentialSession)
    session.acquire = Mock(return_value=Mock(name="credentials"))
    return session


@pytest.fixture
def sheets_service() -> Mock:
    """A stand-in for the object returned by googleapiclient's build()."""
    return Mock()


@pytest.fixture
def values_api(sheets_service: Mock) -> Mock:
    """Shortcut to ``service.spreadsheets().values()``."""
    return sheets_service.spreadsheets.return_value.values.return_value


@pytest.fixture
def sheets_client(mock_session: Mock, sheets_service: Mock):
    """A real GoogleSheetsClient talking to the mocked service."""
    with patch("gsheets_mcp.sheets.client.build", return_value=sheets_service) as mock_build:
        client = GoogleSheetsClient(mock_session)
        client.mock_build = mock_build
        yield client


# Configure pytest-asyncio
def pytest_configure(config):
    """Configure pytest with asyncio settings."""
    config.addinivalue_line("markers", "asyncio: mark test as async")
