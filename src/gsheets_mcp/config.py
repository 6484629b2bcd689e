"""Configuration management for the Google Sheets MCP server."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from . import __version__

load_dotenv()


def _env(name: str, default: Optional[str] = None):
    """Read an environment variable at instantiation time."""
    return lambda: os.getenv(name, default)


class Settings(BaseModel):
    """Application settings."""

    # Pre-issued OAuth token (JSON) plus optional client identity
    google_oauth_token: Optional[str] = Field(default_factory=_env("GOOGLE_OAUTH_TOKEN"))
    google_client_id: Optional[str] = Field(default_factory=_env("GOOGLE_CLIENT_ID"))
    google_client_secret: Optional[str] = Field(default_factory=_env("GOOGLE_CLIENT_SECRET"))

    # Client secrets file for the interactive installed-app flow
    google_credentials_path: Path = Field(
        default_factory=lambda: Path(os.getenv("GOOGLE_CREDENTIALS_PATH", "credentials.json"))
    )

    # Server settings
    server_name: str = Field(default_factory=_env("MCP_SERVER_NAME", "google-sheets-mcp"))
    server_version: str = __version__
    log_level: str = Field(default_factory=_env("LOG_LEVEL", "INFO"))


settings = Settings()
