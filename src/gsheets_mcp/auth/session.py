"""Google OAuth credential resolution and caching."""

import json
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from ..config import Settings
from ..errors import CredentialError

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive.file",
]

TOKEN_URI = "https://oauth2.googleapis.com/token"

SETUP_INSTRUCTIONS = """
Google OAuth setup is required. Choose one of the following:

1. Environment variables:
   GOOGLE_CLIENT_ID=your_client_id
   GOOGLE_CLIENT_SECRET=your_client_secret
   GOOGLE_OAUTH_TOKEN=your_oauth_token

2. Client secrets file:
   Save the credentials.json downloaded from Google Cloud Console to
   {path}

Setup guide: https://developers.google.com/sheets/api/quickstart/python
"""


def _parse_expiry(token_info: dict) -> Optional[datetime]:
    """Read an expiry from either token format; google-auth wants naive UTC."""
    if token_info.get("expiry_date") is not None:
        seconds = float(token_info["expiry_date"]) / 1000
        return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(tzinfo=None)
    if token_info.get("expiry"):
        expiry = datetime.fromisoformat(str(token_info["expiry"]).replace("Z", "+00:00"))
        if expiry.tzinfo is not None:
            expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)
        return expiry
    return None


def credentials_from_token(
    raw_token: str,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
) -> Credentials:
    """Build credentials from a pre-issued token without touching the network.

    ``raw_token`` is either a JSON object (Google's token response with
    ``access_token``/``expiry_date`` or google-auth's authorized-user format
    with ``token``/``expiry``) or a bare access token string.
    """
    try:
        token_info = json.loads(raw_token)
    except json.JSONDecodeError:
        token_info = raw_token.strip()

    if isinstance(token_info, str):
        return Credentials(
            token=token_info,
            client_id=client_id,
            client_secret=client_secret,
            token_uri=TOKEN_URI,
            scopes=SCOPES,
        )

    if not isinstance(token_info, dict):
        raise CredentialError("GOOGLE_OAUTH_TOKEN must be a JSON object or an access token string")

    try:
        expiry = _parse_expiry(token_info)
    except (TypeError, ValueError) as e:
        raise CredentialError(f"Invalid token expiry in GOOGLE_OAUTH_TOKEN: {e}") from e

    scopes = token_info.get("scope") or token_info.get("scopes") or SCOPES
    if isinstance(scopes, str):
        scopes = scopes.split()

    return Credentials(
        token=token_info.get("access_token") or token_info.get("token"),
        refresh_token=token_info.get("refresh_token"),
        client_id=client_id or token_info.get("client_id"),
        client_secret=client_secret or token_info.get("client_secret"),
        token_uri=token_info.get("token_uri", TOKEN_URI),
        scopes=scopes,
        expiry=expiry,
    )


class CredentialSession:
    """Owns the process-wide authorization handle.

    ``acquire()`` resolves credentials on first use and returns the same
    object until ``clear()`` is called. Nothing is cached when resolution
    fails, so the next call tries again.
    """

    def __init__(self, settings_loader: Callable[[], Settings] = Settings):
        self._settings_loader = settings_loader
        self._credentials: Optional[Credentials] = None

    @property
    def credentials(self) -> Optional[Credentials]:
        """The memoized handle, if any."""
        return self._credentials

    def acquire(self) -> Credentials:
        """Return the cached handle, resolving it first if needed."""
        if self._credentials is not None:
            return self._credentials

        try:
            credentials = self._resolve(self._settings_loader())
        except Exception as e:
            logger.error(f"Error during authorization: {e}")
            raise

        self._credentials = credentials
        return credentials

    def clear(self):
        """Forget the cached handle so the next acquire() re-resolves."""
        self._credentials = None

    def _resolve(self, config: Settings) -> Credentials:
        if config.google_oauth_token:
            logger.info("Using OAuth token from GOOGLE_OAUTH_TOKEN")
            return credentials_from_token(
                config.google_oauth_token,
                client_id=config.google_client_id,
                client_secret=config.google_client_secret,
            )

        if config.google_credentials_path.exists():
            logger.info(f"Running local OAuth flow with {config.google_credentials_path}")
            flow = InstalledAppFlow.from_client_secrets_file(
                str(config.google_credentials_path), SCOPES
            )
            return flow.run_local_server(port=0)

        logger.warning(SETUP_INSTRUCTIONS.format(path=config.google_credentials_path.resolve()))
        # Calls made with an empty handle fail at first use with a RefreshError.
        return Credentials(token=None)
