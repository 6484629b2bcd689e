"""Google OAuth credential handling."""

from .session import CredentialSession, SCOPES, credentials_from_token

__all__ = ["CredentialSession", "SCOPES", "credentials_from_token"]
