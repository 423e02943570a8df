"""
Admin authentication with an in-memory bearer-token session store.

Sessions live in process memory only and are lost on restart.
"""

import hmac
import secrets
import time
from typing import Dict, Optional

from portfolio.config import config
from portfolio.utils.error_handling import ConfigurationError
from portfolio.utils.logger import logging


class SessionStore:
    """Maps opaque session tokens to their absolute expiry time."""

    def __init__(
        self,
        duration_seconds: int = config.SESSION_DURATION_SECONDS,
        purge_threshold: int = config.SESSION_PURGE_THRESHOLD,
    ):
        self.duration_seconds = duration_seconds
        self.purge_threshold = purge_threshold
        self._sessions: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def verify_password(self, password: str) -> bool:
        """
        Check a password against the configured admin password.

        Raises:
            ConfigurationError: If ADMIN_PASSWORD is not set
        """
        admin_password = config.ADMIN_PASSWORD
        if not admin_password:
            raise ConfigurationError("ADMIN_PASSWORD environment variable is not set")

        return hmac.compare_digest(password.encode("utf-8"), admin_password.encode("utf-8"))

    def create_session(self) -> str:
        """Create a new session and return its token."""
        token = secrets.token_hex(32)
        self._sessions[token] = time.time() + self.duration_seconds

        if len(self._sessions) > self.purge_threshold:
            self.purge_expired()

        return token

    def validate_session(self, token: Optional[str]) -> bool:
        """Check that a token exists and has not expired. Expired tokens are evicted."""
        if not token:
            return False

        expires_at = self._sessions.get(token)
        if expires_at is None:
            return False

        if time.time() > expires_at:
            self._sessions.pop(token, None)
            return False

        return True

    def delete_session(self, token: str) -> None:
        """Invalidate a session (logout)."""
        self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        """Remove expired sessions and return how many were removed."""
        now = time.time()
        expired = [token for token, expires_at in self._sessions.items() if now > expires_at]
        for token in expired:
            del self._sessions[token]

        if expired:
            logging.info(f"Purged {len(expired)} expired admin sessions")
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()


def token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Get the bearer token from an Authorization header value."""
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):]
    return None


# Process-wide session store
session_store = SessionStore()
