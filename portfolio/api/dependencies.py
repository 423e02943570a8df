"""
Request dependencies shared by the API routes.
"""

from typing import Optional
from fastapi import Header, HTTPException

from portfolio.core.auth import session_store, token_from_header


def optional_admin(authorization: Optional[str] = Header(None)) -> bool:
    """Whether the request carries a valid admin session."""
    return session_store.validate_session(token_from_header(authorization))


def require_admin(authorization: Optional[str] = Header(None)) -> str:
    """Reject requests without a valid admin session. Returns the session token."""
    token = token_from_header(authorization)
    if not session_store.validate_session(token):
        raise HTTPException(status_code=401, detail="Unauthorized")
    return token
