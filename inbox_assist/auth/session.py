"""Authenticated session contract and the request-header session resolver.

Identity is established upstream (reverse proxy / login service); this service
only reads the forwarded user id and email.
"""

from typing import Optional

from fastapi import Header
from pydantic import BaseModel


class SessionUser(BaseModel):
    id: str
    email: str


class AuthSession(BaseModel):
    user: SessionUser


def build_session(user_id: str | None, user_email: str | None) -> AuthSession | None:
    """Return a session when both identity fields are present and non-blank, else None."""
    user_id = (user_id or "").strip()
    user_email = (user_email or "").strip()
    if not user_id or not user_email:
        return None
    return AuthSession(user=SessionUser(id=user_id, email=user_email.lower()))


async def get_current_session(
    x_user_id: Optional[str] = Header(None),
    x_user_email: Optional[str] = Header(None),
) -> AuthSession | None:
    """FastAPI dependency: session from X-User-Id / X-User-Email headers, or None."""
    return build_session(x_user_id, x_user_email)
