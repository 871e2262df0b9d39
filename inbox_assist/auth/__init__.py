"""Auth package: session model and request session resolver."""

from inbox_assist.auth.session import AuthSession, SessionUser, build_session, get_current_session

__all__ = ["AuthSession", "SessionUser", "build_session", "get_current_session"]
