"""Session management module."""

from browser_dispatch.sessions.manager import SessionManager, session_manager
from browser_dispatch.sessions.store import BrowserSession, SessionStore

__all__ = [
    "SessionManager",
    "session_manager",
    "BrowserSession",
    "SessionStore",
]
