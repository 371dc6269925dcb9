"""In-memory storage of live browser sessions."""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from browser_dispatch.launchers import CommandQueue, CommandQueueAware
from browser_dispatch.models import SessionResponse, SessionStatus
from browser_dispatch.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class BrowserSession:
    """A launcher together with the session it serves."""

    id: str
    browser: str
    launcher: Any
    command_queue: CommandQueue
    created_at: datetime
    status: SessionStatus = SessionStatus.CREATED

    def to_response(self) -> SessionResponse:
        return SessionResponse(
            id=self.id,
            browser=self.browser,
            launcher=type(self.launcher).__name__,
            status=self.status,
            command_queue_aware=isinstance(self.launcher, CommandQueueAware),
            created_at=self.created_at,
        )


class SessionStore:
    """Thread-safe in-memory store for sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, BrowserSession] = {}
        self._lock = asyncio.Lock()

    async def add(self, session: BrowserSession) -> None:
        """Add a session to the store."""
        async with self._lock:
            if session.id in self._sessions:
                raise ValueError(f"Session already exists: {session.id}")
            self._sessions[session.id] = session
            logger.debug("Session added to store", session_id=session.id)

    def get(self, session_id: str) -> BrowserSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    async def remove(self, session_id: str) -> BrowserSession | None:
        """Remove a session from the store."""
        async with self._lock:
            return self._sessions.pop(session_id, None)

    def get_all(self) -> list[BrowserSession]:
        """Get all sessions."""
        return list(self._sessions.values())

    @property
    def count(self) -> int:
        """Total number of sessions."""
        return len(self._sessions)
