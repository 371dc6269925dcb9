"""Browser session manager."""

import uuid
from datetime import UTC, datetime

from browser_dispatch.dispatch import BrowserLauncherFactory, browser_launcher_factory
from browser_dispatch.launchers import CommandQueue
from browser_dispatch.models import SessionStatus
from browser_dispatch.sessions.store import BrowserSession, SessionStore
from browser_dispatch.utils.logging import get_logger

logger = get_logger(__name__)


class SessionManager:
    """Creates sessions from browser specifiers and tears them down."""

    def __init__(
        self,
        factory: BrowserLauncherFactory | None = None,
        store: SessionStore | None = None,
    ) -> None:
        self.factory = factory if factory is not None else browser_launcher_factory
        self.store = store if store is not None else SessionStore()

    async def create_session(self, browser: str, start_url: str | None = None) -> BrowserSession:
        """
        Resolve a launcher for a new session, optionally launching it.

        Args:
            browser: Browser specifier, e.g. ``*firefox``
            start_url: URL to open right away; the browser is not started when None

        Returns:
            The stored session

        Raises:
            DispatchError: If the specifier cannot be resolved to a launcher
        """
        session_id = uuid.uuid4().hex
        queue = CommandQueue(session_id)
        launcher = self.factory.get_browser_launcher(browser, session_id, queue)

        session = BrowserSession(
            id=session_id,
            browser=browser,
            launcher=launcher,
            command_queue=queue,
            created_at=datetime.now(UTC),
        )
        await self.store.add(session)

        logger.info(
            "Browser session created",
            session_id=session_id,
            browser=browser,
            launcher=type(launcher).__name__,
        )

        if start_url is not None:
            try:
                await launcher.launch_remote_session(start_url)
            except Exception:
                await self.store.remove(session_id)
                raise
            session.status = SessionStatus.LAUNCHED

        return session

    def get_session(self, session_id: str) -> BrowserSession | None:
        """Get an existing session."""
        return self.store.get(session_id)

    async def close_session(self, session_id: str) -> bool:
        """
        Close a session's browser and forget the session.

        Returns:
            False if no such session exists
        """
        session = await self.store.remove(session_id)
        if session is None:
            return False

        await session.launcher.close()
        session.status = SessionStatus.CLOSED
        logger.info("Browser session closed", session_id=session_id)
        return True

    async def cleanup(self) -> None:
        """Close every session."""
        logger.info("Cleaning up all browser sessions")
        for session in self.store.get_all():
            await self.close_session(session.id)


# Global session manager instance
session_manager = SessionManager()
