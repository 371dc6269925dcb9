"""Bidirectional command channel between the server and a browser."""

import asyncio

from browser_dispatch.utils.logging import get_logger

logger = get_logger(__name__)


class CommandQueue:
    """
    Commands flow from the server to the browser, results flow back.

    Both directions are unbounded asyncio queues; the queue is shared by
    the server and the launcher it was handed to.
    """

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        self._commands: asyncio.Queue[str] = asyncio.Queue()
        self._results: asyncio.Queue[str] = asyncio.Queue()

    async def put_command(self, command: str) -> None:
        """Queue a command for the browser."""
        await self._commands.put(command)
        logger.debug("Command queued", session_id=self.session_id, command=command)

    async def next_command(self, timeout: float | None = None) -> str:
        """
        Wait for the next command destined for the browser.

        Raises:
            TimeoutError: If no command arrives within ``timeout`` seconds
        """
        return await asyncio.wait_for(self._commands.get(), timeout=timeout)

    async def put_result(self, result: str) -> None:
        """Report a command result back to the server."""
        await self._results.put(result)
        logger.debug("Result queued", session_id=self.session_id)

    async def next_result(self, timeout: float | None = None) -> str:
        """Wait for the browser's next result."""
        return await asyncio.wait_for(self._results.get(), timeout=timeout)

    @property
    def pending_commands(self) -> int:
        """Number of commands the browser has not picked up yet."""
        return self._commands.qsize()

    @property
    def pending_results(self) -> int:
        """Number of results the server has not read yet."""
        return self._results.qsize()
