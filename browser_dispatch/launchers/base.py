"""Launcher interfaces and process handling shared by all launchers."""

import asyncio
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from browser_dispatch.config import settings
from browser_dispatch.launchers.command_queue import CommandQueue
from browser_dispatch.utils.logging import get_logger

logger = get_logger(__name__)


class BrowserLauncher(ABC):
    """Starts and stops one browser for one session."""

    name: str = "browser"

    session_id: str

    @abstractmethod
    async def launch_remote_session(self, url: str) -> None:
        """Open the browser on the given URL."""

    @abstractmethod
    async def close(self) -> None:
        """Shut the browser down."""


@runtime_checkable
class CommandQueueAware(Protocol):
    """Launchers that talk to the server through a command queue."""

    def set_command_queue(self, queue: CommandQueue) -> None: ...


class CommandQueueMixin:
    """Keeps the command queue handed over after construction."""

    command_queue: CommandQueue | None = None

    def set_command_queue(self, queue: CommandQueue) -> None:
        self.command_queue = queue


class ProcessBrowserLauncher(BrowserLauncher):
    """Launcher backed by a single child process."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        self._process: asyncio.subprocess.Process | None = None

    @abstractmethod
    def build_command(self, url: str) -> list[str]:
        """Build the argv used to open ``url``."""

    @property
    def pid(self) -> int | None:
        """PID of the running browser, if any."""
        return self._process.pid if self._process else None

    async def launch_remote_session(self, url: str) -> None:
        """
        Spawn the browser process.

        Args:
            url: URL the browser should open

        Raises:
            RuntimeError: If the process is already running or cannot be started
        """
        if self._process is not None and self._process.returncode is None:
            raise RuntimeError(f"{self.name} already running for session {self.session_id}")

        args = self.build_command(url)
        logger.info(
            "Launching browser",
            launcher=self.name,
            session_id=self.session_id,
            command=args,
        )

        try:
            self._process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise RuntimeError(f"Failed to launch {self.name}: {e}") from e

        logger.info(
            "Browser launched",
            launcher=self.name,
            session_id=self.session_id,
            pid=self._process.pid,
        )

    async def close(self) -> None:
        """Terminate the browser, force killing it if it does not exit in time."""
        process = self._process
        self._process = None

        if process is None:
            logger.warning("No browser process for session", session_id=self.session_id)
            return

        if process.returncode is not None:
            logger.debug("Browser already exited", pid=process.pid, code=process.returncode)
            return

        logger.info("Terminating browser", session_id=self.session_id, pid=process.pid)
        try:
            process.terminate()
            try:
                await asyncio.wait_for(
                    process.wait(), timeout=settings.launcher_terminate_timeout_seconds
                )
            except TimeoutError:
                process.kill()
                await process.wait()
                logger.warning("Browser required force kill", pid=process.pid)
        except ProcessLookupError:
            logger.debug("Browser process already terminated", pid=process.pid)


class ExecutableBrowserLauncher(ProcessBrowserLauncher):
    """
    Launcher for a known browser binary.

    Built with ``(port, session_id)`` to use the variant's default executable,
    or ``(port, session_id, browser_launch_location)`` to use an explicit one.
    """

    default_executable: str = ""

    def __init__(
        self,
        port: int,
        session_id: str,
        browser_launch_location: str | None = None,
    ) -> None:
        super().__init__(session_id)
        self.port = port
        self.browser_launch_location = browser_launch_location

    @property
    def executable(self) -> str:
        """Binary that will be run."""
        return self.browser_launch_location or self.default_executable

    def launch_arguments(self, url: str) -> list[str]:
        """Arguments following the executable."""
        return [url]

    def build_command(self, url: str) -> list[str]:
        return [self.executable, *self.launch_arguments(url)]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(port={self.port}, session_id={self.session_id!r}, "
            f"browser_launch_location={self.browser_launch_location!r})"
        )
