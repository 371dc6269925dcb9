"""Turns browser specifiers like ``*firefox`` into ready-to-launch launchers."""

from typing import Any

from browser_dispatch.dispatch.errors import (
    CUSTOM_TAG,
    InvalidSpecifierError,
    LauncherConfigurationError,
    LauncherConstructionError,
    UnsupportedBrowserError,
)
from browser_dispatch.dispatch.host import LauncherHost, SettingsHost
from browser_dispatch.dispatch.registry import LauncherRegistry, default_registry
from browser_dispatch.dispatch.specifier import SpecifierPattern
from browser_dispatch.launchers import (
    CommandQueue,
    CommandQueueAware,
    DestroyableRuntimeExecutingBrowserLauncher,
)
from browser_dispatch.models import LauncherDescriptor
from browser_dispatch.utils.logging import get_logger

logger = get_logger(__name__)

CUSTOM_PATTERN = SpecifierPattern(CUSTOM_TAG)


class BrowserLauncherFactory:
    """Resolves specifiers against a launcher registry."""

    def __init__(
        self,
        registry: LauncherRegistry | None = None,
        host: LauncherHost | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self.host = host if host is not None else SettingsHost()

    def get_browser_launcher(
        self,
        browser: str | None,
        session_id: str,
        queue: CommandQueue | None,
    ) -> Any:
        """
        Return the launcher for a specifier.

        Args:
            browser: A specifier like ``*firefox`` or ``*iexplore C:\\ie.exe``
            session_id: Session the launcher will belong to
            queue: Command queue handed to queue-aware launchers

        Returns:
            The launcher, constructed but not yet launched

        Raises:
            InvalidSpecifierError: If ``browser`` is None, or ``*custom`` has no command
            UnsupportedBrowserError: If no registered tag matches
            LauncherConfigurationError: If the launcher lacks the needed constructor
            LauncherConstructionError: If the launcher constructor failed
        """
        if browser is None:
            raise InvalidSpecifierError("browser may not be None")

        for entry in self.registry.entries():
            parsed = entry.pattern.parse(browser)
            if parsed is not None:
                return self.create_browser_launcher(
                    entry.descriptor, parsed.argument, session_id, queue, tag=entry.tag
                )

        parsed = CUSTOM_PATTERN.parse(browser)
        if parsed is not None:
            if parsed.argument is None or not parsed.argument.strip():
                raise InvalidSpecifierError(f"*{CUSTOM_TAG} requires a command to execute")
            return DestroyableRuntimeExecutingBrowserLauncher(parsed.argument, session_id)

        raise UnsupportedBrowserError(browser, self.registry.tags())

    def create_browser_launcher(
        self,
        descriptor: LauncherDescriptor,
        command: str | None,
        session_id: str,
        queue: CommandQueue | None,
        tag: str | None = None,
    ) -> Any:
        """
        Build a launcher from its descriptor and hand it the command queue.

        Without a command the two-argument form ``(port, session_id)`` is used,
        otherwise ``(port, session_id, command)``.
        """
        port = self.host.driver_contact_port()

        try:
            if command is None:
                if descriptor.create is None:
                    raise LauncherConfigurationError(
                        f"{descriptor.name} cannot be built without a browser command"
                    )
                launcher = descriptor.create(port, session_id)
            else:
                if descriptor.create_with_command is None:
                    raise LauncherConfigurationError(
                        f"{descriptor.name} does not accept a browser command"
                    )
                launcher = descriptor.create_with_command(port, session_id, command)

            if isinstance(launcher, CommandQueueAware):
                launcher.set_command_queue(queue)
        except RuntimeError:
            raise
        except Exception as e:
            raise LauncherConstructionError(f"Failed to create {descriptor.name}: {e}") from e

        logger.debug(
            "Browser launcher created",
            tag=tag,
            launcher=descriptor.name,
            session_id=session_id,
            port=port,
            with_command=command is not None,
        )
        return launcher


# Global factory over the default registry
browser_launcher_factory = BrowserLauncherFactory()


def get_browser_launcher(browser: str | None, session_id: str, queue: CommandQueue | None) -> Any:
    """Resolve a specifier using the process-wide registry."""
    return browser_launcher_factory.get_browser_launcher(browser, session_id, queue)


def add_browser_launcher(tag: str, launcher: LauncherDescriptor | type) -> LauncherDescriptor:
    """Register a launcher on the process-wide registry."""
    return default_registry.register(tag, launcher)
