"""Browser launcher implementations."""

from browser_dispatch.launchers.base import (
    BrowserLauncher,
    CommandQueueAware,
    ExecutableBrowserLauncher,
    ProcessBrowserLauncher,
)
from browser_dispatch.launchers.builtin import BUILTIN_LAUNCHERS, MockBrowserLauncher
from browser_dispatch.launchers.command_queue import CommandQueue
from browser_dispatch.launchers.custom import DestroyableRuntimeExecutingBrowserLauncher

__all__ = [
    "BrowserLauncher",
    "CommandQueueAware",
    "ExecutableBrowserLauncher",
    "ProcessBrowserLauncher",
    "BUILTIN_LAUNCHERS",
    "MockBrowserLauncher",
    "CommandQueue",
    "DestroyableRuntimeExecutingBrowserLauncher",
]
