"""Browser specifier dispatch."""

from browser_dispatch.dispatch.errors import (
    DispatchError,
    InvalidSpecifierError,
    LauncherConfigurationError,
    LauncherConstructionError,
    UnsupportedBrowserError,
)
from browser_dispatch.dispatch.factory import (
    BrowserLauncherFactory,
    add_browser_launcher,
    browser_launcher_factory,
    get_browser_launcher,
)
from browser_dispatch.dispatch.host import LauncherHost, SettingsHost, StaticHost
from browser_dispatch.dispatch.registry import LauncherRegistry, default_registry
from browser_dispatch.dispatch.specifier import SpecifierPattern, parse_specifier

__all__ = [
    "DispatchError",
    "InvalidSpecifierError",
    "LauncherConfigurationError",
    "LauncherConstructionError",
    "UnsupportedBrowserError",
    "BrowserLauncherFactory",
    "add_browser_launcher",
    "browser_launcher_factory",
    "get_browser_launcher",
    "LauncherHost",
    "SettingsHost",
    "StaticHost",
    "LauncherRegistry",
    "default_registry",
    "SpecifierPattern",
    "parse_specifier",
]
