"""Errors raised while resolving a browser specifier to a launcher."""

from collections.abc import Iterable

CUSTOM_TAG = "custom"


class DispatchError(RuntimeError):
    """Base class for launcher dispatch failures."""

    pass


class InvalidSpecifierError(DispatchError, ValueError):
    """The browser specifier (or a tag being registered) is unusable."""

    pass


class LauncherConfigurationError(DispatchError):
    """A launcher descriptor cannot build a launcher for the requested arity."""

    pass


class LauncherConstructionError(DispatchError):
    """A launcher constructor failed; the original exception is the cause."""

    pass


def browser_not_supported_message(browser: str, tags: Iterable[str]) -> str:
    """
    Build the diagnostic listing every specifier the registry understands.

    Args:
        browser: The specifier that failed to resolve
        tags: Registered tags, in the order they should be listed

    Returns:
        Multi-line message ending with the always-available ``*custom`` entry
    """
    lines = [f"Browser not supported: {browser}"]
    if not browser.startswith("*"):
        lines.append("(Did you forget to add a *?)")
    lines.append("")
    lines.append("Supported browsers include:")
    lines.extend(f"  *{tag}" for tag in tags)
    lines.append(f"  *{CUSTOM_TAG}")
    return "\n".join(lines) + "\n"


class UnsupportedBrowserError(DispatchError):
    """No registered tag (nor ``custom``) matches the specifier."""

    def __init__(self, browser: str, supported: Iterable[str]) -> None:
        self.browser = browser
        self.supported = tuple(supported)
        super().__init__(browser_not_supported_message(browser, self.supported))
