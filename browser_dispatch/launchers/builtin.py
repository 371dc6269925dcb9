"""Built-in browser launcher variants and their specifier tags."""

from browser_dispatch.launchers.base import CommandQueueMixin, ExecutableBrowserLauncher
from browser_dispatch.utils.logging import get_logger

logger = get_logger(__name__)


class FirefoxCustomProfileLauncher(CommandQueueMixin, ExecutableBrowserLauncher):
    """Firefox in its own remote-less instance."""

    name = "firefox"
    default_executable = "firefox"

    def launch_arguments(self, url: str) -> list[str]:
        return ["-no-remote", "-new-instance", url]


class FirefoxChromeLauncher(FirefoxCustomProfileLauncher):
    """Firefox opening the URL as a chrome (privileged) window."""

    name = "chrome"

    def launch_arguments(self, url: str) -> list[str]:
        return ["-no-remote", "-chrome", url]


class ProxyInjectionFirefoxCustomProfileLauncher(FirefoxCustomProfileLauncher):
    """Firefox driven through proxy injection."""

    name = "pifirefox"


class InternetExplorerCustomProxyLauncher(ExecutableBrowserLauncher):
    """Internet Explorer."""

    name = "iexplore"
    default_executable = r"C:\Program Files\Internet Explorer\iexplore.exe"

    def launch_arguments(self, url: str) -> list[str]:
        return ["-new", url]


class ProxyInjectionInternetExplorerCustomProxyLauncher(
    CommandQueueMixin, InternetExplorerCustomProxyLauncher
):
    """Internet Explorer driven through proxy injection."""

    name = "piiexplore"


class HTABrowserLauncher(ExecutableBrowserLauncher):
    """Runs the page as an HTML Application through mshta."""

    name = "iehta"
    default_executable = r"C:\Windows\System32\mshta.exe"


class SafariCustomProfileLauncher(ExecutableBrowserLauncher):
    name = "safari"
    default_executable = "/Applications/Safari.app/Contents/MacOS/Safari"


class OperaCustomProfileLauncher(ExecutableBrowserLauncher):
    name = "opera"
    default_executable = "opera"


class KonquerorLauncher(ExecutableBrowserLauncher):
    name = "konqueror"
    default_executable = "konqueror"


class MockBrowserLauncher(CommandQueueMixin, ExecutableBrowserLauncher):
    """Launcher that starts nothing and remembers what it was asked to open."""

    name = "mock"

    def __init__(
        self,
        port: int,
        session_id: str,
        browser_launch_location: str | None = None,
    ) -> None:
        super().__init__(port, session_id, browser_launch_location)
        self.launched_urls: list[str] = []
        self.closed = False

    async def launch_remote_session(self, url: str) -> None:
        self.launched_urls.append(url)
        logger.info("Mock browser launched", session_id=self.session_id, url=url)

    async def close(self) -> None:
        self.closed = True
        logger.info("Mock browser closed", session_id=self.session_id)


BUILTIN_LAUNCHERS: dict[str, type[ExecutableBrowserLauncher]] = {
    "firefox": FirefoxCustomProfileLauncher,
    "iexplore": InternetExplorerCustomProxyLauncher,
    "safari": SafariCustomProfileLauncher,
    "iehta": HTABrowserLauncher,
    "chrome": FirefoxChromeLauncher,
    "opera": OperaCustomProfileLauncher,
    "piiexplore": ProxyInjectionInternetExplorerCustomProxyLauncher,
    "pifirefox": ProxyInjectionFirefoxCustomProfileLauncher,
    "konqueror": KonquerorLauncher,
    "mock": MockBrowserLauncher,
}
