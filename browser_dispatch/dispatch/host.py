"""Where launchers learn the port drivers should call back on."""

from typing import Protocol

from browser_dispatch.config import settings


class LauncherHost(Protocol):
    """The server hosting the launchers."""

    def driver_contact_port(self) -> int: ...


class SettingsHost:
    """Host reporting the configured driver-contact port."""

    def driver_contact_port(self) -> int:
        return settings.driver_contact_port


class StaticHost:
    """Host with a fixed driver-contact port."""

    def __init__(self, port: int) -> None:
        self.port = port

    def driver_contact_port(self) -> int:
        return self.port
