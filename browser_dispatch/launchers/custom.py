"""Launcher for ``*custom``: runs the user's command as given."""

from browser_dispatch.launchers.base import ProcessBrowserLauncher


class DestroyableRuntimeExecutingBrowserLauncher(ProcessBrowserLauncher):
    """
    Runs an arbitrary command with the session URL appended.

    The command is split on whitespace only; quotes and backslashes are
    passed through untouched. No browser-specific preparation is done, and
    the launcher never receives a command queue.
    """

    name = "custom"

    def __init__(self, command: str, session_id: str) -> None:
        super().__init__(session_id)
        self.command = command
        self.argv = command.split()
        if not self.argv:
            raise ValueError("custom browser command may not be blank")

    def build_command(self, url: str) -> list[str]:
        return [*self.argv, url]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(command={self.command!r}, session_id={self.session_id!r})"
