"""Launcher descriptors and parsed specifiers."""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

LauncherFactory = Callable[[int, str], Any]
CommandLauncherFactory = Callable[[int, str, str], Any]


class ParsedSpecifier(BaseModel):
    """A specifier split into its tag and optional argument."""

    tag: str
    argument: str | None = None

    model_config = ConfigDict(frozen=True)


def _accepts_positional(target: Callable[..., Any], count: int) -> bool:
    """Check whether a callable can be invoked with ``count`` positional arguments."""
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind(*range(count))
    except TypeError:
        return False
    return True


@dataclass(frozen=True)
class LauncherDescriptor:
    """
    How to build one launcher variant.

    ``create`` takes ``(port, session_id)``; ``create_with_command`` takes
    ``(port, session_id, command)``. Either may be missing, in which case
    specifiers needing that form fail with a configuration error.
    """

    name: str
    create: LauncherFactory | None = None
    create_with_command: CommandLauncherFactory | None = None

    @classmethod
    def from_class(cls, launcher_class: type) -> "LauncherDescriptor":
        """Build a descriptor from whichever constructor arities the class accepts."""
        create = launcher_class if _accepts_positional(launcher_class, 2) else None
        create_with_command = launcher_class if _accepts_positional(launcher_class, 3) else None
        return cls(
            name=launcher_class.__name__,
            create=create,
            create_with_command=create_with_command,
        )
