"""Process-wide mapping from browser tag to launcher descriptor."""

import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from browser_dispatch.dispatch.errors import CUSTOM_TAG, InvalidSpecifierError
from browser_dispatch.dispatch.specifier import SpecifierPattern
from browser_dispatch.launchers.builtin import BUILTIN_LAUNCHERS
from browser_dispatch.models import LauncherDescriptor
from browser_dispatch.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """A registered tag with its compiled pattern and descriptor."""

    tag: str
    pattern: SpecifierPattern
    descriptor: LauncherDescriptor


class LauncherRegistry:
    """
    Thread-safe registry of launcher descriptors keyed by tag.

    Writers serialize on a lock and publish a fresh immutable snapshot;
    readers only ever touch the published snapshot, so a lookup sees a
    registration completely or not at all.

    Tags are not validated beyond rejecting the empty tag and the reserved
    ``custom`` tag. Re-registering a tag replaces the previous descriptor.
    """

    def __init__(self, launchers: Mapping[str, LauncherDescriptor | type] | None = None) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, RegistryEntry] = {}
        self._by_length: tuple[RegistryEntry, ...] = ()
        for tag, launcher in (launchers or {}).items():
            self.register(tag, launcher)

    @classmethod
    def with_builtins(cls) -> "LauncherRegistry":
        """Create a registry seeded with the built-in browser launchers."""
        return cls(BUILTIN_LAUNCHERS)

    def register(self, tag: str, launcher: LauncherDescriptor | type) -> LauncherDescriptor:
        """
        Register (or replace) the launcher for a tag.

        Args:
            tag: Identifier used as ``*<tag>`` in specifiers
            launcher: A descriptor, or a launcher class to derive one from

        Returns:
            The descriptor now stored for the tag
        """
        if not tag:
            raise InvalidSpecifierError("browser tag may not be empty")
        if tag == CUSTOM_TAG:
            raise InvalidSpecifierError(f"'{CUSTOM_TAG}' is reserved and cannot be registered")

        descriptor = (
            launcher
            if isinstance(launcher, LauncherDescriptor)
            else LauncherDescriptor.from_class(launcher)
        )
        entry = RegistryEntry(tag=tag, pattern=SpecifierPattern(tag), descriptor=descriptor)

        with self._lock:
            overlapping = [
                other
                for other in self._entries
                if other != tag and (other.startswith(tag) or tag.startswith(other))
            ]
            replaced = tag in self._entries
            entries = dict(self._entries)
            entries[tag] = entry
            self._entries = entries
            self._by_length = tuple(sorted(entries.values(), key=lambda e: len(e.tag), reverse=True))

        if overlapping:
            logger.warning("Browser tag overlaps existing tags", tag=tag, overlapping=overlapping)
        logger.debug(
            "Browser launcher registered",
            tag=tag,
            launcher=descriptor.name,
            replaced=replaced,
        )
        return descriptor

    def entries(self) -> tuple[RegistryEntry, ...]:
        """Snapshot of all entries, longest tag first."""
        return self._by_length

    def tags(self) -> list[str]:
        """Registered tags in registration order."""
        return list(self._entries)

    def get(self, tag: str) -> LauncherDescriptor | None:
        """Get the descriptor for a tag."""
        entry = self._entries.get(tag)
        return entry.descriptor if entry else None

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags())

    def __len__(self) -> int:
        return len(self._entries)


# Global registry instance, seeded with the built-in launchers at import
default_registry = LauncherRegistry.with_builtins()
