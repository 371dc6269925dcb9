"""Data models for browser-dispatch."""

from browser_dispatch.models.launcher import LauncherDescriptor, ParsedSpecifier
from browser_dispatch.models.session import (
    BrowserListResponse,
    SessionRequest,
    SessionResponse,
    SessionStatus,
)

__all__ = [
    "LauncherDescriptor",
    "ParsedSpecifier",
    "BrowserListResponse",
    "SessionRequest",
    "SessionResponse",
    "SessionStatus",
]
