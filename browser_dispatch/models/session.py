"""Browser session API models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class SessionStatus(str, Enum):
    """Possible states for a browser session."""

    CREATED = "created"
    LAUNCHED = "launched"
    CLOSED = "closed"


class SessionRequest(BaseModel):
    """Request to create a browser session from a specifier."""

    browser: str = Field(
        ...,
        description="Browser specifier, e.g. *firefox or *custom /usr/bin/links",
    )
    start_url: str | None = Field(
        default=None, description="URL to open immediately after the launcher is built"
    )


class SessionResponse(BaseModel):
    """API response model for a session."""

    id: str
    browser: str
    launcher: str
    status: SessionStatus
    command_queue_aware: bool
    created_at: datetime


class BrowserListResponse(BaseModel):
    """Every specifier form the dispatcher currently understands."""

    browsers: list[str]
