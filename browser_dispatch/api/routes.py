"""API route definitions."""

from fastapi import APIRouter, HTTPException, Response, status

from browser_dispatch.dispatch import (
    InvalidSpecifierError,
    UnsupportedBrowserError,
    default_registry,
)
from browser_dispatch.dispatch.errors import CUSTOM_TAG
from browser_dispatch.models import BrowserListResponse, SessionRequest, SessionResponse
from browser_dispatch.utils.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get(
    "/browsers",
    response_model=BrowserListResponse,
    summary="List supported browsers",
)
async def list_browsers() -> BrowserListResponse:
    """Every ``*tag`` the registry knows, plus ``*custom``."""
    tags = [*default_registry.tags(), CUSTOM_TAG]
    return BrowserListResponse(browsers=[f"*{tag}" for tag in tags])


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a browser session",
    description="Resolve the browser specifier to a launcher and register a new session.",
)
async def create_session(request: SessionRequest) -> SessionResponse:
    """
    Create a browser session.

    The launcher is only started when ``start_url`` is supplied.
    """
    from browser_dispatch.sessions import session_manager

    try:
        session = await session_manager.create_session(
            browser=request.browser,
            start_url=request.start_url,
        )
    except InvalidSpecifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except UnsupportedBrowserError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": str(e), "supported": [f"*{t}" for t in e.supported]},
        ) from e
    except RuntimeError as e:
        logger.error("Failed to create session", browser=request.browser, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create session: {str(e)}",
        ) from e

    return session.to_response()


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    summary="Get a browser session",
)
async def get_session(session_id: str) -> SessionResponse:
    """Get a session by ID."""
    from browser_dispatch.sessions import session_manager

    session = session_manager.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )
    return session.to_response()


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Close a browser session",
)
async def close_session(session_id: str) -> Response:
    """Close the session's browser."""
    from browser_dispatch.sessions import session_manager

    if not await session_manager.close_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
