"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from browser_dispatch.api.routes import router
from browser_dispatch.utils.logging import AccessLogMiddleware, get_logger, setup_logging

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    from browser_dispatch.dispatch import default_registry
    from browser_dispatch.sessions import session_manager

    logger.info(
        "Starting browser dispatch API",
        version="0.1.0",
        browsers=default_registry.tags(),
    )

    yield

    # Cleanup
    logger.info("Shutting down...")
    await session_manager.cleanup()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Browser Dispatch API",
    description="Resolves *browser specifiers to launchers and manages their sessions",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add access logging middleware
app.add_middleware(AccessLogMiddleware)

# Include API routes
app.include_router(router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
