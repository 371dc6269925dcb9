"""Run the dispatch API with uvicorn."""

import uvicorn

from browser_dispatch.config import settings


def main() -> None:
    uvicorn.run(
        "browser_dispatch.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
