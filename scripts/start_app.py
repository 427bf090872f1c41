#!/usr/bin/env python3
"""Run the API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from qna.config import Settings
from qna.util.logging import setup_logging
from qna.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    # Before importing the app so its instrumentation has a configured logfire
    configure_logfire(settings)

    try:
        logfire.info("Starting API", host=settings.host, port=settings.port)
        uvicorn.run(
            "qna.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.is_production,
        )
    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
