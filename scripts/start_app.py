#!/usr/bin/env python3
"""Start the Tapestry API with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from tapestry.config import Settings
from tapestry.util.logging import setup_logging
from tapestry.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Logfire first so startup errors are captured
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Tapestry API",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "tapestry.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
