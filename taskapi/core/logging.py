"""Logging setup and per-request access logging."""

import logging
import time

from fastapi import FastAPI, Request

from taskapi.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"

access_logger = logging.getLogger("taskapi.access")


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=settings.LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    # SQL echo is controlled by DEBUG via the engine; keep the library logger quiet otherwise.
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def install_request_logging(app: FastAPI) -> None:
    """Log method, path, status and duration for every request."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        # Unhandled exceptions propagate to the error handler, which logs them.
        response = await call_next(request)
        access_logger.info(
            "%s %s -> %s (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response
