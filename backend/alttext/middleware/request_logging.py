import time

from fastapi import Request

from alttext.utils.logger import get_logger

logger = get_logger(__name__)


async def log_requests_middleware(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.exception("%s %s — unhandled error after %.1fms", request.method, request.url.path, elapsed_ms)
        raise

    elapsed_ms = (time.perf_counter() - start) * 1000
    level = logger.warning if response.status_code >= 400 else logger.info
    level("%s %s → %d (%.1fms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response
