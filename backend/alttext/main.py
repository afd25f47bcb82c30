import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alttext.config.settings import settings
from alttext.middleware.request_logging import log_requests_middleware
from alttext.routes.export_routes import router as export_router
from alttext.routes.relay_routes import router as relay_router
from alttext.routes.static_routes import router as static_router
from alttext.utils.logger import get_logger


def _configure_logging() -> None:
    """Set up a structured, human-readable log format for the whole app.

    Format example::

        2026-10-18 10:33:19,123 | INFO     | alttext.services.description_service:48 | Describing cat.jpg (image/jpeg, 20481 bytes)
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Avoid duplicate handlers if create_app() is called more than once (e.g. tests)
    if not root.handlers:
        root.addHandler(handler)
    else:
        for h in root.handlers:
            h.setFormatter(formatter)

    # Quiet down noisy third-party loggers unless we're in DEBUG mode
    if log_level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("openai").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    _configure_logging()

    logger = get_logger(__name__)
    logger.info(
        "Starting Alt-Text Relay — log_level=%s, static_dir=%s",
        settings.log_level.upper(),
        settings.static_dir,
    )
    if not settings.provider_configured:
        logger.warning("OPENAI_API_KEY not set. /api endpoints will fail until it is configured.")

    app = FastAPI(title="Multilingual Alt-Text Generator", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests_middleware)
    logger.debug("CORS and request-logging middleware registered.")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "provider_configured": settings.provider_configured}

    app.include_router(relay_router)
    logger.info("Relay router mounted at /api (describe, translate).")

    app.include_router(export_router)
    logger.info("Export router mounted at /api/export.")

    # Must stay last: the SPA fallback matches every remaining GET path.
    app.include_router(static_router)
    logger.info("Static SPA fallback mounted.")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
