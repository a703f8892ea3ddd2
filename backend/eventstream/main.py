from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from eventstream.api.router import router as api_router
from eventstream.core.config import get_settings
from eventstream.core.errors import http_exception_handler, unhandled_exception_handler
from eventstream.core.logging import configure_logging
from eventstream.core.middleware import request_context_middleware

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, codec_level=settings.codec_log_level)
    app = FastAPI(title="eventstream", version="0.1.0")

    app.middleware("http")(request_context_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.info("app created", extra={"env": settings.env})
    return app


app = create_app()
