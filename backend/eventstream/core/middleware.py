from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request, Response

from eventstream.core.logging import request_id_ctx

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"


async def request_context_middleware(request: Request, call_next) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    token = request_id_ctx.set(request_id)

    start = time.perf_counter()
    status_code = 500
    try:
        response: Response = await call_next(request)
        status_code = response.status_code
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
    finally:
        logger.info(
            "request completed",
            extra={
                "method": request.method,
                "path": str(request.url.path),
                "status_code": status_code,
                "elapsed_ms": round((time.perf_counter() - start) * 1000.0, 2),
            },
        )
        request_id_ctx.reset(token)
