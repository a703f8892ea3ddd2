from __future__ import annotations

import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse

from eventstream.core.config import Settings, get_settings
from eventstream.sse.decoder import sse_decode
from eventstream.sse.encoder import sse_encode
from eventstream.sse.models import (
    DecodeEventsResponse,
    EncodeEventsRequest,
    EventOut,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/events/encode", response_class=StreamingResponse)
async def encode_events(
    body: EncodeEventsRequest,
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    if len(body.events) > settings.max_events_per_request:
        raise HTTPException(status_code=400, detail="Too many events in one request.")

    events = [e.to_event() for e in body.events]

    async def gen() -> AsyncIterator[bytes]:
        for event in events:
            yield sse_encode(event)

    logger.info("encoding events", extra={"count": len(events)})
    return StreamingResponse(gen(), media_type="text/event-stream")


@router.post("/events/decode", response_model=DecodeEventsResponse)
async def decode_events(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> DecodeEventsResponse:
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > settings.max_decode_bytes:
        raise HTTPException(status_code=413, detail="Request body too large.")

    # Chunked bodies carry no length header; stop reading once over the limit.
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > settings.max_decode_bytes:
            raise HTTPException(status_code=413, detail="Request body too large.")
    raw = bytes(body)

    events = sse_decode(raw)
    logger.info("decoded events", extra={"count": len(events), "size": len(raw)})
    return DecodeEventsResponse(events=[EventOut.from_event(e) for e in events])
