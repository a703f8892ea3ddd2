from __future__ import annotations

import io
import logging
import shutil
from typing import BinaryIO

from eventstream.sse.events import SSEvent

logger = logging.getLogger(__name__)


def _write_payload(buf: io.BytesIO, data) -> None:
    if isinstance(data, (bytes, bytearray, memoryview)):
        buf.write(data)
    elif isinstance(data, str):
        buf.write(data.encode("utf-8"))
    else:
        shutil.copyfileobj(data, buf)


def encode(writer: BinaryIO, event: SSEvent) -> None:
    """
    Serialize one event onto a writable byte sink.

    Field order is fixed: event, id, retry, data. The payload is copied
    verbatim after a single "data: " prefix; embedded newlines are not
    split into separate data lines.

    The event is assembled in memory, written to the sink in one call and
    flushed. Errors raised by the sink (or by reading a stream payload)
    propagate unchanged.
    """
    buf = io.BytesIO()
    if event.event:
        buf.write(f"event: {event.event}\n".encode("utf-8"))
    if event.id:
        buf.write(f"id: {event.id}\n".encode("utf-8"))
    if event.retry > 0:
        buf.write(f"retry: {event.retry:d}\n".encode("ascii"))

    buf.write(b"data: ")
    _write_payload(buf, event.data)
    buf.write(b"\n\n")

    payload = buf.getvalue()
    writer.write(payload)
    flush = getattr(writer, "flush", None)
    if flush is not None:
        flush()
    logger.debug("encoded event", extra={"event": event.event, "size": len(payload)})


def sse_encode(event: SSEvent) -> bytes:
    """
    Encode a single event as SSE bytes.
    """
    out = io.BytesIO()
    encode(out, event)
    return out.getvalue()
