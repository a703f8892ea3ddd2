"""
Server-Sent Events decoder.

https://html.spec.whatwg.org/multipage/server-sent-events.html

The decoder works on a fully buffered input: the source is drained first,
then normalized (BOM, line endings) and parsed line by line. Malformed
fields are ignored instead of failing the decode; only a failure while
reading the source is surfaced to the caller.
"""

from __future__ import annotations

import logging
import re
from typing import BinaryIO

from eventstream.sse.events import DEFAULT_EVENT_TYPE, UTF8_BOM, SSEvent

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits only (no whitespace, no underscores).
_RETRY_RE = re.compile(rb"[+-]?[0-9]+")
# Values past a signed 64-bit integer are rejected rather than stored.
_RETRY_MAX = 2**63 - 1


def _text(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def _parse_retry(value: bytes) -> int | None:
    if _RETRY_RE.fullmatch(value) is None:
        return None
    retry = int(value)
    if retry < 0 or retry > _RETRY_MAX:
        return None
    return retry


def _split_field(line: bytes) -> tuple[bytes, bytes]:
    field, sep, value = line.partition(b":")
    if not sep:
        return line, b""
    # Only the first space after the colon belongs to the separator.
    if value.startswith(b" "):
        value = value[1:]
    return field, value


def normalize(raw: bytes) -> list[bytes]:
    """
    Strip a leading UTF-8 BOM and split the buffer into lines.

    CRLF is collapsed to LF before lone CRs are converted, so a CRLF pair
    never produces two line breaks.
    """
    if raw.startswith(UTF8_BOM):
        raw = raw[len(UTF8_BOM):]
    raw = raw.replace(b"\r\n", b"\n").replace(b"\r", b"\n")
    return raw.split(b"\n")


def sse_decode(raw: bytes | str) -> list[SSEvent]:
    """
    Decode an in-memory SSE buffer into events.

    An event is only emitted once its terminating blank line is seen; a
    trailing block without one is dropped.
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")

    events: list[SSEvent] = []
    data_lines: list[bytes] = []
    event_type = ""
    event_id = ""
    retry = 0

    for line in normalize(raw):
        if not line:
            # Leading or repeated blank lines carry no event.
            if not data_lines and not event_type:
                continue
            events.append(
                SSEvent(
                    event=event_type or DEFAULT_EVENT_TYPE,
                    data=b"\n".join(data_lines),
                    id=event_id,
                    retry=retry,
                )
            )
            data_lines = []
            event_type = ""
            event_id = ""
            retry = 0
            continue

        if line.startswith(b":"):
            continue

        field, value = _split_field(line)
        if field == b"event":
            event_type = _text(value)
        elif field == b"id":
            if b"\x00" not in value:
                event_id = _text(value)
        elif field == b"retry":
            parsed = _parse_retry(value)
            if parsed is not None:
                retry = parsed
        elif field == b"data":
            data_lines.append(value)

    logger.debug("decoded events", extra={"count": len(events), "size": len(raw)})
    return events


def decode(reader: BinaryIO) -> list[SSEvent]:
    """
    Drain a readable byte source and decode it into events.

    Errors raised while reading propagate unchanged; parsing itself never fails.
    """
    raw = reader.read()
    return sse_decode(raw)
