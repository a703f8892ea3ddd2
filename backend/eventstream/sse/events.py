from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

DEFAULT_EVENT_TYPE = "message"
UTF8_BOM = b"\xef\xbb\xbf"

# Payload accepted on encode. The decoder always produces bytes.
EventData = bytes | bytearray | memoryview | str | BinaryIO


@dataclass(frozen=True)
class SSEvent:
    """
    A single Server-Sent Event.

    - event: event-type name; empty means "not set" (decodes to "message").
    - data: payload, either raw bytes/text or a readable binary stream.
    - id: last-event-id; empty means "not set".
    - retry: reconnection delay in milliseconds; 0 means "not set".
    """

    event: str = ""
    data: EventData = b""
    id: str = ""
    retry: int = 0

    def read_data(self) -> bytes:
        """
        Return the full payload as bytes.

        Stream payloads are drained, so they can only be read once.
        """
        data = self.data
        if isinstance(data, bytes):
            return data
        if isinstance(data, (bytearray, memoryview)):
            return bytes(data)
        if isinstance(data, str):
            return data.encode("utf-8")
        return data.read()
