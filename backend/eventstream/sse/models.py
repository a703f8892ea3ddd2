from __future__ import annotations

from pydantic import BaseModel, Field

from eventstream.sse.events import SSEvent


class EventIn(BaseModel):
    event: str = ""
    data: str = ""
    id: str = ""
    retry: int = Field(default=0, ge=0)

    def to_event(self) -> SSEvent:
        return SSEvent(event=self.event, data=self.data, id=self.id, retry=self.retry)


class EncodeEventsRequest(BaseModel):
    # Upper bound is enforced against settings in the route.
    events: list[EventIn] = Field(min_length=1)


class EventOut(BaseModel):
    event: str
    data: str
    id: str
    retry: int

    @classmethod
    def from_event(cls, event: SSEvent) -> "EventOut":
        return cls(
            event=event.event,
            data=event.read_data().decode("utf-8", errors="replace"),
            id=event.id,
            retry=event.retry,
        )


class DecodeEventsResponse(BaseModel):
    events: list[EventOut] = Field(default_factory=list)
