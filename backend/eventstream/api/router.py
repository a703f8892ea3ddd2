from __future__ import annotations

from fastapi import APIRouter

from eventstream.api.events import router as events_router

router = APIRouter()

router.include_router(events_router, prefix="/api", tags=["events"])


@router.get("/healthz", tags=["health"])
async def healthz() -> dict[str, str]:
    return {"status": "ok"}
