# app/routers/health.py
"""Liveness check. Database reachability is covered by /realtime/test."""

from fastapi import APIRouter
from datetime import datetime, timezone
from app.config import settings
from app.schemas.dashboard import HealthOut

router = APIRouter()


@router.get("/health", response_model=HealthOut, summary="Service health check")
def health_check():
    ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return {"ok": True, "service": settings.SERVICE_NAME, "ts": ts}
