# app/routers/dashboard.py
"""Dashboard widgets: availability predictions and user settings."""

from fastapi import APIRouter, Body, Depends, Query, Request
from typing import Any, Dict, Optional
from app.schemas.dashboard import PredictionOut, UserSettings
from app.services import mock_service
from app.services.settings_store import SettingsStore

router = APIRouter()


def get_settings_store(request: Request) -> SettingsStore:
    """FastAPI dependency: the app-wide settings store created in main.py."""
    return request.app.state.settings_store


@router.get("/predictions", response_model=PredictionOut, summary="Predicted available spots")
def get_prediction(area: str = "Melbourne CBD", hour: int = Query(12, ge=0, le=23)):
    return {"area": area, "hour": hour, "predictedAvailable": mock_service.predict_available(hour)}


@router.get("/settings", response_model=UserSettings)
def read_settings(store: SettingsStore = Depends(get_settings_store)):
    return store.get()


@router.post("/settings", response_model=UserSettings, summary="Update user settings")
def update_settings(
    body: Optional[Dict[str, Any]] = Body(None),
    store: SettingsStore = Depends(get_settings_store),
):
    """Fields with the wrong type are ignored; the current settings are always returned."""
    return store.update(body or {})
