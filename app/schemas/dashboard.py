# app/schemas/dashboard.py
from pydantic import BaseModel


class PredictionOut(BaseModel):
    area: str
    hour: int
    predictedAvailable: int


class UserSettings(BaseModel):
    preferredArea: str
    notificationsEnabled: bool


class HealthOut(BaseModel):
    ok: bool
    service: str
    ts: str
