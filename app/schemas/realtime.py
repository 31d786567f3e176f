# app/schemas/realtime.py
from pydantic import BaseModel
from typing import List, Literal, Optional, Union

Demand = Literal["High", "Medium", "Low"]


class RealtimeQuery(BaseModel):
    area: str = "7000"
    hour: int = 12
    demand: Demand = "Medium"


class SpotOut(BaseModel):
    id: str
    lat: float
    lng: float
    occupied: bool
    zone: Optional[Union[int, str]] = None
    street: Optional[str] = None
    streetFrom: Optional[str] = None
    streetTo: Optional[str] = None
    lastUpdated: Optional[str] = None


class RealtimeSpotsOut(BaseModel):
    area: str
    hour: int
    demand: Demand
    spots: List[SpotOut]
    totalSpots: int
    availableSpots: int
    occupiedSpots: int


class ZoneOut(BaseModel):
    zoneNumber: Union[int, str]
    streetName: Optional[str]
    streetFrom: Optional[str]
    streetTo: Optional[str]


class ZonesOut(BaseModel):
    zones: List[ZoneOut]


class ZoneStatOut(BaseModel):
    Zone_Number: Union[int, str, None]
    total_sensors: int
    occupied_count: int
    street_name: Optional[str]


class ZoneStatsOut(BaseModel):
    stats: List[ZoneStatOut]
