# app/routers/realtime.py
"""
Real-time parking endpoints: spots, zones, zone search, per-zone stats.
Spots come from bay sensors, or from the mock generator when USE_MOCK_DATA is on.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from app.config import settings
from app.database import get_db
from app.schemas.realtime import Demand, RealtimeQuery, RealtimeSpotsOut, ZonesOut, ZoneStatsOut
from app.services import mock_service, parking_service
from app.utils.errors import BadRequestError

router = APIRouter()


def realtime_query(
    area: str = Query("7000", min_length=1, description="Parking zone number"),
    hour: int = Query(12, ge=0, le=23),
    demand: Demand = Query("Medium"),
) -> RealtimeQuery:
    return RealtimeQuery(area=area, hour=hour, demand=demand)


@router.get("/spots", response_model=RealtimeSpotsOut, summary="Real-time spots for a zone")
def get_realtime_spots(q: RealtimeQuery = Depends(realtime_query), db: Session = Depends(get_db)):
    """
    Medium/High demand widens the search to adjacent zones.
    Zones without sensors fall back to the nearest zones that have them.
    """
    if settings.USE_MOCK_DATA:
        spots = mock_service.generate_spots(q.area, q.hour, q.demand)
        return parking_service.summarize_spots(q.area, q.hour, q.demand, spots)
    return parking_service.get_realtime_spots(db, q.area, q.hour, q.demand)


@router.get("/zones", response_model=ZonesOut, summary="All parking zones")
def get_zones(db: Session = Depends(get_db)):
    return {"zones": parking_service.get_available_zones(db)}


@router.get("/search-zones", response_model=ZonesOut, summary="Find zones by street name")
def search_zones(streetName: Optional[str] = None, db: Session = Depends(get_db)):
    if not streetName or not streetName.strip():
        raise BadRequestError("Street name is required")
    return {"zones": parking_service.search_zones_by_street_name(db, streetName)}


@router.get("/stats", response_model=ZoneStatsOut, summary="Sensor and occupied counts per zone")
def get_stats(db: Session = Depends(get_db)):
    return {"stats": parking_service.get_zone_stats(db)}


@router.get("/test", summary="Database connectivity check")
def check_database(db: Session = Depends(get_db)):
    return {"message": "Database connection successful", "data": parking_service.check_connection(db)}
