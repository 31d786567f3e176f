# app/routers/trends.py
"""Trends page: hourly availability series + population/vehicle statistics."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.schemas.trends import RowsOut, TrendsOut
from app.services import mock_service, trend_service
from app.services.zone_service import zone_key

router = APIRouter()


@router.get("", response_model=TrendsOut, summary="Hourly availability per area")
def get_trends():
    return mock_service.generate_trends()


@router.get("/vehicle-ownership", response_model=RowsOut, summary="Vehicle ownership growth by state")
def get_vehicle_ownership(state: Optional[str] = None, db: Session = Depends(get_db)):
    return {"rows": trend_service.get_vehicle_ownership_growth(db, state=state)}


@router.get("/population", response_model=RowsOut, summary="Population growth by region")
def get_population(
    st_code: Optional[int] = None,
    st_name: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    return {"rows": trend_service.get_population_growth(db, st_code=st_code, st_name=st_name, limit=limit)}


@router.get("/sign-plates", response_model=RowsOut, summary="Parking sign plates by zone")
def get_sign_plates(
    zone: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """Capped at 1000 rows unless `limit` is given."""
    zone = zone_key(zone) if zone else None
    return {"rows": trend_service.get_sign_plates_by_zone(db, zone=zone, limit=limit)}
