# app/services/trend_service.py
"""
Read-only statistics tables behind the Trends page:
  - vehicle_ownership_growth
  - population_growth
  - sign_plates_parking_zone
Rows are returned as dicts keyed by database column name, matching the
published CSV headers the frontend charts are built on.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.population_growth import PopulationGrowth
from app.models.sign_plate import SignPlate
from app.models.vehicle_ownership import VehicleOwnershipGrowth
from app.utils.errors import DatabaseError
from app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SIGN_PLATE_LIMIT = 1000


def _columns(model, overrides: dict = None):
    """All table columns labelled with their DB names, with optional SQL overrides."""
    overrides = overrides or {}
    return [overrides.get(c.name, c).label(c.name) for c in model.__table__.columns]


def _rows(query) -> list:
    return [dict(r._mapping) for r in query.all()]


def get_vehicle_ownership_growth(db: Session, state: Optional[str] = None) -> list:
    q = db.query(*_columns(VehicleOwnershipGrowth))
    if state:
        q = q.filter(VehicleOwnershipGrowth.state == state)
    q = q.order_by(VehicleOwnershipGrowth.state_key)
    try:
        return _rows(q)
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching vehicle ownership growth: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch vehicle ownership growth")


def get_population_growth(
    db: Session,
    st_code: Optional[int] = None,
    st_name: Optional[str] = None,
    limit: Optional[int] = None,
) -> list:
    q = db.query(*_columns(PopulationGrowth))
    if st_code is not None:
        q = q.filter(PopulationGrowth.st_code == st_code)
    if st_name:
        q = q.filter(PopulationGrowth.st_name == st_name)
    q = q.order_by(PopulationGrowth.population_key)
    if limit and limit > 0:
        q = q.limit(limit)
    try:
        return _rows(q)
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching population growth: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch population growth")


def get_sign_plates_by_zone(db: Session, zone=None, limit: Optional[int] = None) -> list:
    display = func.trim(func.replace(SignPlate.restriction_display, "\r", ""))
    q = db.query(*_columns(SignPlate, {"Restriction_Display": display}))
    if zone is not None:
        q = q.filter(SignPlate.parking_zone == zone)
    q = q.order_by(SignPlate.parking_zone_plates)
    q = q.limit(limit if limit and limit > 0 else DEFAULT_SIGN_PLATE_LIMIT)
    try:
        return _rows(q)
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching sign plates: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch sign plates")
