# app/services/parking_service.py
"""
Real-time parking spots, zones and per-zone sensor statistics.
Reads parking_bay_sensors joined with parking_zones_street_segments.
Database failures are logged in full and re-raised as a generic DatabaseError.
"""

from sqlalchemy import case, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.parking_bay_sensor import ParkingBaySensor
from app.models.parking_zone import ParkingZoneSegment
from app.services.zone_service import resolve_zones, valid_coordinates
from app.utils.errors import DatabaseError
from app.utils.logger import get_logger

logger = get_logger(__name__)

MAX_SPOTS = 200
OCCUPIED_STATUS = "Present"


def is_occupied(status_description) -> bool:
    """Sensors report 'Present' when a vehicle is in the bay; anything else is free."""
    return status_description == OCCUPIED_STATUS


def row_to_spot(row) -> dict:
    return {
        "id": f"spot-{row.sensor_id}",
        "lat": float(row.latitude),
        "lng": float(row.longitude),
        "occupied": is_occupied(row.status_description),
        "zone": row.zone_number,
        "street": row.on_street or "Unknown Street",
        "streetFrom": row.street_from,
        "streetTo": row.street_to,
        "lastUpdated": f"{row.last_updated_date} {row.last_updated_time}",
    }


def summarize_spots(area: str, hour: int, demand: str, spots: list) -> dict:
    occupied = sum(1 for s in spots if s["occupied"])
    return {
        "area": area,
        "hour": hour,
        "demand": demand,
        "spots": spots,
        "totalSpots": len(spots),
        "availableSpots": len(spots) - occupied,
        "occupiedSpots": occupied,
    }


def fetch_sensor_rows(db: Session, zones: list):
    return (
        db.query(
            ParkingBaySensor.sensor_id,
            ParkingBaySensor.zone_number,
            ParkingBaySensor.status_description,
            ParkingBaySensor.latitude,
            ParkingBaySensor.longitude,
            ParkingBaySensor.last_updated_date,
            ParkingBaySensor.last_updated_time,
            ParkingZoneSegment.on_street,
            ParkingZoneSegment.street_from,
            ParkingZoneSegment.street_to,
        )
        .outerjoin(ParkingZoneSegment, ParkingBaySensor.zone_number == ParkingZoneSegment.parking_zone)
        .filter(ParkingBaySensor.zone_number.in_(zones), *valid_coordinates())
        .order_by(ParkingBaySensor.last_updated_date.desc(), ParkingBaySensor.last_updated_time.desc())
        .limit(MAX_SPOTS)
        .all()
    )


def get_realtime_spots(db: Session, area: str, hour: int, demand: str) -> dict:
    try:
        resolution = resolve_zones(db, area, hour, demand)
        rows = fetch_sensor_rows(db, resolution.zones)
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching spots for zone {area}: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch parking spots")

    spots = [row_to_spot(r) for r in rows]
    logger.info(f"Found {len(spots)} spots for area {area}, hour {hour}, demand {demand}")
    return summarize_spots(area, hour, demand, spots)


def get_available_zones(db: Session) -> list:
    try:
        rows = (
            db.query(
                ParkingZoneSegment.parking_zone,
                ParkingZoneSegment.on_street,
                ParkingZoneSegment.street_from,
                ParkingZoneSegment.street_to,
            )
            .distinct()
            .order_by(ParkingZoneSegment.parking_zone)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error listing zones: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch zones")
    return [_zone_out(r) for r in rows]


def search_zones_by_street_name(db: Session, street_name: str) -> list:
    """Zones whose street name contains `street_name` (case-insensitive)."""
    term = street_name.strip().lower()
    for ch in ("\\", "%", "_"):
        term = term.replace(ch, "\\" + ch)
    pattern = f"%{term}%"
    try:
        rows = (
            db.query(
                ParkingZoneSegment.parking_zone,
                ParkingZoneSegment.on_street,
                ParkingZoneSegment.street_from,
                ParkingZoneSegment.street_to,
            )
            .filter(func.lower(ParkingZoneSegment.on_street).like(pattern, escape="\\"))
            .distinct()
            .order_by(ParkingZoneSegment.parking_zone)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error searching zones for '{street_name}': {e}", exc_info=True)
        raise DatabaseError("Failed to search zones")
    return [_zone_out(r) for r in rows]


def _zone_out(row) -> dict:
    return {
        "zoneNumber": row.parking_zone,
        "streetName": row.on_street,
        "streetFrom": row.street_from,
        "streetTo": row.street_to,
    }


def get_zone_stats(db: Session) -> list:
    """Sensor count and occupied count per zone/street."""
    occupied = func.sum(case((ParkingBaySensor.status_description == OCCUPIED_STATUS, 1), else_=0))
    try:
        rows = (
            db.query(
                ParkingBaySensor.zone_number.label("Zone_Number"),
                func.count().label("total_sensors"),
                occupied.label("occupied_count"),
                ParkingZoneSegment.on_street.label("street_name"),
            )
            .outerjoin(ParkingZoneSegment, ParkingBaySensor.zone_number == ParkingZoneSegment.parking_zone)
            .group_by(ParkingBaySensor.zone_number, ParkingZoneSegment.on_street)
            .order_by(ParkingBaySensor.zone_number)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching zone stats: {e}", exc_info=True)
        raise DatabaseError("Failed to fetch zone stats")
    return [
        {
            "Zone_Number": r.Zone_Number,
            "total_sensors": int(r.total_sensors),
            "occupied_count": int(r.occupied_count or 0),
            "street_name": r.street_name,
        }
        for r in rows
    ]


def check_connection(db: Session) -> list:
    try:
        rows = db.execute(text("SELECT 1 AS test")).mappings().all()
    except SQLAlchemyError as e:
        logger.error(f"Database connection test failed: {e}", exc_info=True)
        raise DatabaseError("Database connection failed")
    return [dict(r) for r in rows]
