# app/services/zone_service.py
"""
Zone resolution for real-time spot queries.

Given a requested zone and a demand level, decides which zones to query:
  Low            → the requested zone only
  Medium / High  → requested zone + up to 5 "adjacent" zones
  no sensors     → up to 5 sensor zones closest by zone number

"Adjacent" is a street-name heuristic, not geometry: two zones are adjacent
when they share an OnStreet, or when one zone's StreetFrom/StreetTo is the
other zone's OnStreet.

High demand also widens the hour window to hour ± 1. The window is logged
but the sensor table only holds latest readings, so it does not filter rows.
"""

from dataclasses import dataclass
from typing import List, Union

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session, aliased

from app.models.parking_bay_sensor import ParkingBaySensor
from app.models.parking_zone import ParkingZoneSegment
from app.utils.logger import get_logger

logger = get_logger(__name__)

MAX_ADJACENT_ZONES = 5
MAX_NEARBY_ZONES = 5

ZoneId = Union[int, str]


@dataclass
class ZoneResolution:
    zones: List[ZoneId]
    hours: List[int]
    fallback: bool = False


def zone_key(zone) -> ZoneId:
    """Numeric zone codes arrive as query strings; compare them as numbers."""
    if isinstance(zone, str) and zone.strip().isdecimal():
        return int(zone.strip())
    return zone


def demand_hours(hour: int, demand: str) -> List[int]:
    if demand == "High":
        return [max(0, hour - 1), hour, min(23, hour + 1)]
    return [hour]


def get_adjacent_zones(db: Session, zone) -> List[ZoneId]:
    z1 = aliased(ParkingZoneSegment)
    z2 = aliased(ParkingZoneSegment)
    rows = (
        db.query(z2.parking_zone)
        .join(
            z1,
            or_(
                and_(z1.on_street == z2.on_street, z1.parking_zone != z2.parking_zone),
                z1.street_from == z2.on_street,
                z1.street_to == z2.on_street,
                z2.street_from == z1.on_street,
                z2.street_to == z1.on_street,
            ),
        )
        .filter(z1.parking_zone == zone_key(zone))
        .distinct()
        .limit(MAX_ADJACENT_ZONES)
        .all()
    )
    return [r[0] for r in rows]


def count_zone_sensors(db: Session, zone) -> int:
    return (
        db.query(func.count(ParkingBaySensor.sensor_id))
        .filter(ParkingBaySensor.zone_number == zone_key(zone))
        .scalar()
        or 0
    )


def valid_coordinates():
    """Filter clauses excluding sensors with missing or zero coordinates."""
    return (
        ParkingBaySensor.latitude.isnot(None),
        ParkingBaySensor.longitude.isnot(None),
        ParkingBaySensor.latitude != 0,
        ParkingBaySensor.longitude != 0,
    )


def get_nearby_sensor_zones(db: Session, zone) -> List[ZoneId]:
    """Sensor zones with usable coordinates, closest zone number first."""
    rows = (
        db.query(ParkingBaySensor.zone_number)
        .filter(*valid_coordinates())
        .group_by(ParkingBaySensor.zone_number)
        .order_by(func.abs(ParkingBaySensor.zone_number - zone_key(zone)), ParkingBaySensor.zone_number)
        .limit(MAX_NEARBY_ZONES)
        .all()
    )
    return [r[0] for r in rows]


def resolve_zones(db: Session, area: str, hour: int, demand: str) -> ZoneResolution:
    requested = zone_key(area)
    zones = [requested]

    if demand in ("Medium", "High"):
        for z in get_adjacent_zones(db, requested):
            if z not in zones:
                zones.append(z)

    hours = demand_hours(hour, demand)
    resolution = ZoneResolution(zones=zones, hours=hours)

    if count_zone_sensors(db, requested) == 0:
        nearby = get_nearby_sensor_zones(db, requested)
        if nearby:
            logger.info(f"No sensors in zone {area}, using nearby zones: {nearby}")
            resolution.zones = nearby
            resolution.fallback = True

    logger.info(f"Querying zones: {resolution.zones}, hours: {hours}, demand: {demand}")
    return resolution
