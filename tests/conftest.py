"""Shared fixtures: in-memory SQLite database seeded with parking reference data."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date, time
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.database import create_tables, get_db
from app.models.parking_bay_sensor import ParkingBaySensor
from app.models.parking_zone import ParkingZoneSegment


def add_segment(db, zone, street, street_from, street_to):
    db.add(ParkingZoneSegment(parking_zone=zone, on_street=street,
                              street_from=street_from, street_to=street_to))


def add_sensor(db, sensor_id, zone, status="Unoccupied", lat=-37.81, lng=144.96,
               day=date(2023, 10, 1), at=time(8, 0)):
    db.add(ParkingBaySensor(sensor_id=sensor_id, zone_number=zone, status_description=status,
                            latitude=lat, longitude=lng,
                            last_updated_date=day, last_updated_time=at))


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    yield session
    session.close()


@pytest.fixture
def seeded_db(db):
    """
    Zones:  7001 Collins St (Swanston → Elizabeth)
            7002 Collins St (Elizabeth → Queen)      same street as 7001
            7003 Swanston St (Flinders → Collins)    bounds touch Collins St
            7010 Lonsdale St (Russell → Exhibition)  unrelated
    Sensors with bad coordinates (4, 5, 9) must never surface.
    """
    add_segment(db, 7001, "Collins St", "Swanston St", "Elizabeth St")
    add_segment(db, 7002, "Collins St", "Elizabeth St", "Queen St")
    add_segment(db, 7003, "Swanston St", "Flinders St", "Collins St")
    add_segment(db, 7010, "Lonsdale St", "Russell St", "Exhibition St")

    add_sensor(db, 1, 7001, "Present", at=time(8, 0))
    add_sensor(db, 2, 7001, "Unoccupied", at=time(9, 0))
    add_sensor(db, 3, 7001, None, day=date(2023, 9, 30), at=time(23, 0))
    add_sensor(db, 4, 7001, "Present", lat=0, lng=144.9)
    add_sensor(db, 5, 7001, "Present", lat=None)
    add_sensor(db, 6, 7002, "Unoccupied", at=time(7, 0))
    add_sensor(db, 7, 7003, "Present", at=time(10, 0))
    add_sensor(db, 8, 7010, "Present", at=time(6, 0))
    add_sensor(db, 9, 7021, "Present", lat=0, lng=0)
    add_sensor(db, 10, 7030, "Unoccupied", at=time(5, 0))
    db.commit()
    return db


@pytest.fixture
def client(db):
    from app.main import app
    from app.services.settings_store import SettingsStore

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.state.settings_store = SettingsStore()
    app.state.rate_limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
