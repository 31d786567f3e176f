# app/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy with MySQL (PyMySQL driver). The parking tables are
reference data owned by the data pipeline; this API only reads them.
create_tables() exists for local development databases.
"""

from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from app.config import settings

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,          # Auto-reconnect if DB connection drops
    pool_size=10,
    max_overflow=20,
    echo=False,                  # Set True to log all SQL queries (debug only)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """
    Creates any missing tables. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from app.models.parking_zone import ParkingZoneSegment      # noqa
    from app.models.parking_bay_sensor import ParkingBaySensor  # noqa
    from app.models.vehicle_ownership import VehicleOwnershipGrowth  # noqa
    from app.models.population_growth import PopulationGrowth   # noqa
    from app.models.sign_plate import SignPlate                 # noqa

    Base.metadata.create_all(bind=bind or engine)
