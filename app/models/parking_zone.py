"""
Parking zone street segments (reference data).
A zone may span several street segments; each row is one segment.
"""

from sqlalchemy import Column, Integer, String
from app.database import Base


class ParkingZoneSegment(Base):
    __tablename__ = "parking_zones_street_segments"

    parking_zone = Column("ParkingZone", Integer, primary_key=True, index=True)
    on_street = Column("OnStreet", String(255), primary_key=True)
    street_from = Column("StreetFrom", String(255), primary_key=True)
    street_to = Column("StreetTo", String(255), primary_key=True)

    def __repr__(self):
        return f"<ParkingZoneSegment {self.parking_zone} {self.on_street} ({self.street_from} → {self.street_to})>"
