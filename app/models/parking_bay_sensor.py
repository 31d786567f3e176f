"""
In-ground bay sensor readings (reference data).
One row per sensor with its latest status. A status of 'Present' means a
vehicle is in the bay.
"""

from sqlalchemy import Column, Integer, String, Float, Date, Time
from app.database import Base


class ParkingBaySensor(Base):
    __tablename__ = "parking_bay_sensors"

    sensor_id = Column(Integer, primary_key=True)
    zone_number = Column("Zone_Number", Integer, index=True)
    status_description = Column("Status_Description", String(50))
    latitude = Column("Latitude", Float)
    longitude = Column("Longitude", Float)
    last_updated_date = Column("Lastupdated_Date", Date)
    last_updated_time = Column("Lastupdated_Time", Time)

    def __repr__(self):
        return f"<ParkingBaySensor {self.sensor_id} zone={self.zone_number} status={self.status_description}>"
