"""
Parking sign plates per zone.
Restriction_Display comes from a Windows-exported CSV and may carry '\r'.
"""

from sqlalchemy import Column, Integer, String
from app.database import Base


class SignPlate(Base):
    __tablename__ = "sign_plates_parking_zone"

    parking_zone_plates = Column("ParkingZonePlates", Integer, primary_key=True)
    parking_zone = Column("ParkingZone", Integer, index=True)
    restriction_days = Column("Restriction_Days", String(100))
    time_restrictions_start = Column("Time_Restrictions_Start", String(20))
    time_restrictions_finish = Column("Time_Restrictions_Finish", String(20))
    restriction_display = Column("Restriction_Display", String(255))

    def __repr__(self):
        return f"<SignPlate {self.parking_zone_plates} zone={self.parking_zone}>"
