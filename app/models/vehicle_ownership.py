"""Vehicle ownership growth per state, 2016–2021 (statistics table)."""

from sqlalchemy import Column, Integer, String, Float
from app.database import Base


class VehicleOwnershipGrowth(Base):
    __tablename__ = "vehicle_ownership_growth"

    state_key = Column(Integer, primary_key=True)
    state = Column(String(100), index=True)
    no_2016_2017 = Column(Integer)
    percent_2016_2017 = Column(Float)
    no_2017_2018 = Column(Integer)
    percent_2017_2018 = Column(Float)
    no_2018_2019 = Column(Integer)
    percent_2018_2019 = Column(Float)
    no_2019_2020 = Column(Integer)
    percent_2019_2020 = Column(Float)
    no_2020_2021 = Column(Integer)
    percent_2020_2021 = Column(Float)
