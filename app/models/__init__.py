# Parking Availability API — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.parking_zone import ParkingZoneSegment             # noqa
from app.models.parking_bay_sensor import ParkingBaySensor         # noqa
from app.models.vehicle_ownership import VehicleOwnershipGrowth    # noqa
from app.models.population_growth import PopulationGrowth          # noqa
from app.models.sign_plate import SignPlate                        # noqa
