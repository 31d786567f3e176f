"""Unit tests for the statistics wrappers (vehicle ownership, population, sign plates)."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import OperationalError
from app.models.population_growth import PopulationGrowth
from app.models.sign_plate import SignPlate
from app.models.vehicle_ownership import VehicleOwnershipGrowth
from app.services.trend_service import (
    DEFAULT_SIGN_PLATE_LIMIT,
    get_population_growth,
    get_sign_plates_by_zone,
    get_vehicle_ownership_growth,
)
from app.utils.errors import DatabaseError


@pytest.fixture
def stats_db(db):
    db.add_all([
        VehicleOwnershipGrowth(state_key=2, state="Victoria", no_2020_2021=5_100_000, percent_2020_2021=2.1),
        VehicleOwnershipGrowth(state_key=1, state="New South Wales", no_2020_2021=6_000_000, percent_2020_2021=1.8),
        VehicleOwnershipGrowth(state_key=3, state="Queensland", no_2020_2021=4_200_000, percent_2020_2021=2.6),
    ])
    # st_code 2 (Victoria) on keys 2, 3, 5, 7, 8
    for key in range(1, 9):
        st_code = 2 if key in (2, 3, 5, 7, 8) else 1
        db.add(PopulationGrowth(
            population_key=key, st_code=st_code,
            st_name="Victoria" if st_code == 2 else "New South Wales",
            gccsa_code=f"{st_code}GMEL" if key % 2 else f"{st_code}RVIC",
            erp_2021=1000 * key, change_2011_2021_no=100 * key, change_2011_2021_pct=1.5,
        ))
    db.add_all([
        SignPlate(parking_zone_plates=3, parking_zone=7001, restriction_days="Mon-Fri",
                  time_restrictions_start="07:30", time_restrictions_finish="18:30",
                  restriction_display=" 2P Meter\r"),
        SignPlate(parking_zone_plates=1, parking_zone=7001, restriction_days="Sat",
                  time_restrictions_start="07:30", time_restrictions_finish="12:30",
                  restriction_display="1P"),
        SignPlate(parking_zone_plates=2, parking_zone=7002, restriction_days="Mon-Sun",
                  time_restrictions_start="00:00", time_restrictions_finish="23:59",
                  restriction_display="\rLZ 30M\r"),
    ])
    db.commit()
    return db


class TestVehicleOwnership:
    def test_all_states_ordered_by_key(self, stats_db):
        rows = get_vehicle_ownership_growth(stats_db)
        assert [r["state"] for r in rows] == ["New South Wales", "Victoria", "Queensland"]
        assert set(rows[0]) >= {"state", "state_key", "no_2016_2017", "percent_2020_2021"}

    def test_state_filter(self, stats_db):
        rows = get_vehicle_ownership_growth(stats_db, state="Victoria")
        assert len(rows) == 1
        assert rows[0]["no_2020_2021"] == 5_100_000


class TestPopulationGrowth:
    def test_code_filter_and_limit(self, stats_db):
        rows = get_population_growth(stats_db, st_code=2, limit=3)
        assert [r["population_key"] for r in rows] == [2, 3, 5]
        assert all(r["ST_code"] == 2 for r in rows)

    def test_filters_are_combined(self, stats_db):
        assert get_population_growth(stats_db, st_code=2, st_name="New South Wales") == []

    def test_rows_keyed_by_source_column_names(self, stats_db):
        row = get_population_growth(stats_db, limit=1)[0]
        assert row["2011-2021_no"] == 100
        assert row["2011-2021_%"] == 1.5
        assert "Population_density_2021" in row

    def test_no_limit_returns_everything(self, stats_db):
        assert len(get_population_growth(stats_db)) == 8


class TestSignPlates:
    def test_display_text_cleaned(self, stats_db):
        rows = get_sign_plates_by_zone(stats_db)
        assert [r["ParkingZonePlates"] for r in rows] == [1, 2, 3]
        assert [r["Restriction_Display"] for r in rows] == ["1P", "LZ 30M", "2P Meter"]

    def test_zone_filter(self, stats_db):
        rows = get_sign_plates_by_zone(stats_db, zone=7001)
        assert {r["ParkingZone"] for r in rows} == {7001}
        assert len(rows) == 2

    def test_explicit_limit(self, stats_db):
        assert len(get_sign_plates_by_zone(stats_db, limit=2)) == 2

    def test_default_cap(self, db):
        db.add_all([SignPlate(parking_zone_plates=i, parking_zone=7001, restriction_display="2P")
                    for i in range(DEFAULT_SIGN_PLATE_LIMIT + 5)])
        db.commit()
        assert len(get_sign_plates_by_zone(db)) == DEFAULT_SIGN_PLATE_LIMIT


class TestErrors:
    @pytest.mark.parametrize("call,message", [
        (lambda db: get_vehicle_ownership_growth(db), "Failed to fetch vehicle ownership growth"),
        (lambda db: get_population_growth(db, st_code=2), "Failed to fetch population growth"),
        (lambda db: get_sign_plates_by_zone(db), "Failed to fetch sign plates"),
    ])
    def test_query_failure_is_generic(self, call, message):
        db = MagicMock()
        db.query.return_value.filter.return_value = db.query.return_value
        db.query.return_value.order_by.return_value = db.query.return_value
        db.query.return_value.limit.return_value = db.query.return_value
        db.query.return_value.all.side_effect = OperationalError("SELECT", {}, Exception("Unknown column"))

        with pytest.raises(DatabaseError) as exc_info:
            call(db)
        assert exc_info.value.message == message
