# app/services/mock_service.py
"""
Generated parking data for demo mode (USE_MOCK_DATA=true) and for the
dashboard widgets that have no backing table yet (trend series, predictions).
All generators take an optional random.Random so tests can seed them.
"""

import math
import random
from typing import Optional

AREAS = ["Melbourne CBD", "Docklands", "Southbank"]

AREA_CENTERS = {
    "Melbourne CBD": (-37.8136, 144.9631),
    "Docklands": (-37.8139, 144.942),
    "Southbank": (-37.8226, 144.9643),
}

BASE_SPOT_COUNT = {"High": 20, "Medium": 50, "Low": 80}
OCCUPANCY_RATE = {"High": 0.7, "Medium": 0.5, "Low": 0.3}


def _daily_wave(hour: int) -> float:
    return math.sin((hour / 24) * math.pi * 2)


def generate_spots(area: str = "Melbourne CBD", hour: int = 12, demand: str = "Medium",
                   rng: Optional[random.Random] = None) -> list:
    """Fewer visible spots and a higher occupied share as demand rises."""
    rng = rng or random.Random()
    count = max(10, round(BASE_SPOT_COUNT[demand] + _daily_wave(hour) * 10))
    center_lat, center_lng = AREA_CENTERS.get(area, AREA_CENTERS["Melbourne CBD"])
    rate = OCCUPANCY_RATE[demand]
    return [
        {
            "id": f"{area}-{hour}-{i}",
            "lat": center_lat + (rng.random() - 0.5) * 0.01,
            "lng": center_lng + (rng.random() - 0.5) * 0.01,
            "occupied": rng.random() < rate,
        }
        for i in range(count)
    ]


def generate_trends(rng: Optional[random.Random] = None) -> dict:
    """Availability (%) per hour of day for each area."""
    rng = rng or random.Random()
    hours = list(range(24))
    series = []
    for area in AREAS:
        offset = 5 if area == "Docklands" else 0
        values = [round(100 - (_daily_wave(h) * 30 + rng.random() * 10 + offset)) for h in hours]
        series.append({"area": area, "values": values})
    return {"hours": hours, "series": series}


def predict_available(hour: int, rng: Optional[random.Random] = None) -> int:
    rng = rng or random.Random()
    return max(0, round(80 - hour * 2 + rng.random() * 10))
