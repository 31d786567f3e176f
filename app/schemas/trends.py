# app/schemas/trends.py
from pydantic import BaseModel
from typing import Any, Dict, List


class TrendSeries(BaseModel):
    area: str
    values: List[int]


class TrendsOut(BaseModel):
    hours: List[int]
    series: List[TrendSeries]


class RowsOut(BaseModel):
    """Statistics rows, keyed by source column name."""
    rows: List[Dict[str, Any]]
