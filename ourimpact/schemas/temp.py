"""
Temperature reading schemas.
"""

from datetime import datetime
from typing import List, Optional

from ourimpact.schemas.base import BaseSchema, IDSchema


class TempReadingCreate(BaseSchema):
    """A reading produced by the weather job, before rounding."""
    city: str
    curr_temp_cel: float
    curr_temp_far: float
    min_temp_cel: float
    max_temp_cel: float
    min_temp_far: float
    max_temp_far: float
    air_quality: Optional[int] = None


class TempReading(TempReadingCreate, IDSchema):
    created_at: datetime


class WeatherDataResponse(BaseSchema):
    weather_data: List[TempReading]
