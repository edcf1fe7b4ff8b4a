"""
Temperature readings router.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.crud.temp import temp as crud_temp
from ourimpact.database import get_db
from ourimpact.schemas.temp import TempReading, WeatherDataResponse

router = APIRouter(
    prefix="/temps",
    tags=["weather"],
)


@router.get("", response_model=WeatherDataResponse)
async def latest_readings(db: AsyncSession = Depends(get_db)):
    """The 20 most recent readings, newest first."""
    db_readings = await crud_temp.latest(db)
    return WeatherDataResponse(weather_data=[TempReading.model_validate(r) for r in db_readings])
