"""
Temperature reading CRUD operations.

Readings are written by the scheduled weather job and only read by
the API.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.core.exceptions import BadRequestError
from ourimpact.crud.base import CRUDBase
from ourimpact.models.temp_reading import TempReading
from ourimpact.schemas.temp import TempReadingCreate
from ourimpact.utils.logging_config import get_logger
from ourimpact.utils.units import round_half_up

logger = get_logger(__name__)

LATEST_READINGS = 20

TEMPERATURE_FIELDS = (
    "curr_temp_cel",
    "curr_temp_far",
    "min_temp_cel",
    "max_temp_cel",
    "min_temp_far",
    "max_temp_far",
)


class CRUDTemp(CRUDBase[TempReading, TempReadingCreate, TempReadingCreate]):
    """
    CRUD operations for TempReading model.
    """

    async def latest(self, db: AsyncSession, limit: int = LATEST_READINGS) -> List[TempReading]:
        """
        Get the newest readings first.

        Args:
            db: Database session
            limit: Number of readings to return

        Returns:
            Up to `limit` readings ordered newest first
        """
        result = await db.execute(
            select(TempReading)
            .order_by(TempReading.created_at.desc(), TempReading.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def record(self, db: AsyncSession, *, obj_in: TempReadingCreate) -> TempReading:
        """
        Store one reading, temperatures rounded to two decimals.

        Raises:
            BadRequestError: If the store rejects the reading
        """
        data = obj_in.model_dump()
        for field in TEMPERATURE_FIELDS:
            data[field] = round_half_up(data[field])

        db_obj = TempReading(**data)
        try:
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.error(f"Could not store reading for {obj_in.city}: {exc}")
            raise BadRequestError(f"Could not store weather reading: {exc}") from exc
        return db_obj


# Create instance of CRUDTemp
temp = CRUDTemp(TempReading)
