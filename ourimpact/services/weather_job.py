"""
Scheduled weather job.

Once a day every seeded city gets a fresh temperature / air-quality
reading. The scheduler runs as its own asyncio task beside the API and
shares nothing with request handling except the database.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.config import settings
from ourimpact.core.exceptions import BadRequestError
from ourimpact.crud.city import city as crud_city
from ourimpact.crud.temp import temp as crud_temp
from ourimpact.services.openweather import OpenWeatherClient
from ourimpact.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class JobResult:
    stored: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


async def run_weather_job(
    session_factory: Callable[[], AsyncSession],
    client: OpenWeatherClient,
) -> JobResult:
    """
    Fetch and store one reading per city.

    Cities are fetched concurrently. A city whose fetch or insert fails is
    logged and skipped; the rest are still stored.

    Args:
        session_factory: Callable returning a new AsyncSession (e.g. async_session)
        client: Open client used for the HTTP calls

    Returns:
        JobResult listing stored and failed city names
    """
    async with session_factory() as db:
        cities = await crud_city.get_all(db)
    targets = [(c.name, c.latitude, c.longitude) for c in cities]

    outcomes = await asyncio.gather(
        *(client.fetch_reading(name, lat, lon) for name, lat, lon in targets),
        return_exceptions=True,
    )

    result = JobResult()
    async with session_factory() as db:
        for (name, _, _), outcome in zip(targets, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"Weather fetch failed for {name}: {outcome}")
                result.failed.append(name)
                continue
            try:
                await crud_temp.record(db, obj_in=outcome)
            except BadRequestError as exc:
                logger.error(f"Could not store reading for {name}: {exc}")
                result.failed.append(name)
            else:
                result.stored.append(name)

    logger.info(f"Weather job finished: {len(result.stored)} stored, {len(result.failed)} failed")
    return result


def next_run_after(now: datetime, run_at: time, tz: ZoneInfo) -> datetime:
    """
    Next time the clock in `tz` shows `run_at`, strictly after `now`.

    `now` must be timezone-aware.
    """
    local_now = now.astimezone(tz)
    candidate = datetime.combine(local_now.date(), run_at, tzinfo=tz)
    if candidate <= local_now:
        candidate = datetime.combine(local_now.date() + timedelta(days=1), run_at, tzinfo=tz)
    return candidate


class WeatherScheduler:
    """
    Runs `run_weather_job` every day at a fixed local time.

    A failed run is logged and the next day's run is still scheduled.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        client_factory: Callable[[], OpenWeatherClient] = OpenWeatherClient,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        timezone: Optional[str] = None,
    ):
        self.session_factory = session_factory
        self.client_factory = client_factory
        self.run_at = time(
            settings.WEATHER_JOB_HOUR if hour is None else hour,
            settings.WEATHER_JOB_MINUTE if minute is None else minute,
        )
        self.tz = ZoneInfo(timezone or settings.WEATHER_JOB_TIMEZONE)
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def seconds_until_next_run(self, now: Optional[datetime] = None) -> float:
        now = now or datetime.now(self.tz)
        return (next_run_after(now, self.run_at, self.tz) - now).total_seconds()

    async def run_once(self) -> Optional[JobResult]:
        """Run the job now. Errors are logged, never raised."""
        try:
            async with self.client_factory() as client:
                return await run_weather_job(self.session_factory, client)
        except Exception:
            logger.exception("Weather job run failed")
            return None

    async def _loop(self) -> None:
        while True:
            delay = self.seconds_until_next_run()
            logger.info(f"Next weather job run in {delay:.0f}s ({self.run_at} {self.tz.key})")
            await asyncio.sleep(delay)
            await self.run_once()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="weather-scheduler")
        logger.info("Weather scheduler started")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Weather scheduler stopped")


def scheduler_enabled() -> bool:
    if not settings.WEATHER_JOB_ENABLED:
        return False
    if not settings.OPENWEATHER_API_KEY:
        logger.warning("OPENWEATHER_API_KEY is not set; weather job disabled")
        return False
    return True
