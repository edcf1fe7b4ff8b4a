"""
Run the weather job once, outside the daily schedule.

Needs OPENWEATHER_API_KEY. Useful after seeding, or to backfill a day
the scheduler missed:
    python -m scripts.fetch_weather
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import ourimpact modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from ourimpact.config import settings
from ourimpact.database import async_session, engine
from ourimpact.services.openweather import OpenWeatherClient
from ourimpact.services.weather_job import run_weather_job
from ourimpact.utils.logging_config import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


async def _run():
    try:
        async with OpenWeatherClient() as client:
            return await run_weather_job(async_session, client)
    finally:
        await engine.dispose()


def main():
    if not settings.OPENWEATHER_API_KEY:
        logger.error("OPENWEATHER_API_KEY is not set")
        sys.exit(1)

    result = asyncio.run(_run())
    if result.failed:
        logger.warning(f"Failed cities: {', '.join(result.failed)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
