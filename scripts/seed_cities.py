"""
Seed script for the fixed set of cities.

Creates any missing tables and inserts the 20 cities users can comment
on. Cities that already exist are left alone, so the script can be run
repeatedly.

Run this script after running database migrations:
    python -m scripts.seed_cities
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import ourimpact modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from ourimpact.database import async_session, create_tables, engine
from ourimpact.models.city import City
from ourimpact.utils.logging_config import get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Two cities per country
CITIES = [
    {"name": "Paris", "country_code": "FR", "latitude": 48.8588897, "longitude": 2.3200410217200766},
    {"name": "Toulouse", "country_code": "FR", "latitude": 43.6044622, "longitude": 1.4442469},
    {"name": "London", "country_code": "GB", "latitude": 51.5073219, "longitude": -0.1276474},
    {"name": "Inverness", "country_code": "GB", "latitude": 57.4790124, "longitude": -4.225739},
    {"name": "Beijing", "country_code": "CN", "latitude": 39.906217, "longitude": 116.3912757},
    {"name": "Xinxiang", "country_code": "CN", "latitude": 35.3021133, "longitude": 113.9202062},
    {"name": "Tokyo", "country_code": "JP", "latitude": 35.6828387, "longitude": 139.7594549},
    {"name": "Kyoto", "country_code": "JP", "latitude": 35.021041, "longitude": 135.7556075},
    {"name": "Toronto", "country_code": "CA", "latitude": 43.6534817, "longitude": -79.3839347},
    {"name": "Vancouver", "country_code": "CA", "latitude": 49.2608724, "longitude": -123.113952},
    {"name": "Dallas", "country_code": "US", "latitude": 32.7762719, "longitude": -96.7968559},
    {"name": "New Orleans", "country_code": "US", "latitude": 29.9759983, "longitude": -90.0782127},
    {"name": "Berlin", "country_code": "DE", "latitude": 52.5170365, "longitude": 13.3888599},
    {"name": "Frankfurt", "country_code": "DE", "latitude": 50.1106444, "longitude": 8.6820917},
    {"name": "Delhi", "country_code": "IN", "latitude": 28.6517178, "longitude": 77.2219388},
    {"name": "Hapur", "country_code": "IN", "latitude": 28.7299677, "longitude": 77.775499},
    {"name": "Mexico City", "country_code": "MX", "latitude": 19.4326296, "longitude": -99.1331785},
    {"name": "Aguascalientes", "country_code": "MX", "latitude": 21.880487, "longitude": -102.2967195},
    {"name": "Sydney", "country_code": "AU", "latitude": -33.8698439, "longitude": 151.2082848},
    {"name": "Perth", "country_code": "AU", "latitude": -31.9558964, "longitude": 115.8605801},
]


async def seed_cities(session_factory=async_session) -> int:
    """
    Insert every city in CITIES that is not already stored.

    Returns:
        Number of cities created
    """
    created = 0
    async with session_factory() as session:
        try:
            result = await session.execute(select(City.name))
            existing = set(result.scalars().all())

            for data in CITIES:
                if data["name"] in existing:
                    logger.info(f"  City already exists: {data['name']}")
                    continue
                session.add(City(**data))
                created += 1
                logger.info(f"  Added city: {data['name']} ({data['country_code']})")

            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.error(f"Error during seeding: {e}")
            raise

    logger.info("=" * 60)
    logger.info(f"Seeding completed: {created} cities created")
    logger.info("=" * 60)
    return created


async def _run():
    try:
        await create_tables()
        await seed_cities()
    finally:
        await engine.dispose()


def main():
    """Main entry point for the seed script."""
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        logger.warning("Seeding interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
