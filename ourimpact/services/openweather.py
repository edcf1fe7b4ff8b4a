"""
OpenWeather client.

Fetches current conditions and air quality for a pair of coordinates and
turns them into a reading ready for storage.
"""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from ourimpact.config import settings
from ourimpact.schemas.temp import TempReadingCreate
from ourimpact.utils.logging_config import get_logger
from ourimpact.utils.units import kelvin_to_celsius, kelvin_to_fahrenheit

logger = get_logger(__name__)


class OpenWeatherError(Exception):
    """Raised when OpenWeather cannot be reached or answers with an error."""


def build_reading(city_name: str, weather: Dict[str, Any], pollution: Dict[str, Any]) -> TempReadingCreate:
    """
    Build a reading from OpenWeather's `weather` and `air_pollution` payloads.

    Args:
        city_name: Name the reading is stored under
        weather: Body of /weather (temperatures in Kelvin under "main")
        pollution: Body of /air_pollution (AQI under list[0].main.aqi)

    Returns:
        TempReadingCreate with Celsius and Fahrenheit values

    Raises:
        OpenWeatherError: If a temperature is missing from the payload
    """
    try:
        main = weather["main"]
        current, low, high = main["temp"], main["temp_min"], main["temp_max"]
    except (KeyError, TypeError) as exc:
        raise OpenWeatherError(f"Malformed weather payload for {city_name}") from exc

    air_quality: Optional[int] = None
    readings = pollution.get("list") or []
    if readings:
        air_quality = readings[0].get("main", {}).get("aqi")

    return TempReadingCreate(
        city=city_name,
        curr_temp_cel=kelvin_to_celsius(current),
        curr_temp_far=kelvin_to_fahrenheit(current),
        min_temp_cel=kelvin_to_celsius(low),
        max_temp_cel=kelvin_to_celsius(high),
        min_temp_far=kelvin_to_fahrenheit(low),
        max_temp_far=kelvin_to_fahrenheit(high),
        air_quality=air_quality,
    )


class OpenWeatherClient:
    """
    Thin async wrapper around the OpenWeather REST API.

    Use as an async context manager so the underlying aiohttp session
    is closed:

        async with OpenWeatherClient() as client:
            reading = await client.fetch_reading("Paris", 48.86, 2.32)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key or settings.OPENWEATHER_API_KEY
        self.base_url = (base_url or settings.OPENWEATHER_BASE_URL).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.WEATHER_REQUEST_TIMEOUT)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "OpenWeatherClient":
        self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _get(self, endpoint: str, lat: float, lon: float) -> Dict[str, Any]:
        if self._session is None:
            raise RuntimeError("OpenWeatherClient must be used inside 'async with'")

        params = {"lat": str(lat), "lon": str(lon), "appid": self.api_key}
        try:
            async with self._session.get(f"{self.base_url}/{endpoint}", params=params) as response:
                response.raise_for_status()
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise OpenWeatherError(f"{endpoint} request failed for ({lat}, {lon}): {exc}") from exc

    async def fetch_reading(self, city_name: str, lat: float, lon: float) -> TempReadingCreate:
        """Fetch weather and air quality for one city concurrently."""
        weather, pollution = await asyncio.gather(
            self._get("weather", lat, lon),
            self._get("air_pollution", lat, lon),
        )
        return build_reading(city_name, weather, pollution)
