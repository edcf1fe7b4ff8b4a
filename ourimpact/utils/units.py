"""
Temperature conversion and rounding helpers for weather readings.

OpenWeather reports temperatures in Kelvin. Stored readings are always
rounded to two decimal places, half up.
"""

from decimal import ROUND_HALF_UP, Decimal

KELVIN_OFFSET = 273.15
# F = (K - 273) * 1.8 + 32
FAHRENHEIT_KELVIN_OFFSET = 273


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round like a person would (2.345 -> 2.35), not banker's rounding.

    Goes through the decimal repr of the float so 2.675 rounds to 2.68.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def kelvin_to_celsius(kelvin: float) -> float:
    return round_half_up(kelvin - KELVIN_OFFSET)


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return round_half_up((kelvin - FAHRENHEIT_KELVIN_OFFSET) * 1.8 + 32)
