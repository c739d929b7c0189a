from enum import Enum
from typing import Optional

class UnitSystem(str, Enum):
    """Unit systems a forecast or observation can be expressed in."""
    METRIC = "metric"    # m, m/s, Celsius, hPa
    ENGLISH = "english"  # ft, mph, Fahrenheit, inHg

FEET_PER_METER = 3.28084
MPH_PER_MS = 2.23694
MS_PER_KNOT = 0.514444
INHG_PER_HPA = 0.0295299830714

class UnitConversions:
    """Centralized utility for unit conversions across the application.

    Values are not rounded so that converting back and forth reproduces the
    original numbers.
    """

    @staticmethod
    def meters_to_feet(meters: Optional[float]) -> Optional[float]:
        """Convert meters to feet."""
        if meters is None:
            return None
        return meters * FEET_PER_METER

    @staticmethod
    def feet_to_meters(feet: Optional[float]) -> Optional[float]:
        """Convert feet to meters."""
        if feet is None:
            return None
        return feet / FEET_PER_METER

    @staticmethod
    def ms_to_mph(ms: Optional[float]) -> Optional[float]:
        """Convert meters per second to miles per hour."""
        if ms is None:
            return None
        return ms * MPH_PER_MS  # 1 m/s = 2.23694 mph

    @staticmethod
    def mph_to_ms(mph: Optional[float]) -> Optional[float]:
        """Convert miles per hour to meters per second."""
        if mph is None:
            return None
        return mph / MPH_PER_MS

    @staticmethod
    def knots_to_ms(knots: Optional[float]) -> Optional[float]:
        """Convert knots to meters per second."""
        if knots is None:
            return None
        return knots * MS_PER_KNOT

    @staticmethod
    def celsius_to_fahrenheit(celsius: Optional[float]) -> Optional[float]:
        if celsius is None:
            return None
        return celsius * 9.0 / 5.0 + 32.0

    @staticmethod
    def fahrenheit_to_celsius(fahrenheit: Optional[float]) -> Optional[float]:
        if fahrenheit is None:
            return None
        return (fahrenheit - 32.0) * 5.0 / 9.0

    @staticmethod
    def hpa_to_inhg(hpa: Optional[float]) -> Optional[float]:
        if hpa is None:
            return None
        return hpa * INHG_PER_HPA

    @staticmethod
    def inhg_to_hpa(inhg: Optional[float]) -> Optional[float]:
        if inhg is None:
            return None
        return inhg / INHG_PER_HPA

    @staticmethod
    def convert_length(value: Optional[float], from_units: UnitSystem, to_units: UnitSystem) -> Optional[float]:
        """Convert a height or depth between unit systems."""
        if from_units == to_units:
            return value
        if to_units == UnitSystem.ENGLISH:
            return UnitConversions.meters_to_feet(value)
        return UnitConversions.feet_to_meters(value)

    @staticmethod
    def convert_speed(value: Optional[float], from_units: UnitSystem, to_units: UnitSystem) -> Optional[float]:
        """Convert a wind speed between unit systems."""
        if from_units == to_units:
            return value
        if to_units == UnitSystem.ENGLISH:
            return UnitConversions.ms_to_mph(value)
        return UnitConversions.mph_to_ms(value)

    @staticmethod
    def convert_temperature(value: Optional[float], from_units: UnitSystem, to_units: UnitSystem) -> Optional[float]:
        if from_units == to_units:
            return value
        if to_units == UnitSystem.ENGLISH:
            return UnitConversions.celsius_to_fahrenheit(value)
        return UnitConversions.fahrenheit_to_celsius(value)

    @staticmethod
    def convert_pressure(value: Optional[float], from_units: UnitSystem, to_units: UnitSystem) -> Optional[float]:
        if from_units == to_units:
            return value
        if to_units == UnitSystem.ENGLISH:
            return UnitConversions.hpa_to_inhg(value)
        return UnitConversions.inhg_to_hpa(value)
