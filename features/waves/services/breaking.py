"""
Breaking wave height estimation for a single swell at a beach.

The swell height comes from a model grid point at a known depth. It is
brought back to a deep water equivalent with linear shoaling, attenuated
for the angle it approaches the beach at, and turned into a breaking
height range with two empirical breaker formulas:

    Komar & Gaughan (1972):  Hb = 0.39 * g^(1/5) * (T * H0^2)^(2/5)
    Munk (1949):             Hb = H0 / (3.3 * (H0 / L0)^(1/3))

The upper bound is scaled by a slope dependent breaker index (Weggel 1972)
and both bounds are limited by depth limited breaking at the grid point.
"""
import math
from typing import Tuple

import numpy as np

from core.config import settings
from features.waves.services.dispersion import G, deep_water_wavelength, shoaling_coefficient

# Swells arriving from this far off the beach normal or more never reach it
MAX_INCIDENT_ANGLE = 90.0

SHOALING_BOUNDS = (0.5, 3.0)

# Weggel's fit is only valid up to 1:10 slopes
MAX_BEACH_SLOPE = 0.1
MAX_SLOPE_FACTOR = 1.5

NO_BREAK = (0.0, 0.0)

def incident_angle(direction: float, beach_angle: float) -> float:
    """Smallest angle in degrees between the swell direction and the beach facing direction."""
    return abs((direction - beach_angle + 180) % 360 - 180)

def refraction_coefficient(angle: float) -> float:
    """Kr = sqrt(cos(theta)), zero once the swell is shadowed by the coast."""
    if angle >= MAX_INCIDENT_ANGLE:
        return 0.0
    return math.sqrt(math.cos(math.radians(angle)))

def komar_gaughan_height(deep_water_height: float, period: float) -> float:
    return 0.39 * G ** 0.2 * (period * deep_water_height ** 2) ** 0.4

def munk_height(deep_water_height: float, period: float) -> float:
    steepness = deep_water_height / deep_water_wavelength(period)
    return deep_water_height / (3.3 * steepness ** (1.0 / 3.0))

def breaker_index(beach_slope: float, breaking_height: float, period: float) -> float:
    """
    Slope dependent breaker index gamma = Hb / hb.

    Weggel: gamma = b - a * Hb / (g * T^2) with
        a = 43.8 * (1 - exp(-19 m))
        b = 1.56 / (1 + exp(-19.5 m))
    which reduces to 0.78 on a flat bottom. Never drops below the configured
    canonical index.
    """
    m = float(np.clip(beach_slope, 0.0, MAX_BEACH_SLOPE))
    a = 43.8 * (1.0 - math.exp(-19.0 * m))
    b = 1.56 / (1.0 + math.exp(-19.5 * m))
    gamma = b - a * breaking_height / (G * period ** 2)
    return max(settings.breaker_index, gamma)

def estimate_breaking_heights(
    wave_height: float,
    period: float,
    direction: float,
    beach_angle: float,
    elevation: float,
    beach_slope: float
) -> Tuple[float, float]:
    """
    Estimate the (minimum, maximum) breaking height in meters.

    elevation is the signed elevation of the model grid point the swell was
    forecast at, negative underwater. Any degenerate input gives (0, 0)
    rather than an error.
    """
    inputs = (wave_height, period, direction, beach_angle, elevation, beach_slope)
    if not all(math.isfinite(value) for value in inputs):
        return NO_BREAK
    if wave_height <= 0 or period <= 0 or beach_slope < 0 or elevation >= 0:
        return NO_BREAK

    # Extreme but finite inputs overflow or underflow the empirical formulas
    try:
        with np.errstate(all="ignore"):
            low, high = _breaking_range(wave_height, period, direction, beach_angle, -elevation, beach_slope)
    except (OverflowError, ZeroDivisionError):
        return NO_BREAK

    if not (math.isfinite(low) and math.isfinite(high)) or low < 0:
        return NO_BREAK
    return float(low), float(high)

def _breaking_range(
    wave_height: float,
    period: float,
    direction: float,
    beach_angle: float,
    depth: float,
    beach_slope: float
) -> Tuple[float, float]:
    kr = refraction_coefficient(incident_angle(direction, beach_angle))
    if kr <= 0:
        return NO_BREAK

    ks = shoaling_coefficient(period, depth)
    if not ks > 0:
        return NO_BREAK
    ks = float(np.clip(ks, *SHOALING_BOUNDS))

    deep_water_height = wave_height / ks * kr
    estimates = (
        komar_gaughan_height(deep_water_height, period),
        munk_height(deep_water_height, period),
    )
    low, high = min(estimates), max(estimates)

    gamma = breaker_index(beach_slope, high, period)
    high *= min(gamma / settings.breaker_index, MAX_SLOPE_FACTOR)

    depth_limit = gamma * depth
    return min(low, depth_limit), min(high, depth_limit)
