import math
from typing import Optional

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"
]
POINT_WIDTH = 360.0 / len(COMPASS_POINTS)

def degree_to_direction(degrees: Optional[float]) -> str:
    """Get the 16 point compass direction for a heading in degrees."""
    if degrees is None or not math.isfinite(degrees):
        return ""
    degrees = degrees % 360
    index = int((degrees + POINT_WIDTH / 2) // POINT_WIDTH) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]

def direction_to_degree(direction: Optional[str]) -> Optional[float]:
    """Get the center heading of a compass direction, None when unknown."""
    if not direction:
        return None
    direction = direction.strip().upper()
    if direction not in COMPASS_POINTS:
        return None
    return COMPASS_POINTS.index(direction) * POINT_WIDTH
