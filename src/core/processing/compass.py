"""
Compass calculations from magnetometer field components.
The Y axis points toward magnetic north and the X axis toward east.
"""
import bisect
import math

CARDINAL_DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
SECTOR_WIDTH = 360.0 / len(CARDINAL_DIRECTIONS)
# Inclusive lower bound of every sector after N: 22.5, 67.5, ..., 337.5
SECTOR_BOUNDS = tuple(SECTOR_WIDTH / 2 + SECTOR_WIDTH * i for i in range(len(CARDINAL_DIRECTIONS)))


def calculate_heading(x: float, y: float) -> float:
    """
    Calculate compass heading from magnetometer X and Y values.

    Args:
        x: Magnetic field strength along the X (east) axis in μT
        y: Magnetic field strength along the Y (north) axis in μT

    Returns:
        Heading in degrees within [0, 360), where 0 is magnetic north
    """
    # + 0.0 turns atan2's -0.0 into 0.0
    heading = math.degrees(math.atan2(x, y)) + 0.0
    if heading < 0.0:
        heading += 360.0
    # -1e-15 + 360.0 rounds to 360.0
    if heading >= 360.0:
        heading = 0.0
    return heading


def normalize_heading(heading: float) -> float:
    """Wrap any heading into [0, 360)."""
    normalized = heading % 360.0
    if normalized >= 360.0:
        normalized = 0.0
    return normalized


def get_cardinal_direction(heading: float) -> str:
    """
    Get the cardinal direction (N, NE, E, SE, S, SW, W, NW) for a heading.
    Each direction covers a 45° sector centered on it, so N spans
    [337.5, 360) and [0, 22.5). Non-finite headings map to N.
    """
    if not math.isfinite(heading):
        return "N"
    index = bisect.bisect_right(SECTOR_BOUNDS, normalize_heading(heading)) % len(CARDINAL_DIRECTIONS)
    return CARDINAL_DIRECTIONS[index]
