"""Lane layout for the three-lane road."""

from config import LANES

LANE_COUNT = len(LANES)


def clamp_lane(index: int) -> int:
    """Clamp a lane index to the road; the edges do not wrap."""
    return max(0, min(LANE_COUNT - 1, index))


def lane_x(index: int) -> float:
    """Return the x coordinate of the center of a lane."""
    return LANES[index]
