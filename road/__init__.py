"""Road layout module."""

from .collision import collides_with_player, has_passed, is_off_road
from .lanes import LANE_COUNT, clamp_lane, lane_x

__all__ = ["LANE_COUNT", "clamp_lane", "lane_x", "collides_with_player", "has_passed", "is_off_road"]
