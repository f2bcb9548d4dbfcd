"""Player entity."""

from config import START_LANE
from road import clamp_lane, lane_x


class Player:
    def __init__(self, lane: int = START_LANE) -> None:
        self.lane = clamp_lane(lane)

    @property
    def x(self) -> float:
        """Center x of the lane the player currently occupies."""
        return lane_x(self.lane)

    def move(self, step: int) -> None:
        # Edges clamp, so repeated moves into a wall are no-ops
        self.lane = clamp_lane(self.lane + step)

    def reset(self) -> None:
        self.lane = START_LANE
