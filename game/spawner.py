"""Enemy spawning logic."""

import random

from config import SPAWN_COUNTS, SPAWN_STAGGER, SPAWN_Y
from entities import EnemyCar
from road import LANE_COUNT, lane_x


class EnemySpawner:
    """Creates batches of enemy cars above the top of the road."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def spawn_batch(self) -> list[EnemyCar]:
        """
        Return a new batch of one or two enemy cars.

        Lanes are drawn without replacement so two cars of the same batch never
        share a lane. Each later car starts further above the screen so the
        batch does not appear from a single point.
        """
        lanes = list(range(LANE_COUNT))
        self.rng.shuffle(lanes)
        count = self.rng.choice(SPAWN_COUNTS)

        return [
            EnemyCar(lane_x(lane), SPAWN_Y + i * SPAWN_STAGGER)
            for i, lane in enumerate(lanes[:count])
        ]
