"""Main game state management."""

import random

from config import BASE_SPEED, MAX_SPEED, SPEED_INCREMENT, SPEED_UP_EVERY
from entities import EnemyCar, Player
from road import collides_with_player, has_passed, is_off_road
from .spawner import EnemySpawner


class GameState:
    """Manages the simulation: player lane, enemy cars, score and difficulty."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.spawner = EnemySpawner(rng)
        self.player = Player()
        self.enemies: list[EnemyCar] = []

        self.speed = BASE_SPEED
        self.score = 0
        self.game_over = False

        self.restart()

    @property
    def player_x(self) -> float:
        return self.player.x

    @property
    def is_playing(self) -> bool:
        return not self.game_over

    def restart(self) -> None:
        """Reset the round and spawn the first batch of enemies."""
        self.player.reset()
        self.speed = BASE_SPEED
        self.score = 0
        self.game_over = False
        self.enemies.clear()
        self.spawn_batch()

    def spawn_batch(self) -> None:
        self.enemies.extend(self.spawner.spawn_batch())

    def move_left(self) -> None:
        if self.game_over:
            return
        self.player.move(-1)

    def move_right(self) -> None:
        if self.game_over:
            return
        self.player.move(1)

    def tick(self) -> None:
        """
        Advance the simulation by one frame.

        Does nothing after a crash; the host keeps calling it at a fixed
        cadence and the scene simply stays frozen until restart().
        """
        if self.game_over:
            return

        player_x = self.player_x
        for enemy in self.enemies:
            enemy.advance(self.speed)

            if not enemy.passed and has_passed(enemy):
                enemy.passed = True
                self._add_point()

            # Remaining enemies still move this frame; the state is terminal either way
            if collides_with_player(enemy, player_x):
                self.game_over = True

        self.enemies = [enemy for enemy in self.enemies if not is_off_road(enemy)]
        if not self.enemies:
            self.spawn_batch()

    def _add_point(self) -> None:
        self.score += 1
        # Step the difficulty every few points, never past the ceiling
        if self.score % SPEED_UP_EVERY == 0 and self.speed < MAX_SPEED:
            self.speed = min(self.speed + SPEED_INCREMENT, MAX_SPEED)
