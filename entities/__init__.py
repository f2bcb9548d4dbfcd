"""Game entities module."""

from .enemy_car import EnemyCar
from .player import Player

__all__ = ["EnemyCar", "Player"]
