"""Game state management module."""

from .controls import handle_event
from .game_state import GameState
from .spawner import EnemySpawner

__all__ = ["GameState", "EnemySpawner", "handle_event"]
