"""Axis-aligned checks between enemy cars and the player row."""

from config import (
    COLLISION_ROW_Y,
    COLLISION_X_TOLERANCE,
    COLLISION_Y_TOLERANCE,
    DESPAWN_Y,
    PASSED_Y,
)


def has_passed(enemy) -> bool:
    """Return True once the enemy has scrolled below the scoring threshold."""
    return enemy.y < PASSED_Y


def is_off_road(enemy) -> bool:
    """Return True when the enemy has left the bottom of the screen."""
    return enemy.y < DESPAWN_Y


def collides_with_player(enemy, player_x: float) -> bool:
    """
    Check whether an enemy overlaps the player car.

    The enemy must be level with the player's row and in the same lane.
    """
    same_row = abs(enemy.y - COLLISION_ROW_Y) < COLLISION_Y_TOLERANCE
    same_lane = abs(enemy.x - player_x) < COLLISION_X_TOLERANCE
    return same_row and same_lane
