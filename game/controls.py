"""Keyboard and window event handling."""

import pygame

from .game_state import GameState

RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def handle_event(event: pygame.event.Event, game_state: GameState) -> bool:
    """
    Forward a pygame event to the game state.

    Returns True when the window was closed and the main loop should stop.
    """
    if event.type == pygame.QUIT:
        return True
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_LEFT:
            game_state.move_left()
        elif event.key == pygame.K_RIGHT:
            game_state.move_right()
        elif event.key in RESTART_KEYS and game_state.game_over:
            game_state.restart()
    return False
