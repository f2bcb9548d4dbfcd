"""Main entry point for the game."""

import sys

import pygame

from config import ASSET_PATHS, FPS, OPAQUE_ASSETS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from game import GameState, handle_event
from rendering import AssetLoadError, Renderer, load_textures


def main() -> None:
    """Main game loop."""
    pygame.init()
    pygame.display.set_caption(WINDOW_TITLE)
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()

    # All three images are required; there is no degraded mode
    try:
        textures = load_textures(ASSET_PATHS, opaque=OPAQUE_ASSETS)
    except AssetLoadError as e:
        print(f"Error: {e}")
        print("One or more textures failed to load. Exiting.")
        pygame.quit()
        sys.exit(1)

    renderer = Renderer(screen, textures)
    game_state = GameState()

    running = True
    while running:
        # Fixed cadence: one simulation step per frame at ~16ms
        clock.tick(FPS)

        for event in pygame.event.get():
            if handle_event(event, game_state):
                running = False

        game_state.tick()

        renderer.draw(game_state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
