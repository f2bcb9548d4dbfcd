"""Main renderer for the road and cars."""

import pygame

from config import COLOR_BG, GAME_OVER_TEXT_POS, PLAYER_Y, SCORE_TEXT_POS, SPRITE_HEIGHT
from game import GameState
from .hud import HUD, game_over_lines, score_line
from .textures import Texture


class Renderer:
    """Handles all drawing operations."""

    def __init__(self, screen: pygame.Surface, textures: dict[str, Texture], hud: HUD | None = None) -> None:
        self.screen = screen
        self.textures = textures
        self.hud = hud or HUD()

        # Background is stretched over the whole window once
        self.background = pygame.transform.scale(textures["background"].surface, screen.get_size())

        # Scaled sprite cache keyed by (texture surface id, pixel size)
        self._sprite_cache: dict[tuple[int, tuple[int, int]], pygame.Surface] = {}

    def world_to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Map world coordinates (-1..1, y up) to pixel coordinates (y down)."""
        width, height = self.screen.get_size()
        screen_x = (x + 1.0) / 2.0 * width
        screen_y = (1.0 - y) / 2.0 * height
        return round(screen_x), round(screen_y)

    def sprite_size(self, height: float, texture: Texture) -> tuple[int, int]:
        """Pixel size of a sprite drawn at a world height, keeping its aspect ratio."""
        pixel_height = max(1, round(height / 2.0 * self.screen.get_height()))
        pixel_width = max(1, round(pixel_height * texture.aspect))
        return pixel_width, pixel_height

    def clear(self) -> None:
        """Clear the screen with background color."""
        self.screen.fill(COLOR_BG)

    def draw_background(self) -> None:
        self.screen.blit(self.background, (0, 0))

    def draw_sprite(self, x: float, y: float, height: float, texture: Texture) -> None:
        """Draw a texture centered on x with its bottom edge at y."""
        size = self.sprite_size(height, texture)
        key = (id(texture.surface), size)
        image = self._sprite_cache.get(key)
        if image is None:
            image = pygame.transform.scale(texture.surface, size)
            self._sprite_cache[key] = image

        center_x, _ = self.world_to_screen(x, y)
        _, top = self.world_to_screen(x, y + height)
        self.screen.blit(image, (center_x - size[0] // 2, top))

    def draw_text(self, lines: list[str], x: float, y: float) -> None:
        """Draw text lines with their top-left corner at a world position."""
        self.hud.draw(self.screen, lines, self.world_to_screen(x, y))

    def draw(self, game_state: GameState) -> None:
        """Render one frame from the current game state."""
        self.clear()
        self.draw_background()

        if game_state.game_over:
            # Cars are hidden behind the game over message
            self.draw_text(game_over_lines(game_state.score), *GAME_OVER_TEXT_POS)
            return

        self.draw_sprite(game_state.player_x, PLAYER_Y, SPRITE_HEIGHT, self.textures["player"])
        for enemy in game_state.enemies:
            self.draw_sprite(enemy.x, enemy.y, SPRITE_HEIGHT, self.textures["enemy"])

        self.draw_text([score_line(game_state.score)], *SCORE_TEXT_POS)
