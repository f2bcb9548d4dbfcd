"""HUD/UI rendering."""

import pygame

from config import COLOR_TEXT, FONT_SIZE


def score_line(score: int) -> str:
    return f"Score: {score}"


def game_over_lines(score: int) -> list[str]:
    return ["GAME OVER", score_line(score), "Press ENTER to retry"]


class HUD:
    """Handles HUD and UI rendering."""

    def __init__(self, font: pygame.font.Font | None = None) -> None:
        self.font = font or pygame.font.SysFont(None, FONT_SIZE)

    def draw(self, surface: pygame.Surface, lines: list[str], pos: tuple[int, int] = (5, 5)) -> None:
        """Draw HUD text lines top to bottom starting at pos."""
        x, y = pos
        for line in lines:
            surf = self.font.render(line, True, COLOR_TEXT)
            surface.blit(surf, (x, y))
            y += surf.get_height() + 2
