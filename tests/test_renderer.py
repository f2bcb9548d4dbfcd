import pygame
import pytest

from config import LANES
from entities import EnemyCar
from rendering import HUD, Renderer, Texture, game_over_lines, score_line

ROAD = (200, 0, 0)
PLAYER = (0, 0, 255)
ENEMY = (0, 255, 0)


def solid(size: tuple[int, int], color: tuple[int, int, int]) -> Texture:
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color + (255,))
    return Texture(surface, size[0] / size[1])


@pytest.fixture
def renderer(display):
    textures = {
        "background": solid((10, 10), ROAD),
        "player": solid((40, 80), PLAYER),
        "enemy": solid((40, 80), ENEMY),
    }
    return Renderer(display, textures)


def test_world_to_screen_corners(renderer):
    assert renderer.world_to_screen(-1.0, 1.0) == (0, 0)
    assert renderer.world_to_screen(1.0, -1.0) == (500, 700)
    assert renderer.world_to_screen(0.0, 0.0) == (250, 350)


def test_sprite_size_keeps_aspect(renderer):
    texture = solid((80, 40), PLAYER)
    assert renderer.sprite_size(0.3, texture) == (210, 105)


def test_playing_frame_shows_cars(renderer, game_state):
    game_state.enemies = [EnemyCar(LANES[0], 0.0)]
    renderer.draw(game_state)
    screen = renderer.screen

    # Player car in the center lane near the bottom
    assert tuple(screen.get_at((250, 620)))[:3] == PLAYER
    # Enemy car in the left lane, bottom edge at mid screen
    assert tuple(screen.get_at((100, 330)))[:3] == ENEMY
    # Open road
    assert tuple(screen.get_at((480, 400)))[:3] == ROAD


def test_game_over_frame_hides_cars(renderer, game_state):
    game_state.enemies = [EnemyCar(LANES[1], -1.0)]
    game_state.tick()
    assert game_state.game_over

    renderer.draw(game_state)
    assert tuple(renderer.screen.get_at((250, 620)))[:3] == ROAD


def test_hud_text():
    assert score_line(12) == "Score: 12"
    assert game_over_lines(3) == ["GAME OVER", "Score: 3", "Press ENTER to retry"]


def test_hud_draws_lines(display):
    display.fill((0, 0, 0))
    HUD().draw(display, ["Score: 1"], (5, 5))
    region = display.subsurface(pygame.Rect(0, 0, 200, 40))
    colors = {tuple(region.get_at((x, y)))[:3] for x in range(200) for y in range(40)}
    assert len(colors) > 1
