"""Shared fixtures; pygame runs headless under the dummy SDL drivers."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from game import GameState


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def game_state(rng: random.Random) -> GameState:
    return GameState(rng)


@pytest.fixture
def display():
    """Initialise pygame with a window the size of the real game."""
    pygame.init()
    screen = pygame.display.set_mode((500, 700))
    yield screen
    pygame.quit()
