"""Rendering module."""

from .hud import HUD, game_over_lines, score_line
from .renderer import Renderer
from .textures import AssetLoadError, Texture, load_texture, load_textures

__all__ = [
    "AssetLoadError",
    "HUD",
    "Renderer",
    "Texture",
    "game_over_lines",
    "load_texture",
    "load_textures",
    "score_line",
]
