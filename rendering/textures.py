"""Texture loading for the road and car sprites."""

from dataclasses import dataclass

import pygame


class AssetLoadError(Exception):
    """Raised when a required image cannot be loaded."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to load texture: {path}")
        self.path = path


@dataclass
class Texture:
    surface: pygame.Surface
    aspect: float  # width / height of the source image


def load_texture(path: str, alpha: bool = True) -> Texture:
    """
    Decode an image file into a Texture.

    Args:
        path: Image file path
        alpha: Keep per-pixel transparency (sprites) or draw opaque (background)

    Raises:
        AssetLoadError: If the file is missing or cannot be decoded
    """
    try:
        image = pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as e:
        raise AssetLoadError(path) from e

    # Converting needs a display mode; headless callers get the raw surface
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha() if alpha else image.convert()

    width, height = image.get_size()
    if height == 0:
        raise AssetLoadError(path)
    return Texture(image, width / height)


def load_textures(paths: dict[str, str], opaque: set[str] | None = None) -> dict[str, Texture]:
    """Load every named texture, stopping at the first one that fails."""
    opaque = opaque or set()
    return {name: load_texture(path, alpha=name not in opaque) for name, path in paths.items()}
