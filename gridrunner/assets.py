"""Named store of textures, animations, sounds and fonts."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

from .animation import Animation

Loader = Callable[[str], Any]


def load_texture(path: str) -> Any:
    """Load an image file as a pygame surface."""
    import pygame

    return pygame.image.load(path)


def load_sound(path: str) -> Any:
    """Load a sound file, starting the mixer if needed."""
    import pygame

    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


def load_font(path: str) -> Path:
    """Check that a font file exists and return its path.

    pygame fonts are created at a fixed size, so the path is kept and a
    font of the wanted size is made when text is drawn.
    """
    font_path = Path(path)
    if not font_path.is_file():
        raise FileNotFoundError(f"font file not found: {path}")
    return font_path


class Assets:
    """Maps names to loaded resources; unknown names raise KeyError."""

    def __init__(
        self,
        texture_loader: Optional[Loader] = None,
        sound_loader: Optional[Loader] = None,
        font_loader: Optional[Loader] = None,
    ) -> None:
        self._load_texture = texture_loader or load_texture
        self._load_sound = sound_loader or load_sound
        self._load_font = font_loader or load_font
        self._textures: dict[str, Any] = {}
        self._animations: dict[str, Animation] = {}
        self._sounds: dict[str, Any] = {}
        self._fonts: dict[str, Any] = {}

    def add_texture(self, name: str, path: str) -> None:
        self._textures[name] = self._load_texture(path)

    def add_animation(self, name: str, animation: Animation) -> None:
        self._animations[name] = animation

    def add_sound(self, name: str, path: str) -> None:
        self._sounds[name] = self._load_sound(path)

    def add_font(self, name: str, path: str) -> None:
        self._fonts[name] = self._load_font(path)

    def get_texture(self, name: str) -> Any:
        return self._textures[name]

    def get_animation(self, name: str) -> Animation:
        return self._animations[name]

    def get_sound(self, name: str) -> Any:
        return self._sounds[name]

    def get_font(self, name: str) -> Any:
        return self._fonts[name]