"""Game engine: configuration, window, scenes, input and the main loop."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

import pygame

from .assets import Assets
from .scene import Scene
from .scene_menu import SceneMenu

DEFAULT_CONFIG = "config/config.txt"
TEXTURE_KINDS = ("Tile", "Player", "Enemy", "Bullet", "Background")


@dataclass
class EngineConfig:
    """Window settings plus the fonts and textures to load, by asset name."""

    width: int
    height: int
    framerate: int
    fullscreen: bool
    font_size: int = 0
    font_color: tuple[int, int, int] = (0, 0, 0)
    fonts: dict[str, str] = field(default_factory=dict)
    textures: dict[str, str] = field(default_factory=dict)


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("configuration ends unexpectedly") from None


def _integer(tokens: Iterator[str]) -> int:
    token = _next(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer in configuration, got {token!r}") from None


def read_config(text: str) -> EngineConfig:
    """Parse the engine configuration.

    It starts with ``Window <width> <height> <framerate> <fullscreen>``,
    then one word that may be ``Font <kind> <path> <size> <r> <g> <b>``,
    then any number of ``<Tile|Player|Enemy|Bullet|Background> <kind> <path>``
    texture lines. Other words are skipped.
    """
    tokens = iter(text.split())
    if _next(tokens) != "Window":
        raise ValueError("configuration must start with a Window line")
    config = EngineConfig(
        width=_integer(tokens),
        height=_integer(tokens),
        framerate=_integer(tokens),
        fullscreen=bool(_integer(tokens)),
    )

    if next(tokens, None) == "Font":
        kind = _next(tokens)
        config.fonts[f"Font_{kind}"] = _next(tokens)
        config.font_size = _integer(tokens)
        config.font_color = (_integer(tokens), _integer(tokens), _integer(tokens))

    for word in tokens:
        if word in TEXTURE_KINDS:
            kind = _next(tokens)
            config.textures[f"{word}_{kind}"] = _next(tokens)
    return config


class GameEngine:
    """Owns the window, the assets and the scenes, and runs the game loop."""

    def __init__(
        self,
        config_path: str,
        *,
        window: Optional[Any] = None,
        assets: Optional[Assets] = None,
    ) -> None:
        self.config = read_config(Path(config_path).read_text())
        if window is None:
            pygame.init()
            flags = pygame.FULLSCREEN if self.config.fullscreen else 0
            window = pygame.display.set_mode((self.config.width, self.config.height), flags)
            pygame.display.set_caption("Game")
        self.window = window
        self.assets = assets if assets is not None else Assets()
        for name, path in self.config.fonts.items():
            self.assets.add_font(name, path)
        for name, path in self.config.textures.items():
            self.assets.add_texture(name, path)
        self.running = True
        self._scenes: dict[str, Scene] = {}
        self._current = ""
        self._clock = pygame.time.Clock()

    @property
    def window_size(self) -> tuple[int, int]:
        return tuple(self.window.get_size())

    @property
    def is_running(self) -> bool:
        return self.running

    def current_scene(self) -> Optional[Scene]:
        return self._scenes.get(self._current)

    def change_scene(self, name: str, scene: Scene, end_current: bool = False) -> None:
        """Make ``scene`` current under ``name``, optionally dropping the old one."""
        if end_current:
            self._scenes.pop(self._current, None)
        self._current = name
        self._scenes[name] = scene

    def quit(self) -> None:
        self.running = False

    def update(self) -> None:
        scene = self.current_scene()
        if scene is not None:
            scene.update()

    def user_input(self) -> None:
        """Pass pending window events to the current scene as actions."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            scene = self.current_scene()
            if scene is None:
                continue
            if event.type == pygame.KEYDOWN:
                scene.key_action(event.key, "START")
            elif event.type == pygame.KEYUP:
                scene.key_action(event.key, "END")
            elif event.type == pygame.MOUSEBUTTONDOWN:
                scene.mouse_action(event.button, "START")
            elif event.type == pygame.MOUSEBUTTONUP:
                scene.mouse_action(event.button, "END")

    def run(self) -> None:
        """Handle input, update and render until the game stops running."""
        while self.running:
            self.user_input()
            self.update()
            scene = self.current_scene()
            if scene is None:
                raise RuntimeError("there is no current scene to render")
            scene.render()
            self._clock.tick(self.config.framerate)
        self.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play the grid platformer.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG, help="engine configuration file")
    args = parser.parse_args(argv)
    game = GameEngine(args.config)
    try:
        game.change_scene("MENU", SceneMenu(game), False)
        game.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())