"""Level selection menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import pygame

from .action import Action
from .scene import Scene
from .scene_play import ScenePlay

WHITE = (255, 255, 255)
BLUE = (0, 0, 255)
TEXT_SIZE = 50
LEVEL_PATHS = ("config/levelPath.txt", "config/levelPath2.txt")

Color = tuple[int, int, int]


@dataclass
class MenuText:
    """One line of menu text with where and in which colour it is drawn."""

    text: str
    position: tuple[float, float]
    color: Color = WHITE


def level_label(index: int) -> str:
    """Name of the level at ``index``, also used as its scene name."""
    return f"LEVEL {index}"


class SceneMenu(Scene):
    """Lists the levels; W and S move the selection, Enter starts a level.

    ``game`` provides ``assets`` (with a font named "Font_Arial"),
    ``window_size``, ``window`` and ``change_scene``.
    """

    def __init__(self, game: Any, level_paths: Sequence[str] = LEVEL_PATHS) -> None:
        super().__init__(game)
        if not level_paths:
            raise ValueError("the menu needs at least one level")
        self.level_paths = tuple(level_paths)
        self.max_level = len(self.level_paths)
        self.level_select = 0
        self.load_level = False
        self._font_source = game.assets.get_font("Font_Arial")
        self._font: Optional[Any] = None

        self.register_key_action(pygame.K_ESCAPE, "QUIT")
        self.register_key_action(pygame.K_w, "UP")
        self.register_key_action(pygame.K_s, "DOWN")
        self.register_key_action(pygame.K_RETURN, "SELECT")

        _, height = game.window_size
        self.texts: dict[str, MenuText] = {"menu": MenuText("MENU", (0.0, 0.0))}
        for index in range(self.max_level):
            label = level_label(index)
            y = (index + 1) * int(height) // (self.max_level + 1)
            self.texts[label] = MenuText(label, (0.0, float(y)))

    def update(self) -> None:
        """Refresh highlighting and start the selected level when asked."""
        self.simulate()
        if self.load_level:
            scene = ScenePlay(self.game, self.level_paths[self.level_select])
            self.game.change_scene(level_label(self.level_select), scene, False)
            self.load_level = False

    def simulate(self) -> None:
        """Highlight the selected level in blue and the others in white."""
        for index in range(self.max_level):
            color = BLUE if index == self.level_select else WHITE
            self.texts[level_label(index)].color = color

    def do_action(self, action: Action) -> None:
        if action.name == "QUIT":
            if action.type == "START":
                self.has_ended = True
            elif action.type == "END":
                self.has_ended = False
        elif action.name == "UP":
            if action.type == "START":
                self.level_select = (self.level_select - 1) % self.max_level
        elif action.name == "DOWN":
            if action.type == "START":
                self.level_select = (self.level_select + 1) % self.max_level
        elif action.name == "SELECT":
            if action.type == "START":
                self.load_level = True

    def _get_font(self) -> Any:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            source = None if self._font_source is None else str(self._font_source)
            self._font = pygame.font.Font(source, TEXT_SIZE)
        return self._font

    def render(self) -> None:
        """Draw the title and the level names."""
        window = self.game.window
        window.fill((0, 0, 0))
        font = self._get_font()
        for item in self.texts.values():
            window.blit(font.render(item.text, True, item.color), item.position)
        if pygame.display.get_init() and pygame.display.get_surface() is window:
            pygame.display.flip()