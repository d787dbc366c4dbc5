"""Base scene: entity store, input-to-action maps and per-scene hooks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Hashable

from .action import Action
from .entity_manager import EntityManager

_CLEAR_COLOUR = (0, 0, 0)


class Scene(ABC):
    """A game scene driven by the engine.

    Keys and mouse buttons are mapped to action names; an event on an
    unmapped input yields an action with an empty name.
    """

    def __init__(self, game: Any) -> None:
        self.game = game
        self.entities = EntityManager()
        self.current_frame = 0
        self.paused = False
        self.has_ended = False
        self._key_actions: dict[Hashable, str] = {}
        self._mouse_actions: dict[Hashable, str] = {}

    def update(self) -> None:
        """Apply pending entity additions and removals."""
        self.entities.update()

    def render(self) -> None:
        """Clear the game's window, if it has one; scenes draw on top of this."""
        window = getattr(self.game, "window", None)
        if window is not None:
            window.fill(_CLEAR_COLOUR)

    @abstractmethod
    def simulate(self) -> None:
        """Advance scene-specific state."""

    @abstractmethod
    def do_action(self, action: Action) -> None:
        """React to an action."""

    def register_key_action(self, key: Hashable, name: str) -> None:
        self._key_actions[key] = name

    def register_mouse_action(self, button: Hashable, name: str) -> None:
        self._mouse_actions[button] = name

    def key_action(self, key: Hashable, action_type: str) -> None:
        """Turn a key event into an action and dispatch it."""
        self.do_action(Action(self._key_actions.get(key, ""), action_type))

    def mouse_action(self, button: Hashable, action_type: str) -> None:
        """Turn a mouse button event into an action and dispatch it."""
        self.do_action(Action(self._mouse_actions.get(button, ""), action_type))