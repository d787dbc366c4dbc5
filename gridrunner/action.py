"""Named input actions such as "JUMP" with a phase of "START" or "END"."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Action:
    """An action name together with its type, usually "START" or "END"."""

    name: str = "NONE"
    type: str = "NONE"

    def __str__(self) -> str:
        return f"Action [Name: {self.name}, Type: {self.type}]"