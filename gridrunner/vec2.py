"""Two-dimensional vector with component-wise arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2) -> Vec2:
        return Vec2(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: Vec2) -> Vec2:
        return Vec2(self.x / other.x, self.y / other.y)

    def __iadd__(self, other: Vec2) -> Vec2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other: Vec2) -> Vec2:
        self.x *= other.x
        self.y *= other.y
        return self

    def __itruediv__(self, other: Vec2) -> Vec2:
        """Divide in place; a zero component in ``other`` leaves the vector unchanged."""
        if other.x != 0 and other.y != 0:
            self.x /= other.x
            self.y /= other.y
        return self

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector stays zero."""
        length = self.length()
        if length != 0.0:
            self.x /= length
            self.y /= length

    def length(self) -> float:
        return math.hypot(self.x, self.y)