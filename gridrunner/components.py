"""Components that an entity may carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .animation import Animation
from .vec2 import Vec2


@dataclass
class CTransform:
    """Position, previous position, velocity, scale and angle."""

    pos: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    angle: float = 0.0
    prev_pos: Vec2 = field(default_factory=Vec2)


@dataclass
class CBoundingBox:
    """Axis-aligned box size used for collisions."""

    size: Vec2 = field(default_factory=Vec2)


@dataclass
class CLifespan:
    """Total lifetime in frames and how much of it remains."""

    total: int = 0
    remaining: Optional[int] = None

    def __post_init__(self) -> None:
        if self.remaining is None:
            self.remaining = self.total


@dataclass
class CInput:
    """Player intent derived from user input."""

    jump: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False


@dataclass
class CAnimation:
    """The animation an entity is drawn with."""

    animation: Animation = field(default_factory=Animation)


@dataclass
class CGravity:
    """Downward acceleration added each frame."""

    gravity: float = 5.0


@dataclass
class CFriction:
    """Factor applied to horizontal velocity on the ground."""

    friction: float = 0.6


@dataclass
class CState:
    """Flags driving animation, collision and movement."""

    on_ground: bool = False
    is_jumping: bool = False
    is_idle: bool = True
    is_running: bool = False
    is_firing: bool = False
    facing_right: bool = True


@dataclass
class CJumpTimer:
    """Keeps upward velocity applied for a number of frames."""

    duration: int = 10
    speed_multiplier: float = 1.5
    current_frame: int = 0
    is_jumping: bool = False