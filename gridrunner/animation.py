"""Sprite-sheet animation that cycles horizontally through equal frames."""

from __future__ import annotations

from typing import Any, Optional

from .vec2 import Vec2


class Animation:
    """Cycles through ``frame_count`` frames laid side by side in ``texture``.

    The frame advances once every ``speed`` updates. The texture is any
    surface offering ``get_size()`` and ``subsurface(rect)``.
    """

    def __init__(
        self,
        name: str = "",
        texture: Optional[Any] = None,
        frame_count: int = 1,
        speed: int = 1,
    ) -> None:
        if frame_count < 1:
            raise ValueError("frame_count must be at least 1")
        if speed < 1:
            raise ValueError("speed must be at least 1")
        self.name = name
        self.texture = texture
        self.frame_count = frame_count
        self.speed = speed
        self.current_frame = 0
        if texture is None:
            self.size = Vec2()
        else:
            width, height = texture.get_size()
            self.size = Vec2(float(width), float(height))
        self.frame_size = Vec2(self.size.x / frame_count, self.size.y)

    @property
    def frame(self) -> int:
        """Index of the frame currently shown."""
        return (self.current_frame // self.speed) % self.frame_count

    @property
    def origin(self) -> Vec2:
        """Centre of one frame, used as the drawing origin."""
        return Vec2(self.frame_size.x / 2.0, self.frame_size.y / 2.0)

    @property
    def texture_rect(self) -> tuple[int, int, int, int]:
        """The (left, top, width, height) of the current frame in the texture."""
        return (
            int(self.frame * self.frame_size.x),
            0,
            int(self.frame_size.x),
            int(self.frame_size.y),
        )

    def update(self) -> None:
        """Advance the animation by one tick."""
        self.current_frame += 1

    def frame_image(self) -> Optional[Any]:
        """The current frame cut from the texture, or None without a texture."""
        if self.texture is None:
            return None
        return self.texture.subsurface(self.texture_rect)