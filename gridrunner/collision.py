"""Axis-aligned bounding box overlap and collision response."""

from __future__ import annotations

from itertools import product
from typing import Iterable

from .components import CBoundingBox, CState, CTransform
from .entity import Entity
from .vec2 import Vec2


def overlap(pos1: Vec2, size1: Vec2, pos2: Vec2, size2: Vec2) -> Vec2:
    """Overlap of two centred boxes on each axis; positive means overlapping."""
    dx = abs(pos1.x - pos2.x)
    dy = abs(pos1.y - pos2.y)
    return Vec2(
        size1.x / 2.0 + size2.x / 2.0 - dx,
        size1.y / 2.0 + size2.y / 2.0 - dy,
    )


def _push_out_of_tile(mover: Entity, tile: Entity, current: Vec2, previous: Vec2) -> None:
    moving = mover.get_component(CTransform)
    fixed = tile.get_component(CTransform)
    if mover.tag == "Bullet":
        mover.destroy()
    if previous.x > 0:
        # Overlapped horizontally last frame: came from above or below.
        if moving.prev_pos.y < fixed.prev_pos.y:
            moving.pos.y -= current.y + 1
            mover.get_component(CState).on_ground = True
        else:
            moving.pos.y += current.y + 1
    elif previous.y > 0:
        # Overlapped vertically last frame: came from a side.
        from_right = moving.prev_pos.x > fixed.prev_pos.x
        if from_right:
            moving.pos.x += current.x + 1
        else:
            moving.pos.x -= current.x + 1
        if mover.tag == "Enemy":
            moving.velocity.x *= -1
            mover.get_component(CState).facing_right = from_right


def resolve_collision(e1: Entity, e2: Entity, current: Vec2, previous: Vec2) -> None:
    """Respond to two overlapping entities.

    Non-tiles are pushed out of tiles (bullets are destroyed), a player
    touching an enemy is destroyed, and a bullet and an enemy destroy
    each other.
    """
    tags = {e1.tag, e2.tag}
    if (e1.tag == "Tile") != (e2.tag == "Tile"):
        if e2.tag != "Tile":
            _push_out_of_tile(e2, e1, current, previous)
        else:
            _push_out_of_tile(e1, e2, current, previous)

    if tags == {"Player", "Enemy"}:
        (e1 if e1.tag == "Player" else e2).destroy()

    if tags == {"Bullet", "Enemy"}:
        e1.destroy()
        e2.destroy()


def collide_all(entities: Iterable[Entity]) -> None:
    """Check every ordered pair of distinct entities and resolve overlaps."""
    boxed = [
        entity
        for entity in entities
        if entity.has_component(CBoundingBox) and entity.has_component(CTransform)
    ]
    for e1, e2 in product(boxed, repeat=2):
        if e1 is e2:
            continue
        size1 = e1.get_component(CBoundingBox).size
        size2 = e2.get_component(CBoundingBox).size
        t1 = e1.get_component(CTransform)
        t2 = e2.get_component(CTransform)
        current = overlap(t1.pos, size1, t2.pos, size2)
        if current.x > 0 and current.y > 0:
            previous = overlap(t1.prev_pos, size1, t2.prev_pos, size2)
            resolve_collision(e1, e2, current, previous)