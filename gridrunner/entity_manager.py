"""Creation, lookup and removal of entities."""

from __future__ import annotations

from typing import Iterable, Optional

from .entity import Entity


def _alive(entities: Iterable[Entity]) -> list[Entity]:
    return [entity for entity in entities if entity.active]


class EntityManager:
    """Owns all entities; new ones become visible at the next update."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._pending: list[Entity] = []
        self._by_tag: dict[str, list[Entity]] = {}
        self._total = 0

    def update(self) -> None:
        """Add pending entities, then drop every destroyed one."""
        for entity in self._pending:
            self._entities.append(entity)
            self._by_tag.setdefault(entity.tag, []).append(entity)
        self._pending.clear()
        self._entities = _alive(self._entities)
        self._by_tag = {tag: _alive(group) for tag, group in self._by_tag.items()}

    def add_entity(self, tag: str) -> Entity:
        """Create an entity with the next id; it is added at the next update."""
        entity = Entity(self._total, tag)
        self._total += 1
        self._pending.append(entity)
        return entity

    def entities(self, tag: Optional[str] = None) -> list[Entity]:
        """All live entities, or only those with ``tag``, in creation order."""
        if tag is None:
            return list(self._entities)
        return list(self._by_tag.get(tag, ()))