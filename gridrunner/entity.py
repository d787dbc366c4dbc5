"""Game entity holding at most one component of each known kind."""

from __future__ import annotations

from typing import TypeVar

from .components import (
    CAnimation,
    CBoundingBox,
    CFriction,
    CGravity,
    CInput,
    CJumpTimer,
    CLifespan,
    CState,
    CTransform,
)

COMPONENT_TYPES = (
    CTransform,
    CLifespan,
    CInput,
    CBoundingBox,
    CAnimation,
    CGravity,
    CState,
    CJumpTimer,
    CFriction,
)

T = TypeVar("T")


class MissingComponentError(LookupError):
    """Raised when asking an entity for a component it does not have."""


def _check_type(component_type: type) -> None:
    if component_type not in COMPONENT_TYPES:
        raise TypeError(f"{component_type!r} is not a component type")


class Entity:
    """A tagged entity with an id and a set of optional components."""

    __slots__ = ("_id", "_tag", "_active", "_components")

    def __init__(self, entity_id: int, tag: str = "default") -> None:
        self._id = entity_id
        self._tag = tag
        self._active = True
        self._components: dict[type, object] = {}

    def __repr__(self) -> str:
        return f"Entity(id={self._id}, tag={self._tag!r}, active={self._active})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def active(self) -> bool:
        return self._active

    def destroy(self) -> None:
        """Mark the entity for removal at the next manager update."""
        self._active = False

    def has_component(self, component_type: type) -> bool:
        _check_type(component_type)
        return component_type in self._components

    def add_component(self, component: T) -> T:
        """Attach ``component``, replacing any of the same type, and return it."""
        _check_type(type(component))
        self._components[type(component)] = component
        return component

    def get_component(self, component_type: type[T]) -> T:
        _check_type(component_type)
        try:
            return self._components[component_type]  # type: ignore[return-value]
        except KeyError:
            raise MissingComponentError(
                f"entity {self._id} ({self._tag}) has no {component_type.__name__}"
            ) from None

    def remove_component(self, component_type: type) -> None:
        _check_type(component_type)
        self._components.pop(component_type, None)