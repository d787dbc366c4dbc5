import pytest

from gridrunner.components import CBoundingBox, CGravity, CState, CTransform
from gridrunner.entity import Entity, MissingComponentError
from gridrunner.vec2 import Vec2


@pytest.fixture
def entity():
    return Entity(7, "Player")


def test_id_and_tag(entity):
    assert entity.id == 7
    assert entity.tag == "Player"


def test_new_entity_is_active_until_destroyed(entity):
    assert entity.active
    entity.destroy()
    assert not entity.active


def test_add_returns_component_and_get_finds_it(entity):
    gravity = entity.add_component(CGravity(2.0))
    assert entity.has_component(CGravity)
    assert entity.get_component(CGravity) is gravity


def test_missing_component(entity):
    assert not entity.has_component(CState)
    with pytest.raises(MissingComponentError):
        entity.get_component(CState)


def test_add_replaces_existing(entity):
    entity.add_component(CBoundingBox(Vec2(1.0, 1.0)))
    replacement = entity.add_component(CBoundingBox(Vec2(2.0, 2.0)))
    assert entity.get_component(CBoundingBox) is replacement


def test_remove_component(entity):
    entity.add_component(CTransform())
    entity.remove_component(CTransform)
    assert not entity.has_component(CTransform)
    entity.remove_component(CTransform)
    assert not entity.has_component(CTransform)


def test_components_are_mutable_through_get(entity):
    entity.add_component(CState())
    entity.get_component(CState).on_ground = True
    assert entity.get_component(CState).on_ground


def test_unknown_component_type_rejected(entity):
    with pytest.raises(TypeError):
        entity.add_component(Vec2())
    with pytest.raises(TypeError):
        entity.has_component(int)
    with pytest.raises(TypeError):
        entity.get_component(str)