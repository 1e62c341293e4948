import pytest

from vermada.cjson import create_object
from vermada.defs import MAP_HEIGHT, MAP_WIDTH, Control, StageStatus
from vermada.model import Config, Entity, Stage


def test_contains_point_edges():
    entity = Entity(x=10, y=20, w=5, h=5)
    assert entity.contains_point(10, 20)
    assert entity.contains_point(14, 24)
    assert not entity.contains_point(15, 20)
    assert not entity.contains_point(9, 20)
    assert not entity.contains_point(10, 25)


def test_zero_sized_entity_contains_nothing():
    entity = Entity(x=3, y=3)
    assert not entity.contains_point(3, 3)


def test_stage_map_dimensions():
    stage = Stage()
    assert len(stage.map) == MAP_WIDTH
    assert all(len(column) == MAP_HEIGHT for column in stage.map)
    stage.map[0][0] = 7
    assert stage.map[1][0] == 0


def test_add_and_remove_entity_by_identity():
    stage = Stage()
    first = stage.add_entity(Entity(type_name="coin"))
    second = stage.add_entity(Entity(type_name="coin"))
    stage.remove_entity(second)
    assert stage.entities == [first]
    assert stage.entities[0] is first


def test_remove_missing_entity_raises():
    stage = Stage()
    with pytest.raises(ValueError):
        stage.remove_entity(Entity())


def test_entities_at_keeps_stage_order():
    stage = Stage()
    a = stage.add_entity(Entity(x=0, y=0, w=10, h=10))
    stage.add_entity(Entity(x=50, y=50, w=10, h=10))
    c = stage.add_entity(Entity(x=5, y=5, w=10, h=10))
    found = stage.entities_at(6, 6)
    assert len(found) == 2
    assert found[0] is a and found[1] is c


def test_base_save_writes_nothing():
    node = create_object()
    Entity().save(node)
    assert len(node) == 0


def test_defaults():
    stage = Stage()
    assert stage.status is StageStatus.INCOMPLETE
    config = Config()
    assert set(config.key_controls) == set(Control)
    assert all(value == 0 for value in config.joypad_controls.values())