import pytest

from silkengine.actor import Actor
from silkengine.gameplay import (
    create_object,
    create_object_with_transform,
    find_object_of_class,
    find_objects_of_class,
)
from silkengine.transform import Transform
from silkengine.vector import Vector2
from silkengine.world import World


class Marker(Actor):
    def __init__(self, world=None):
        super().__init__(world)
        self.started = False

    def begin_play(self):
        super().begin_play()
        self.started = True


class Other(Actor):
    pass


def test_create_object_places_and_queues():
    world = World()
    actor = create_object(world, Marker, Vector2(3.0, 4.0), 45.0, Vector2(2.0, 2.0))
    assert actor in world.actors_to_add
    assert actor.world is world
    assert actor.local_position == Vector2(3.0, 4.0)
    assert actor.local_rotation == 45.0
    assert actor.local_scale == Vector2(2.0, 2.0)


def test_created_object_joins_on_update():
    world = World()
    actor = create_object(world, Marker)
    world.update(0.0)
    assert actor in world.actors
    assert actor.started is True


def test_create_object_rejects_non_actor():
    with pytest.raises(TypeError):
        create_object(World(), int)


def test_create_with_transform_copies():
    world = World()
    transform = Transform()
    transform.position = Vector2(7.0, 8.0)
    actor = create_object_with_transform(world, Marker, transform)
    transform.position = Vector2(0.0, 0.0)
    assert actor.local_position == Vector2(7.0, 8.0)


def test_find_objects_of_class_covers_both_groups():
    world = World()
    first = Marker(world)
    second = Marker(world)
    other = Other(world)
    world.actors.update({first, other})
    world.overall_actors.add(second)
    found = find_objects_of_class(world, Marker)
    assert set(found) == {first, second}
    assert find_object_of_class(world, Other) is other


def test_find_object_of_class_none_when_absent():
    world = World()
    world.actors.add(Other(world))
    assert find_object_of_class(world, Marker) is None