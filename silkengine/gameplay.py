"""Helpers for creating and finding actors in a world."""

from __future__ import annotations

from .actor import Actor
from .vector import UNIT_VECTOR, ZERO_VECTOR


def _spawn(world, cls):
    if not (isinstance(cls, type) and issubclass(cls, Actor)):
        raise TypeError(f"{cls!r} is not an Actor class")
    actor = cls(world=world)
    actor.init_name(cls.__name__)
    world.actors_to_add.append(actor)
    return actor


def create_object(world, cls, position=ZERO_VECTOR, angle=0.0, scale=UNIT_VECTOR):
    """Create an actor of cls, queued to join the world on its next update."""
    actor = _spawn(world, cls)
    actor.local_position = position
    actor.local_rotation = angle
    actor.local_scale = scale
    return actor


def create_object_with_transform(world, cls, transform):
    """Create an actor of cls placed with a copy of the given transform."""
    actor = _spawn(world, cls)
    actor.local_transform = transform.copy()
    return actor


def find_objects_of_class(world, cls):
    """Every actor of cls in the world, level actors first."""
    return [
        actor
        for group in (world.actors, world.overall_actors)
        for actor in group
        if isinstance(actor, cls)
    ]


def find_object_of_class(world, cls):
    """One actor of cls in the world, or None."""
    return next(iter(find_objects_of_class(world, cls)), None)