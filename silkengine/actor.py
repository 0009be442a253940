"""Actors: scene objects composed of components."""

from __future__ import annotations

from .components import SceneComponent
from .objects import GameObject
from .vector import rotate_vector


class Actor(GameObject):
    """A scene object with a root component and a tree of child actors."""

    def __init__(self, world=None):
        super().__init__()
        self.world = world
        self.children = set()
        self.parent = None
        self._components = {}
        self.destroy_requested = False
        self.root = SceneComponent()
        self.root.owner = self
        self.register_component(self.root)

    @property
    def components(self):
        """Registered components in registration order."""
        return list(self._components)

    def update(self, delta_time):
        """Update every component still registered when its turn comes."""
        for component in list(self._components):
            if component in self._components:
                component.update(delta_time)

    def begin_play(self):
        """Start play for every component."""
        for component in list(self._components):
            component.begin_play()

    def end_play(self):
        """End play for every component."""
        for component in list(self._components):
            component.end_play()

    def set_root_component(self, new_root):
        """Replace the root component that carries the actor's transform."""
        self.root = new_root

    def attach_to(self, parent):
        """Attach under a parent actor."""
        if parent is None:
            return
        parent.children.add(self)
        self.parent = parent

    def detach_from(self, parent):
        """Detach from a parent actor."""
        if parent is None:
            return
        parent.children.discard(self)
        self.parent = None

    def register_component(self, component):
        """Add a component to this actor."""
        self._components[component] = None

    def unregister_component(self, component):
        """Remove a component from this actor, if present."""
        self._components.pop(component, None)

    def destroy(self):
        """Queue this actor and all its descendants for deletion by the world."""
        if self.destroy_requested:
            return
        if self.world is None:
            raise RuntimeError(f"{self.name} is not in a world")
        if self.parent is not None:
            self.parent.children.discard(self)
        pending = [self]
        while pending:
            current = pending.pop()
            pending.extend(current.children)
            self.world.actors_to_delete.add(current)
        self.destroy_requested = True

    @property
    def local_position(self):
        return self.root.local_position

    @local_position.setter
    def local_position(self, value):
        self.root.local_position = value

    @property
    def local_rotation(self):
        return self.root.local_rotation

    @local_rotation.setter
    def local_rotation(self, value):
        self.root.local_rotation = value

    @property
    def local_scale(self):
        return self.root.local_scale

    @local_scale.setter
    def local_scale(self, value):
        self.root.local_scale = value

    @property
    def local_transform(self):
        return self.root.local_transform

    @local_transform.setter
    def local_transform(self, value):
        self.root.local_transform = value

    def world_position(self):
        """Position in world coordinates."""
        if self.parent is not None:
            parent = self.parent
            return parent.world_position() + rotate_vector(
                parent.world_rotation(), self.local_position * parent.world_scale()
            )
        return self.local_position

    def world_rotation(self):
        """Rotation in world coordinates, in degrees."""
        if self.parent is not None:
            return self.parent.world_rotation() + self.local_rotation
        return self.local_rotation

    def world_scale(self):
        """Scale in world coordinates."""
        if self.parent is not None:
            return self.parent.world_scale() * self.local_scale
        return self.local_scale

    def set_position_and_rotation(self, position, angle):
        """Set the local position and rotation together."""
        self.root.local_position = position
        self.root.local_rotation = angle

    def add_position(self, offset):
        """Move the actor by an offset."""
        self.root.add_position(offset)

    def add_rotation(self, rotation):
        """Turn the actor by some degrees."""
        self.root.add_rotation(rotation)

    def construct_component(self, cls):
        """Create a component of the given class, owned and registered here."""
        component = cls()
        component.owner = self
        self.register_component(component)
        return component

    def get_component_by_class(self, cls):
        """First component that is an instance of cls, or None."""
        return next((c for c in self._components if isinstance(c, cls)), None)

    def get_components_by_class(self, cls):
        """All components that are instances of cls."""
        return [c for c in self._components if isinstance(c, cls)]

    def get_component_by_name(self, name):
        """Component with the given tag name, or None."""
        return next((c for c in self._components if c.name == name), None)

    def register_dont_destroy(self):
        """Register every component to survive a level change."""
        for component in list(self._components):
            component.register_dont_destroy()