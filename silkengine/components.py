"""Components that attach behaviour and scene placement to actors."""

from __future__ import annotations

from .delegate import MulticastDelegate
from .objects import GameObject
from .transform import Transform
from .vector import rotate_vector


class ActorComponent(GameObject):
    """Base of all components: an owning actor and an enabled flag."""

    def __init__(self):
        super().__init__()
        self.owner = None
        self.enabled = True
        self.on_activated = MulticastDelegate()
        self.on_deactivated = MulticastDelegate()

    @property
    def world(self):
        """World of the owning actor, or None when there is no owner."""
        return None if self.owner is None else self.owner.world

    def destruct(self):
        """Unregister from the owner and end play."""
        if self.owner is not None:
            self.owner.unregister_component(self)
        self.end_play()

    def activate(self):
        """Broadcast activation and enable the component."""
        self.on_activated.broadcast()
        self.enabled = True

    def deactivate(self):
        """Broadcast deactivation and disable the component."""
        self.on_deactivated.broadcast()
        self.enabled = False

    def register_dont_destroy(self):
        """Register the component to survive a level change; nothing by default."""


class SceneComponent(ActorComponent):
    """A component with a transform relative to a parent component."""

    def __init__(self):
        super().__init__()
        self.local_transform = Transform()
        self.children = set()
        self.parent = None

    @property
    def local_position(self):
        return self.local_transform.position

    @local_position.setter
    def local_position(self, value):
        self.local_transform.position = value

    @property
    def local_rotation(self):
        return self.local_transform.rotation

    @local_rotation.setter
    def local_rotation(self, value):
        self.local_transform.rotation = value

    @property
    def local_scale(self):
        return self.local_transform.scale

    @local_scale.setter
    def local_scale(self, value):
        self.local_transform.scale = value

    def attach_to(self, parent):
        """Attach under a parent component and take its owner."""
        if parent is None:
            return
        parent.children.add(self)
        self.parent = parent
        self.owner = parent.owner

    def detach_from(self, parent):
        """Detach from a parent component."""
        if parent is None:
            return
        parent.children.discard(self)
        self.parent = None

    def _destruct_tree(self):
        for child in list(self.children):
            child._destruct_tree()
        ActorComponent.destruct(self)

    def destruct(self):
        """Destroy this component and all components attached below it."""
        if self.parent is not None:
            self.parent.children.discard(self)
        self._destruct_tree()

    def world_position(self):
        """Position in world coordinates."""
        if self.parent is not None:
            parent = self.parent
            return parent.world_position() + rotate_vector(
                parent.world_rotation(), self.local_position * parent.world_scale()
            )
        if self.owner is not None:
            return self.owner.world_position()
        return self.local_position

    def world_rotation(self):
        """Rotation in world coordinates, in degrees."""
        if self.parent is not None:
            return self.parent.world_rotation() + self.local_rotation
        if self.owner is not None:
            return self.owner.world_rotation()
        return self.local_rotation

    def world_scale(self):
        """Scale in world coordinates."""
        if self.parent is not None:
            return self.parent.world_scale() * self.local_scale
        if self.owner is not None:
            return self.owner.world_scale()
        return self.local_scale

    def add_position(self, offset):
        """Move the local position by an offset."""
        self.local_transform.position = self.local_transform.position + offset

    def add_rotation(self, rotation):
        """Turn the local rotation by some degrees."""
        self.local_transform.rotation += rotation