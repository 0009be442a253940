import pytest

from silkengine.components import ActorComponent, SceneComponent
from silkengine.vector import Vector2


class _Owner:
    def __init__(self, position=Vector2(0, 0), rotation=0.0, scale=Vector2(1, 1)):
        self.world = "world"
        self.position = position
        self.rotation = rotation
        self.scale = scale
        self.unregistered = []

    def world_position(self):
        return self.position

    def world_rotation(self):
        return self.rotation

    def world_scale(self):
        return self.scale

    def unregister_component(self, component):
        self.unregistered.append(component)


class _Recording(SceneComponent):
    def __init__(self):
        super().__init__()
        self.ended = 0

    def end_play(self):
        self.ended += 1


def test_activate_and_deactivate_broadcast_and_toggle():
    component = ActorComponent()
    calls = []
    component.on_activated.add(lambda: calls.append("on"))
    component.on_deactivated.add(lambda: calls.append("off"))
    component.deactivate()
    assert component.enabled is False
    component.activate()
    assert component.enabled is True
    assert calls == ["off", "on"]


def test_world_follows_owner():
    component = ActorComponent()
    assert component.world is None
    component.owner = _Owner()
    assert component.world == "world"


def test_destruct_unregisters_from_owner():
    owner = _Owner()
    component = ActorComponent()
    component.owner = owner
    component.destruct()
    assert owner.unregistered == [component]


def test_attach_takes_parent_owner():
    owner = _Owner()
    parent = SceneComponent()
    parent.owner = owner
    child = SceneComponent()
    child.attach_to(parent)
    assert child.parent is parent
    assert child in parent.children
    assert child.owner is owner


def test_detach_removes_link():
    parent = SceneComponent()
    child = SceneComponent()
    child.attach_to(parent)
    child.detach_from(parent)
    assert child.parent is None
    assert child not in parent.children


def test_attach_to_none_is_ignored():
    child = SceneComponent()
    child.attach_to(None)
    assert child.parent is None


def test_world_transform_without_parent_or_owner_is_local():
    component = SceneComponent()
    component.local_position = Vector2(3, 4)
    component.local_rotation = 15.0
    component.local_scale = Vector2(2, 2)
    assert component.world_position() == Vector2(3, 4)
    assert component.world_rotation() == 15.0
    assert component.world_scale() == Vector2(2, 2)


def test_root_without_parent_uses_owner_transform():
    owner = _Owner(Vector2(7, 8), 30.0, Vector2(2, 3))
    component = SceneComponent()
    component.owner = owner
    component.local_position = Vector2(100, 100)
    assert component.world_position() == Vector2(7, 8)
    assert component.world_rotation() == 30.0
    assert component.world_scale() == Vector2(2, 3)


def test_child_position_is_rotated_and_scaled_by_parent():
    parent = SceneComponent()
    parent.local_position = Vector2(10, 0)
    parent.local_rotation = 90.0
    child = SceneComponent()
    child.attach_to(parent)
    child.local_position = Vector2(1, 0)
    child.local_rotation = 10.0
    position = child.world_position()
    assert position.x == pytest.approx(10.0, abs=1e-5)
    assert position.y == pytest.approx(1.0, abs=1e-5)
    assert child.world_rotation() == pytest.approx(100.0)


def test_child_scale_multiplies_parent_scale():
    parent = SceneComponent()
    parent.local_scale = Vector2(2, 3)
    child = SceneComponent()
    child.attach_to(parent)
    child.local_scale = Vector2(4, 5)
    assert child.world_scale() == Vector2(8, 15)
    child.local_position = Vector2(1, 1)
    assert child.world_position() == Vector2(2, 3)


def test_add_position_and_rotation():
    component = SceneComponent()
    component.add_position(Vector2(1, 2))
    component.add_position(Vector2(1, 2))
    component.add_rotation(5.0)
    assert component.local_position == Vector2(2, 4)
    assert component.local_rotation == 5.0


def test_destruct_tree_unregisters_every_descendant():
    owner = _Owner()
    root = SceneComponent()
    root.owner = owner
    middle = _Recording()
    middle.attach_to(root)
    leaf = _Recording()
    leaf.attach_to(middle)
    assert middle in root.children
    middle.destruct()
    assert middle not in root.children
    assert set(owner.unregistered) == {middle, leaf}
    assert root not in owner.unregistered
    assert middle.ended == 1 and leaf.ended == 1