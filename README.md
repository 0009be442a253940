# silkengine

A compact 2D game engine core written in plain Python. It supplies the game
logic that a side-scrolling game is built from:

- vector and box math
- actors and their components
- a world that steps everything once per frame
- circle and box collision detection
- rigid-body motion
- an animation state machine
- a smoothing camera
- named input actions
- a player controller and a walking character
- levels

It has no third-party dependencies.

## Installation

```
pip install silkengine
```

It needs Python 3.10 or newer.

## Modules

| Module | Contents |
| --- | --- |
| `silkengine.fmath` | `clamp`, `mid`, `lerp`, `smooth_step`, `inv_sqrt`, `fmod`, `normalize_degree`, `atan2`, random helpers, angle conversion |
| `silkengine.vector` | The immutable `Vector2`, plus `dot_product`, `cross_product`, `distance`, `rotate_vector`, `rotate_around`, `project_vector`, `vector_to_degree`, `degree_to_vector` |
| `silkengine.box` | The axis-aligned `Box2`, plus `box_from_center` |
| `silkengine.transform` | `Transform`, which holds position, rotation and scale |
| `silkengine.shapes` | `Circle`, `Polygon` with convex intersection giving a `PolygonContact`, plus `is_convex`, `simplify_vertices`, `arithmetic_mean` |
| `silkengine.rays` | `Ray2` and `Segment2`, with distance, closest-point and intersection queries |
| `silkengine.delegate` | `UnicastDelegate` and `MulticastDelegate` |
| `silkengine.structs` | `PhysicsMaterial`, `combine_materials`, `CombinePattern`, `HitResult` |
| `silkengine.objects` | The base class `GameObject`, plus `cast` and `get_real_time` |
| `silkengine.components` | `ActorComponent` and `SceneComponent` |
| `silkengine.actor` | `Actor` |
| `silkengine.world` | `World` and `zone_index` |
| `silkengine.rigidbody` | `RigidBody` |
| `silkengine.collider` | `Collider`, `CircleCollider`, `BoxCollider`, `CollisionMode`, `ColliderShape` |
| `silkengine.animator` | `Animation`, `AnimEdge`, `Animator`, the condition classes, `compare` |
| `silkengine.camera` | `Camera` |
| `silkengine.inputs` | `InputComponent`, `KeyCode`, `InputType`, `KeyBinding` |
| `silkengine.gameplay` | `create_object`, `create_object_with_transform`, `find_objects_of_class`, `find_object_of_class` |
| `silkengine.controller` | `Controller` |
| `silkengine.character` | `Character` and `MovementState` |
| `silkengine.level` | `Level` |

## A short tour

### Math

```python
from silkengine.vector import Vector2, distance, rotate_vector
from silkengine.box import box_from_center
from silkengine import fmath

a = Vector2(3.0, 4.0)
print(a.size())                        # 5.0
print(distance(a, Vector2(0.0, 0.0)))  # 5.0
print(rotate_vector(90.0, Vector2(1.0, 0.0)))

box = box_from_center(Vector2(0.0, 0.0), 4.0, 2.0)
print(box.is_inside(Vector2(1.0, 0.5)))  # True
print(fmath.clamp(12, 0, 10))            # 10
```

Some `Box2` constructions collapse to the zero box:

- a `Box2` built with `min` not below `max` on either axis;
- the result of `overlaps` for two boxes that do not meet.

`box_from_center` builds the box without that check.

### Delegates

```python
from silkengine.delegate import MulticastDelegate

on_hit = MulticastDelegate()
on_hit.add(lambda damage: print("hit for", damage))
on_hit.broadcast(3)
```

A `MulticastDelegate` ignores a callback that is already present. A
`UnicastDelegate` holds a single callback: `bind` sets it and `execute` calls
it, returning its result, or `None` when nothing is bound.

### Worlds, actors and components

```python
from silkengine.world import World
from silkengine.actor import Actor
from silkengine.gameplay import create_object, find_object_of_class
from silkengine.vector import Vector2

world = World()
crate = create_object(world, Actor, Vector2(100.0, 50.0), 0.0, Vector2(1.0, 1.0))
world.update(1 / 60)
assert find_object_of_class(world, Actor) is crate
```

New actors are queued. They join the world, and get `begin_play`, on the next
`World.update`. `Actor.destroy` queues the actor and all its child actors for
removal at the end of that update.

`World.update(delta_time)` runs the following in order:

1. Four collision substeps.
2. Clean-up of contacts that have ended.
3. The controller's `peek_info`.
4. The current level and the actors.

Call `World.pause(delay)` to suspend the substeps and actor updates for that
many seconds.

You attach components with `Actor.construct_component(cls)`. You look them up
with `get_component_by_class` or `get_component_by_name`. A `SceneComponent`
works out its `world_position()`, `world_rotation()` and `world_scale()` from
its parent chain. When it has no parent, it uses its owning actor's values.

### Physics and collisions

`RigidBody` does the following:

- applies gravity;
- applies linear and angular drag;
- takes impulses through `add_impulse`;
- resolves contacts in `restrict_velocity`, against a static surface using
  friction and bounciness, and against another moveable body as an elastic
  exchange.

`CircleCollider` and `BoxCollider` detect contacts with each other in any
pairing. They raise these events:

- `on_component_begin_overlap`
- `on_component_overlap`
- `on_component_end_overlap`
- `on_component_hit`
- `on_component_stay`

When two colliders are both in `CollisionMode.COLLISION`, kinematic ones are
pushed apart.

`World.process_collisions` places colliders in a 10 × 6 grid of zones, which
`zone_index` maps from world coordinates. It then tests only the colliders
that share a zone. If you give `World.collision_manager` a callable, it is
asked `manager(type_a, type_b)` whether two collision types may interact.
When it is unset, every pair may interact.

### Animation

```python
from silkengine.animator import (
    Animator, Animation, AnimEdge, ParamType, IntegerCondition, TransitionComparison,
)

idle, run = Animation(interval=0.1), Animation(interval=0.1)
idle.set_frames(["idle0", "idle1"])
run.set_frames(["run0", "run1", "run2"])

to_run = AnimEdge(idle, run)
to_run.add_condition(IntegerCondition("speed", 0, TransitionComparison.GREATER))

animator = Animator()
animator.insert("idle", idle)
animator.insert("run", run)
animator.add_parameter("speed", ParamType.INTEGER)
animator.set_node("idle")

animator.set_integer("speed", 5)
animator.update(0.1)
assert animator.is_playing("run")
```

Frames may be any objects. When the shown frame changes, the animator
broadcasts `on_sprite_changed(sprite, offset)`.

- An edge in `ComparisonMode.AND` needs all of its conditions to hold.
- An edge in `ComparisonMode.OR` needs any one of them.
- Each trigger that is checked is used up.
- An edge with no conditions is taken as soon as the animation finishes a
  pass.
- `play_montage(name)` plays a node once. Afterwards it leaves through that
  node's edges, or, when the node has none, returns to the animation that was
  playing before.

### Camera, input, controllers and levels

`Camera.calculate()` moves a virtual position and zoom towards the camera's
own position and spring-arm length. It eases by the smoothness settings,
keeps the position inside an optional frame set with `set_rect_frame`, and
adds shake after `shake_camera`.

`InputComponent` maps `KeyCode`s to named actions through `set_mapping` and
`bind_action`. An action fires on one of these `InputType`s: `PRESSED`,
`RELEASED`, `HOLDING` or `DOUBLE_CLICK`. It reads the keys that are down from
its `pressed_keys` set, which the caller keeps up to date. It reads the mouse
from `mouse_tick(position)`.

A `Controller` is an actor that owns a camera and an input component.
Override `setup_input_component` to bind actions. `cursor_position()` turns
the mouse position into world coordinates, assuming a 1200 × 800 window.
`hit_result_under_cursor()` reports the top-layer collider under the cursor.

A `Character` adds a `BoxCollider` and a `RigidBody` to a controller.
`add_input_x` walks it, capped at `max_walking_speed`. It tracks
`MovementState.STANDING`, `RUNNING` or `FLYING`.

A `Level` created with a world does one of two things when it begins play:

- It reuses a persistent controller from `World.overall_actors`.
- Otherwise it creates the class given to `set_default_controller`.

If it has neither, it raises `RuntimeError`.

## What it does not do

This package is game logic only.

- **No windowing, drawing or sound.** It opens no window and plays no audio.
  Frames are handed to you through events and left for your renderer.
- **No device input.** It does not poll the keyboard or mouse. You fill
  `InputComponent.pressed_keys` and call `mouse_tick` yourself.
- **No asset loading.** It loads no images or animation resources.
- **No user-interface widgets.** `World` keeps sets of interface objects and
  calls their `update`, but the package defines none.
- **No main loop or command.** It provides no command-line program. You call
  `World.update` from your own loop.
- **No polygon colliders.** Colliders handle circles and boxes only. Pairing
  a collider whose shape is `ColliderShape.POLYGON` raises `ValueError`.
  `shapes.Polygon` is available as standalone geometry.

## Running the tests

```
pip install silkengine[test]
pytest
```