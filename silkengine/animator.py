"""Frame animations and a state machine that switches between them."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass

from .components import ActorComponent
from .delegate import MulticastDelegate, UnicastDelegate
from .vector import ZERO_VECTOR


class TransitionComparison(enum.Enum):
    """How a parameter is compared with a condition's value."""

    EQUAL = 0
    NOT_EQUAL = 1
    GREATER = 2
    LESS = 3
    GREATER_EQUAL = 4
    LESS_EQUAL = 5


class ComparisonMode(enum.Enum):
    """Whether all conditions of an edge must hold, or any one."""

    AND = 0
    OR = 1


class ParamType(enum.Enum):
    """Kind of animator parameter."""

    INTEGER = 0
    BOOL = 1
    FLOAT = 2
    TRIGGER = 3


_COMPARATORS = {
    TransitionComparison.EQUAL: operator.eq,
    TransitionComparison.NOT_EQUAL: operator.ne,
    TransitionComparison.GREATER: operator.gt,
    TransitionComparison.LESS: operator.lt,
    TransitionComparison.GREATER_EQUAL: operator.ge,
    TransitionComparison.LESS_EQUAL: operator.le,
}


def compare(a, b, comparison):
    """Compare a with b in the given way."""
    return _COMPARATORS[comparison](a, b)


@dataclass(frozen=True)
class IntegerCondition:
    param_name: str
    value: int
    comparison: TransitionComparison = TransitionComparison.EQUAL


@dataclass(frozen=True)
class FloatCondition:
    param_name: str
    value: float
    comparison: TransitionComparison = TransitionComparison.EQUAL


@dataclass(frozen=True)
class BoolCondition:
    param_name: str
    value: bool


@dataclass(frozen=True)
class TriggerCondition:
    param_name: str


class Animation:
    """A sequence of frames played at a fixed interval."""

    def __init__(self, frames=(), offset=ZERO_VECTOR, interval=0.0):
        self.controller = None
        self.frames = list(frames)
        self.offset = offset
        self.index = 0
        self.looping = True
        self.reverse = False
        self.montage = False
        self.interval = interval
        self.notifications = {}
        self.nexts = []
        self.on_anim_enter = UnicastDelegate()
        self.on_anim_exit = UnicastDelegate()
        self._on_montage_exit = UnicastDelegate()
        self._exit_lock = False
        self._running = False
        self._elapsed = 0.0

    def __repr__(self):
        return f"Animation(frames={len(self.frames)}, index={self.index})"

    @property
    def running(self):
        """Whether the frame clock is running."""
        return self._running

    def set_frames(self, frames, offset=ZERO_VECTOR):
        """Use the given frames, drawn at an offset."""
        self.frames = list(frames)
        self.offset = offset

    def set_interval(self, interval):
        """Seconds between frames."""
        self.interval = interval

    def add_notification(self, index, callback):
        """Call callback whenever the given frame is reached; the first one wins."""
        self.notifications.setdefault(index, callback)

    def _start_index(self):
        return len(self.frames) - 1 if self.reverse else 0

    def _stop(self):
        self._running = False

    def _resume(self):
        self._running = True

    def advance(self, delta_time):
        """Run the frame clock for some seconds, ticking once per interval."""
        if not self._running:
            return
        if self.interval <= 0:
            self.tick()
            return
        self._elapsed += delta_time
        while self._running and self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self.tick()

    def _at_end(self):
        last = len(self.frames) - 1
        return (self.index == 0 and not self.reverse) or (self.index == last and self.reverse)

    def tick(self):
        """Step to the next frame and follow any transition it triggers."""
        controller = self.controller
        count = len(self.frames)
        if controller is None or count == 0:
            return

        if not self.montage and not self.looping:
            if self.index == count - 1 and not self.reverse:
                return
            if self.index == 0 and self.reverse:
                return

        self.index = (self.index + (-1 if self.reverse else 1)) % count

        if self._at_end() and self.montage:
            self.montage = False
            if self._on_montage_exit.is_bound():
                self._on_montage_exit.execute()
                return
            for edge in self.nexts:
                if controller.check_conditions(edge):
                    controller.set_node(edge.end)
                    return

        for edge in self.nexts:
            if edge.is_unconditional() and self._at_end():
                controller.set_node(edge.end)
                return

        callback = self.notifications.get(self.index)
        if callback is not None:
            callback()


class AnimEdge:
    """A directed transition between two animations, guarded by conditions."""

    def __init__(self, start, end, mode=ComparisonMode.AND):
        self.start = start
        self.end = end
        self.mode = mode
        self.integer_conditions = []
        self.float_conditions = []
        self.bool_conditions = []
        self.trigger_conditions = []
        start.nexts.append(self)

    def add_condition(self, condition):
        """Add a condition that guards this transition."""
        if isinstance(condition, IntegerCondition):
            self.integer_conditions.append(condition)
        elif isinstance(condition, FloatCondition):
            self.float_conditions.append(condition)
        elif isinstance(condition, BoolCondition):
            self.bool_conditions.append(condition)
        elif isinstance(condition, TriggerCondition):
            self.trigger_conditions.append(condition)
        else:
            raise TypeError(f"not a transition condition: {condition!r}")

    def is_unconditional(self):
        """Whether the edge has no conditions at all."""
        return not (
            self.integer_conditions
            or self.float_conditions
            or self.bool_conditions
            or self.trigger_conditions
        )


class Animator(ActorComponent):
    """Plays animations and switches between them as parameters change."""

    def __init__(self):
        super().__init__()
        self.animations = {}
        self._integers = {}
        self._floats = {}
        self._bools = {}
        self._triggers = {}
        self.node = None
        self.last_node = None
        self.current_sprite = None
        self.step = 1.0
        self.on_sprite_changed = MulticastDelegate()

    def insert(self, name, animation):
        """Add an animation under a name; animations without frames are ignored."""
        if not animation.frames:
            return
        self.animations.setdefault(name, animation)
        animation.controller = self

    def _resolve(self, node):
        if isinstance(node, Animation):
            return node
        return self.animations[node]

    def set_node(self, node):
        """Switch to an animation given by name or object."""
        target = self._resolve(node)
        current = self.node
        if current is not None and not current._exit_lock:
            current._stop()
            current._exit_lock = True
            try:
                current.on_anim_exit.execute()
            finally:
                current._exit_lock = False
            if self.node is not current:
                return

        self.node = target
        target.index = target._start_index()
        target._resume()
        target.on_anim_enter.execute()

    def is_playing(self, name):
        """Whether the named animation is the one playing."""
        return name in self.animations and self.node is self.animations[name]

    def _show_current_frame(self):
        node = self.node
        sprite = node.frames[node.index] if node.frames else None
        self.current_sprite = sprite
        self.on_sprite_changed.broadcast(sprite, node.offset)

    def play_montage(self, name):
        """Play an animation once, then leave it through its edges or return."""
        target = self.animations[name]
        if self.node is target:
            target.index = target._start_index()
            return
        self.last_node = self.node
        self.set_node(name)
        if self.node is None:
            return
        self.node.montage = True
        self._show_current_frame()

        if not self.node.nexts:
            self.node._on_montage_exit.bind(self._restore_after_montage)

    def _restore_after_montage(self):
        current = self.node
        current._stop()
        current.on_anim_exit.execute()
        self.node = self.last_node
        if self.node is not None:
            self.node._resume()
            self.node.on_anim_enter.execute()

    def add_parameter(self, name, param_type):
        """Declare a parameter; an existing one keeps its value."""
        if param_type is ParamType.INTEGER:
            self._integers.setdefault(name, 0)
        elif param_type is ParamType.FLOAT:
            self._floats.setdefault(name, 0.0)
        elif param_type is ParamType.BOOL:
            self._bools.setdefault(name, False)
        else:
            self._triggers.setdefault(name, False)

    def set_integer(self, name, value):
        """Set a declared integer parameter."""
        if name in self._integers:
            self._integers[name] = int(value)

    def set_float(self, name, value):
        """Set a declared float parameter."""
        if name in self._floats:
            self._floats[name] = float(value)

    def set_bool(self, name, value):
        """Set a declared bool parameter."""
        if name in self._bools:
            self._bools[name] = bool(value)

    def set_trigger(self, name):
        """Fire a declared trigger until a transition consumes it."""
        if name in self._triggers:
            self._triggers[name] = True

    def get_integer(self, name):
        """Value of an integer parameter, or 0 if undeclared."""
        return self._integers.get(name, 0)

    def get_float(self, name):
        """Value of a float parameter, or 0.0 if undeclared."""
        return self._floats.get(name, 0.0)

    def get_bool(self, name):
        """Value of a bool parameter, or False if undeclared."""
        return self._bools.get(name, False)

    def _condition_results(self, edge):
        for condition in edge.integer_conditions:
            if condition.param_name in self._integers:
                yield compare(
                    self._integers[condition.param_name], condition.value, condition.comparison
                )
        for condition in edge.float_conditions:
            if condition.param_name in self._floats:
                yield compare(
                    self._floats[condition.param_name], condition.value, condition.comparison
                )
        for condition in edge.bool_conditions:
            if condition.param_name in self._bools:
                yield self._bools[condition.param_name] == condition.value
        for condition in edge.trigger_conditions:
            if condition.param_name in self._triggers:
                fired = self._triggers[condition.param_name]
                self._triggers[condition.param_name] = False
                yield fired

    def check_conditions(self, edge):
        """Whether the edge's conditions hold; triggers checked are consumed."""
        result = False
        for result in self._condition_results(edge):
            if result and edge.mode is ComparisonMode.OR:
                return True
            if not result and edge.mode is ComparisonMode.AND:
                return False
        return result

    def _refresh(self):
        node = self.node
        sprite = node.frames[node.index] if node.frames else None
        if sprite is not self.current_sprite:
            if self.current_sprite is not None and not self.enabled:
                return
            self.current_sprite = sprite
            self.on_sprite_changed.broadcast(sprite, node.offset)

        if node.montage:
            return
        for edge in node.nexts:
            if self.check_conditions(edge):
                self.set_node(edge.end)
                break

    def update(self, delta_time):
        """Show the current frame, follow transitions, and run the frame clock."""
        if self.node is None:
            return
        self._refresh()
        if self.node is not None:
            self.node.advance(delta_time * self.step)

    def activate(self):
        """Enable the animator and resume the current animation."""
        super().activate()
        if self.node is not None:
            self.node._resume()

    def deactivate(self):
        """Disable the animator and pause the current animation."""
        super().deactivate()
        if self.node is not None:
            self.node._stop()