"""Keyboard and mouse input mapped to named actions."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable

from .components import ActorComponent
from .vector import ZERO_VECTOR

DOUBLE_CLICK_WINDOW = 0.5


class InputType(enum.Enum):
    """When a bound action fires."""

    PRESSED = 0
    RELEASED = 1
    HOLDING = 2
    DOUBLE_CLICK = 3


class KeyCode(enum.IntEnum):
    """Virtual key codes."""

    LBUTTON = 1
    RBUTTON = 2
    MBUTTON = 4
    TAB = 9
    ENTER = 13
    SHIFT = 16
    CTRL = 17
    ESC = 27
    SPACE = 32
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A


@dataclass
class KeyBinding:
    """A callback bound to a named mapping, with its press state."""

    func: Callable[[], object]
    input_type: InputType = InputType.PRESSED
    press_flag: bool = False
    last_time: float = 0.0


class InputComponent(ActorComponent):
    """Turns the set of pressed keys into action callbacks."""

    def __init__(self):
        super().__init__()
        self.mappings = {}
        self.bindings = {}
        self.pressed_keys = set()
        self.active = True
        self.clock = None
        self._mouse_position = ZERO_VECTOR

    def _now(self):
        if self.clock is not None:
            return self.clock()
        world = self.world
        if world is not None:
            return world.time_seconds()
        return time.monotonic()

    def set_mapping(self, name, key):
        """Map an action name to a key; an existing mapping is kept."""
        self.mappings.setdefault(name, KeyCode(key))

    def bind_action(self, name, input_type, func):
        """Bind a callback to a mapped action; unmapped names are ignored."""
        if name in self.mappings:
            self.bindings.setdefault(name, KeyBinding(func, input_type))

    def is_any_key_pressed(self):
        """Whether any key is down."""
        return bool(self.pressed_keys)

    def is_key_pressed(self, key):
        """Whether the given key is down."""
        return key in self.pressed_keys

    def mouse_position(self):
        """Mouse position on screen, or zero while input is disabled."""
        return self._mouse_position if self.active else ZERO_VECTOR

    def is_mouse_button_pressed(self):
        """Whether the left mouse button is down while input is enabled."""
        return self.active and KeyCode.LBUTTON in self.pressed_keys

    def enable_input(self, enable):
        """Turn input handling on or off."""
        self.active = bool(enable)

    def _live_bindings(self):
        for name, key in self.mappings.items():
            binding = self.bindings.get(name)
            if binding is not None:
                yield key, binding

    def peek_info(self):
        """Fire pressed, released and double-click actions."""
        if not self.enabled or not self.active:
            return
        for key, binding in self._live_bindings():
            if binding.input_type is InputType.HOLDING:
                continue
            if key in self.pressed_keys:
                if binding.input_type is InputType.PRESSED and not binding.press_flag:
                    binding.func()
                if binding.input_type is InputType.DOUBLE_CLICK and binding.last_time > 0:
                    if self._now() - binding.last_time < DOUBLE_CLICK_WINDOW:
                        binding.func()
                        binding.last_time = -1.0
                    else:
                        binding.last_time = 0.0
                binding.press_flag = True
            elif binding.press_flag:
                if binding.input_type is InputType.RELEASED:
                    binding.func()
                if binding.input_type is InputType.DOUBLE_CLICK:
                    if binding.last_time == 0:
                        binding.last_time = float(self._now())
                    elif binding.last_time == -1:
                        binding.last_time = 0.0
                binding.press_flag = False

    def peek_info_axis(self):
        """Fire holding actions for every key that is down."""
        if not self.enabled or not self.active:
            return
        for key, binding in self._live_bindings():
            if binding.input_type is InputType.HOLDING and key in self.pressed_keys:
                binding.func()

    def mouse_tick(self, position):
        """Record the latest mouse position on screen."""
        self._mouse_position = position