"""Levels: the stage a world plays, with the controller it runs."""

from __future__ import annotations

from .controller import Controller
from .delegate import MulticastDelegate
from .gameplay import create_object
from .objects import GameObject


class Level(GameObject):
    """A level that provides the world's player controller."""

    def __init__(self, world=None):
        super().__init__()
        self.world = world
        self.main_controller = None
        self._spawn_controller = None
        self.on_level_load = MulticastDelegate()
        self.on_level_delete = MulticastDelegate()

    def _use_controller(self, controller):
        self.main_controller = controller
        self.world.controller = controller

    def begin_play(self):
        """Reuse a persistent controller, or create the default one."""
        if self.world is None:
            raise RuntimeError("level is not in a world")
        existing = next(
            (a for a in self.world.overall_actors if isinstance(a, Controller)), None
        )
        if existing is not None:
            self._use_controller(existing)
            return
        if self._spawn_controller is None:
            raise RuntimeError("level has no default controller")
        self._use_controller(self._spawn_controller())

    def set_default_controller(self, cls):
        """Controller class created when the level begins."""
        if not (isinstance(cls, type) and issubclass(cls, Controller)):
            raise TypeError(f"{cls!r} is not a Controller class")
        self._spawn_controller = lambda: create_object(self.world, cls)