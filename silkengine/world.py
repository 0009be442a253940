"""The game world: object containers and the per-frame update."""

from __future__ import annotations

import math
import threading
import time

from . import fmath

ZONE_COLUMNS = 10
ZONE_ROWS = 6
COLLISION_SUBSTEPS = 4


def zone_index(x, y):
    """Collision zone column and row holding a world point."""
    column = fmath.clamp(math.trunc(math.trunc(x + 2000) / 400), 0, ZONE_COLUMNS - 1)
    row = fmath.clamp(math.trunc(math.trunc(y) / 200), 0, ZONE_ROWS - 1)
    return column, row


def _by_layer(collider):
    return (collider.layer, id(collider))


class World:
    """Holds every actor, interface, collider and body and steps them each frame."""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._start = clock()
        self.lock = threading.Lock()

        self.pause_delay = 0.0
        self.last_pause_time = 0.0

        self.actors = set()
        self.actors_to_add = []
        self.actors_to_delete = set()
        self.uis = set()
        self.uis_to_add = []
        self.uis_to_delete = set()

        self.overall_actors = set()
        self.overall_actors_to_add = []
        self.overall_uis = set()
        self.overall_uis_to_add = []

        self.overall_renders = set()
        self.overall_colliders = set()
        self.overall_rigids = set()

        self.renderers = set()
        self.colliders = set()
        self.colliders_to_clear = set()
        self.rigids = set()
        self.collider_zones = [[set() for _ in range(ZONE_ROWS)] for _ in range(ZONE_COLUMNS)]

        self.game_instance = None
        self.current_level = None
        self.main_camera = None
        self.controller = None
        self.collision_manager = None
        self.level_to_delete = None

    def time_seconds(self):
        """Seconds since the world was created."""
        return self._clock() - self._start

    def pause(self, delay):
        """Pause world logic for some seconds, leaving collision clean-up running."""
        self.pause_delay = delay
        self.last_pause_time = self.time_seconds()

    def update(self, delta_time):
        """Run one frame of world logic."""
        if self.pause_delay > 0 and self.time_seconds() > self.last_pause_time + self.pause_delay:
            self.pause_delay = 0.0

        if self.pause_delay == 0:
            for _ in range(COLLISION_SUBSTEPS):
                self.process_collisions(delta_time / COLLISION_SUBSTEPS)
        self.process_colliders()

        if self.controller is not None:
            self.controller.peek_info()

        running = self.pause_delay == 0 and not self.level_to_delete
        if running:
            if self.current_level is not None:
                self.current_level.update(delta_time)
            for actor in list(self.actors):
                actor.update(delta_time)
            for actor in list(self.overall_actors):
                actor.update(delta_time)

        with self.lock:
            self._flush_actors()

        for ui in list(self.uis):
            ui.update(delta_time)
        for ui in list(self.overall_uis):
            ui.update(delta_time)

        with self.lock:
            self._flush_uis()

    def _flush_actors(self):
        for actor in self.actors_to_add:
            self.actors.add(actor)
            actor.begin_play()
        self.actors_to_add.clear()

        for actor in self.overall_actors_to_add:
            self.actors.discard(actor)
            self.overall_actors.add(actor)
        self.overall_actors_to_add.clear()

        for actor in list(self.actors_to_delete):
            actor.end_play()
            self.actors.discard(actor)
            self.overall_actors.discard(actor)
        self.actors_to_delete.clear()

    def _flush_uis(self):
        self.uis.update(self.uis_to_add)
        self.uis_to_add.clear()

        for ui in self.overall_uis_to_add:
            self.uis.discard(ui)
            self.overall_uis.add(ui)
        self.overall_uis_to_add.clear()

        for ui in self.uis_to_delete:
            self.uis.discard(ui)
            self.overall_uis.discard(ui)
        self.uis_to_delete.clear()

    def process_colliders(self):
        """Drop contacts that ended and clear colliders queued for removal."""
        for collider in list(self.colliders):
            collider.erase()
        with self.lock:
            for collider in list(self.colliders_to_clear):
                collider.clear()
            self.colliders_to_clear.clear()

    def process_collisions(self, delta_time):
        """Move bodies, refresh collision zones and record new contacts."""
        for rigid in list(self.rigids):
            rigid.precise_update(delta_time)
        for collider in list(self.colliders):
            collider.collider_zone_tick()
        for column in self.collider_zones:
            for zone in column:
                if not zone:
                    continue
                members = sorted(zone, key=_by_layer)
                for me in members:
                    for other in members:
                        if other is me:
                            continue
                        me.insert(other)
                        if self.level_to_delete:
                            return

    def wipe_data(self):
        """Forget every level object, keeping only those that survive level changes."""
        self.actors.clear()
        self.actors_to_add.clear()
        self.actors_to_delete.clear()
        self.uis.clear()
        self.uis_to_add.clear()
        self.uis_to_delete.clear()
        self.colliders_to_clear.clear()
        self.renderers = set(self.overall_renders)
        self.colliders = set(self.overall_colliders)
        for collider in self.overall_colliders:
            collider.reset_zone()
        self.rigids = set(self.overall_rigids)
        for column in self.collider_zones:
            for zone in column:
                zone.clear()