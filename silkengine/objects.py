"""Base game object and small global helpers."""

from __future__ import annotations

import time


class GameObject:
    """Base of engine objects: a tag name and lifecycle hooks."""

    _count = 0

    def __init__(self):
        GameObject._count += 1
        self.name = ""
        self.init_name(type(self).__name__)

    def init_name(self, name):
        """Set the tag name to the given base name and a serial number."""
        self.name = f"{name}_{GameObject._count}"

    def update(self, delta_time):
        """Advance the object by a frame; does nothing by default."""

    def begin_play(self):
        """Called when the object enters play; does nothing by default."""

    def end_play(self):
        """Called when the object leaves play; does nothing by default."""


def cast(cls, obj):
    """Return obj if it is an instance of cls, otherwise None."""
    return obj if isinstance(obj, cls) else None


def get_real_time():
    """Today's local date as year-month-day without zero padding."""
    now = time.localtime()
    return f"{now.tm_year}-{now.tm_mon}-{now.tm_mday}"