"""Position, rotation and scale of a scene object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .vector import UNIT_VECTOR, ZERO_VECTOR, Vector2


@dataclass
class Transform:
    """A 2D transform; the default is the identity."""

    position: Vector2 = field(default=ZERO_VECTOR)
    rotation: float = 0.0
    scale: Vector2 = field(default=UNIT_VECTOR)

    def copy(self):
        """Independent copy of this transform."""
        return replace(self)