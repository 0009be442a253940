"""Physics material and collision result records."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .vector import ZERO_VECTOR, Vector2


class CombinePattern(enum.Enum):
    """How two materials' properties are combined."""

    MIN = 0
    MID = 1
    MAX = 2


@dataclass(frozen=True)
class PhysicsMaterial:
    """Friction and bounciness of a surface."""

    friction: float = 0.4
    bounciness: float = 0.0


def combine_materials(first, second, pattern=CombinePattern.MID):
    """Material resulting from two surfaces in contact."""
    if pattern is CombinePattern.MID:
        return PhysicsMaterial(
            (first.friction + second.friction) * 0.5,
            (first.bounciness + second.bounciness) * 0.5,
        )
    pick = min if pattern is CombinePattern.MIN else max
    return PhysicsMaterial(
        pick(first.friction, second.friction),
        pick(first.bounciness, second.bounciness),
    )


@dataclass(frozen=True)
class HitResult:
    """Where and how a collision happened, and what was hit."""

    impact_point: Vector2 = field(default=ZERO_VECTOR)
    impact_normal: Vector2 = field(default=ZERO_VECTOR)
    hit_object: object = None
    hit_component: object = None

    def mirrored(self, hit_object, hit_component):
        """The same hit seen from the other side: normal reversed, new target."""
        return HitResult(self.impact_point, -self.impact_normal, hit_object, hit_component)