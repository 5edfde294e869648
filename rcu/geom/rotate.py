"""Rotate one or many 2D points around a pivot.

Contract
- In place: points are mutated AND returned (same object / same list). Callers
  that need the unrotated point must copy first, or use `rotate_point_copy`.
- Angle in radians. "Ndeg"/"Nrad" strings are accepted and normalized.
- A zero/falsy angle or a missing point skips the rotation entirely (the input
  is returned as-is, `None` entries included).
- Inside a sequence, `None` entries are left untouched.

Points may be `Point` instances or mutable mappings with "x"/"y" keys.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from typing import Any, Tuple

from rcu.core.angles import angle_to_radians
from rcu.core.units import to_number


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (float(self.x), float(self.y))


def _xy(p: Any) -> Tuple[float, float]:
    # Coordenadas faltantes o no numéricas (None, "abc") cuentan como 0.
    if isinstance(p, Mapping):
        return (to_number(p.get("x")), to_number(p.get("y")))
    return (to_number(getattr(p, "x", None)), to_number(getattr(p, "y", None)))


def _set_xy(p: Any, x: float, y: float) -> None:
    if isinstance(p, MutableMapping):
        p["x"] = x
        p["y"] = y
    else:
        p.x = x
        p.y = y


def _radians(angle: Any) -> float:
    if isinstance(angle, (int, float)) and not isinstance(angle, bool):
        return float(angle)
    return angle_to_radians(angle)


def _rotate_one(p: Any, cx: float, cy: float, cos: float, sin: float) -> None:
    px, py = _xy(p)
    x1 = px - cx
    y1 = py - cy
    _set_xy(p, x1 * cos - y1 * sin + cx, x1 * sin + y1 * cos + cy)


def rotate_points(p: Any, pivot: Any, angle: Any) -> Any:
    """Rotate `p` (a point or a sequence of points) around `pivot` by `angle`.

    Moves the origin to the pivot, applies the rotation matrix
    [cos -sin; sin cos] and moves back.

    Args:
        p: point, or list/tuple of points (None entries allowed)
        pivot: rotation center (not mutated)
        angle: radians (number) or "Ndeg"/"Nrad" string

    Returns:
        `p` itself (mutated in place).
    """
    if p is None or not angle:
        return p
    theta = _radians(angle)
    if not theta or math.isnan(theta):
        return p

    # One snapshot per call: every point sees the same angle and pivot.
    cos = math.cos(theta)
    sin = math.sin(theta)
    cx, cy = _xy(pivot)

    if isinstance(p, Sequence) and not isinstance(p, (str, bytes)):
        for item in p:
            if item is None:
                continue
            _rotate_one(item, cx, cy, cos, sin)
    else:
        _rotate_one(p, cx, cy, cos, sin)
    return p


def rotate_point_copy(p: Any, pivot: Any, angle: Any) -> Point:
    """Value-semantics variant: returns a new rotated Point, `p` is untouched."""
    out = p.copy() if isinstance(p, Point) else Point(*_xy(p))
    rotate_points(out, pivot, angle)
    return out
