"""Reflection, offset and dimensional combinators.

* **Reflections**: :func:`mirror_x`, :func:`mirror_y`, :func:`mirror_z` and the
  baked variants that fold a half-shape into a symmetric whole
* **Translation**: :func:`offset`
* **Rank down**: :func:`contour`, :func:`intersect_x2`, :func:`intersect_y2`,
  :func:`intersect_x3`, :func:`intersect_y3`, :func:`intersect_z3`
* **Rank up**: :func:`extend1`, :func:`extend2`
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ._common import _F, add3, as_point, piecewise, vec2
from .maps import Curve, HomotopyMap, Surface, Volume, _M
from .remap import (
    concatenate_x2, concatenate_x3, concatenate_y2, concatenate_y3, concatenate_z3,
)

__all__ = [
    "mirror_x", "mirror_y", "mirror_z",
    "baked_mirror_x2", "baked_mirror_y2",
    "baked_mirror_x3", "baked_mirror_y3", "baked_mirror_z3",
    "offset", "contour",
    "extend1", "extend2",
    "intersect_x2", "intersect_y2",
    "intersect_x3", "intersect_y3", "intersect_z3",
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _require_map(a, name: str = "a") -> HomotopyMap:
    if not isinstance(a, (Curve, Surface, Volume)):
        raise TypeError(
            f"{name} must be a Curve, Surface or Volume, got {type(a).__name__}"
        )
    return a


def _mirror(axis: int, c: float, a: _M) -> _M:
    a = _require_map(a)

    def _mir(t: _F) -> _F:
        pos = a(t).copy()
        pos[..., axis] = 2.0 * c - pos[..., axis]
        return pos

    return type(a)(_mir)


def _insert_axis(t: _F, rank: int, axis: int, value: float) -> _F:
    """Rank ``rank + 1`` parameters: *t* with constant *value* inserted at *axis*."""
    cols = [t] if rank == 1 else [t[..., i] for i in range(rank)]
    cols.insert(axis, np.full_like(cols[0], value))
    return np.stack(cols, axis=-1)


# ===========================================================================
# Reflections
# ===========================================================================

def mirror_x(x: float, a: _M) -> _M:
    """Reflect the output of *a* across the plane ``X = x``.  Any rank."""
    return _mirror(0, x, a)


def mirror_y(y: float, a: _M) -> _M:
    """Reflect the output of *a* across the plane ``Y = y``.  Any rank."""
    return _mirror(1, y, a)


def mirror_z(z: float, a: _M) -> _M:
    """Reflect the output of *a* across the plane ``Z = z``.  Any rank."""
    return _mirror(2, z, a)


def baked_mirror_x2(x: float, a: Surface) -> Surface:
    """*a* on the first half of ``t[0]``, its X-reflection on the second."""
    a = Surface.coerce(a, "a")
    return concatenate_x2(0.5, a, mirror_x(x, a))


def baked_mirror_y2(y: float, a: Surface) -> Surface:
    """*a* on the first half of ``t[1]``, its Y-reflection on the second."""
    a = Surface.coerce(a, "a")
    return concatenate_y2(0.5, a, mirror_y(y, a))


def baked_mirror_x3(x: float, a: Volume) -> Volume:
    """*a* on the first half of ``t[0]``, its X-reflection on the second."""
    a = Volume.coerce(a, "a")
    return concatenate_x3(0.5, a, mirror_x(x, a))


def baked_mirror_y3(y: float, a: Volume) -> Volume:
    """*a* on the first half of ``t[1]``, its Y-reflection on the second."""
    a = Volume.coerce(a, "a")
    return concatenate_y3(0.5, a, mirror_y(y, a))


def baked_mirror_z3(z: float, a: Volume) -> Volume:
    """*a* on the first half of ``t[2]``, its Z-reflection on the second."""
    a = Volume.coerce(a, "a")
    return concatenate_z3(0.5, a, mirror_z(z, a))


# ===========================================================================
# Translation
# ===========================================================================

def offset(pos: Sequence[float], a: _M) -> _M:
    """Translate every output point of *a* by *pos*.  Any rank."""
    a = _require_map(a)
    pos = as_point(pos, "pos")
    return type(a)(lambda t: add3(a(t), pos))


# ===========================================================================
# Contour
# ===========================================================================

def contour(a: Surface) -> Curve:
    """Walk the boundary of a surface's domain once::

        0.0-0.25: [0.0, 0.0] -> [1.0, 0.0]
        0.25-0.5: [1.0, 0.0] -> [1.0, 1.0]
        0.5-0.75: [1.0, 1.0] -> [0.0, 1.0]
        0.75-1.0: [0.0, 1.0] -> [0.0, 0.0]
    """
    a = Surface.coerce(a, "a")

    edges = [
        lambda t: a(vec2(4.0 * t, np.zeros_like(t))),
        lambda t: a(vec2(np.ones_like(t), 4.0 * (t - 0.25))),
        lambda t: a(vec2(1.0 - 4.0 * (t - 0.5), np.ones_like(t))),
        lambda t: a(vec2(np.zeros_like(t), 1.0 - 4.0 * (t - 0.75))),
    ]

    def _contour(t: _F) -> _F:
        e0 = t < 0.25
        e1 = ~e0 & (t < 0.5)
        e2 = ~e0 & ~e1 & (t < 0.75)
        e3 = ~(e0 | e1 | e2)
        return piecewise(t, t.shape, [e0, e1, e2, e3], edges)

    return Curve(_contour)


# ===========================================================================
# Extension
# ===========================================================================

def extend1(a: Curve, b: Curve) -> Surface:
    """Surface ``a(t[0]) + b(t[1])``: *a* swept along *b*."""
    a = Curve.coerce(a, "a")
    b = Curve.coerce(b, "b")
    return Surface(lambda t: add3(a(t[..., 0]), b(t[..., 1])))


def extend2(a: Curve, b: Surface) -> Volume:
    """Volume ``a(t[0]) + b(t[1:])``: *b* swept along *a*."""
    a = Curve.coerce(a, "a")
    b = Surface.coerce(b, "b")
    return Volume(lambda t: add3(a(t[..., 0]), b(t[..., 1:])))


# ===========================================================================
# Intersection
# ===========================================================================

def intersect_x2(x: float, a: Surface) -> Curve:
    """Curve ``a([x, t])``: the surface with its first parameter fixed."""
    a = Surface.coerce(a, "a")
    return Curve(lambda t: a(_insert_axis(t, 1, 0, x)))


def intersect_y2(y: float, a: Surface) -> Curve:
    """Curve ``a([t, y])``: the surface with its second parameter fixed."""
    a = Surface.coerce(a, "a")
    return Curve(lambda t: a(_insert_axis(t, 1, 1, y)))


def intersect_x3(x: float, a: Volume) -> Surface:
    """Surface ``a([x, t0, t1])``."""
    a = Volume.coerce(a, "a")
    return Surface(lambda t: a(_insert_axis(t, 2, 0, x)))


def intersect_y3(y: float, a: Volume) -> Surface:
    """Surface ``a([t0, y, t1])``."""
    a = Volume.coerce(a, "a")
    return Surface(lambda t: a(_insert_axis(t, 2, 1, y)))


def intersect_z3(z: float, a: Volume) -> Surface:
    """Surface ``a([t0, t1, z])``."""
    a = Volume.coerce(a, "a")
    return Surface(lambda t: a(_insert_axis(t, 2, 2, z)))
