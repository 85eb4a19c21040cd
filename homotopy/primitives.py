"""Primitive homotopy maps built from raw control data.

Curves: :func:`line`, :func:`quadratic_bezier`, :func:`cubic_bezier`.
Surfaces: :func:`circle`.  Volumes: :func:`sphere`.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ._common import _F, add3, as_point, scale3, sub3, vec3
from .interpolate import lin2
from .maps import Curve, Surface, Volume

TWO_PI = 2.0 * np.pi

__all__ = ["TWO_PI", "line", "quadratic_bezier", "cubic_bezier", "circle", "sphere"]


# ===========================================================================
# Curves
# ===========================================================================

def line(a: Sequence[float], b: Sequence[float]) -> Curve:
    """Straight segment ``a + (b - a) * t``."""
    a = as_point(a, "a")
    b = as_point(b, "b")
    d = sub3(b, a)
    return Curve(lambda t: add3(a, scale3(d, t)))


def quadratic_bezier(
    a: Sequence[float], b: Sequence[float], c: Sequence[float]
) -> Curve:
    """Quadratic Bezier curve through control points *a*, *b*, *c*."""
    return lin2(line(a, b), line(b, c))


def cubic_bezier(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float],
) -> Curve:
    """Blend of the chords ``a -> b`` and ``c -> d``.

    Note this is not the textbook cubic Bezier curve: *b* and *c* are never
    blended with each other.  Models built on it depend on this shape.
    """
    return lin2(line(a, b), line(c, d))


# ===========================================================================
# Surfaces
# ===========================================================================

def circle(center: Sequence[float], radius: float) -> Surface:
    """Flat disc in the plane ``Z = center[2]``.

    The first parameter is the angle, one full turn from 0 to 1.
    The second parameter is the radius fraction, from the center at 0 to the
    rim at 1.
    """
    c = as_point(center, "center")

    def _circle(t: _F) -> _F:
        angle = t[..., 0] * TWO_PI
        r = radius * t[..., 1]
        return vec3(c[0] + r * np.cos(angle), c[1] + r * np.sin(angle), c[2])

    return Surface(_circle)


# ===========================================================================
# Volumes
# ===========================================================================

def sphere(center: Sequence[float], radius: float) -> Volume:
    """Solid ball located at *center*.

    Parameters
    ----------
    center:
        ``(cx, cy, cz)`` centre of the ball.
    radius:
        Ball radius.

    The first parameter is the azimuth around the Z axis, one full turn from
    0 to 1.  The second runs from the pole at ``z = cz - radius`` (0) to the
    pole at ``z = cz + radius`` (1).  The third is the radius fraction.
    """
    c = as_point(center, "center")

    def _sphere(t: _F) -> _F:
        angle = t[..., 0] * TWO_PI
        tx = 2.0 * t[..., 1] - 1.0
        rad = radius * np.sqrt(1.0 - tx * tx) * t[..., 2]
        return vec3(
            c[0] + rad * np.cos(angle),
            c[1] + rad * np.sin(angle),
            c[2] - radius + 2.0 * radius * t[..., 1],
        )

    return Volume(_sphere)
