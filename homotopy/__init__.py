"""
homotopy — Higher Order Functions on Homotopy Maps
==================================================

A library for constructing 3D geometry by composing *homotopy maps*:
continuous functions from a normalized parameter domain to a 3D point.

* :class:`Curve`   — ``[0, 1]   -> 3d`` (a curved line)
* :class:`Surface` — ``[0, 1]^2 -> 3d`` (a curved quad)
* :class:`Volume`  — ``[0, 1]^3 -> 3d`` (a curved cube)

Combinators build new maps from existing ones without ever materializing a
mesh; points are computed only when a map is evaluated.

Implemented features
--------------------
- Primitives: line, quadratic/cubic Bezier, circle, sphere
- Interpolation: lin2, cquad (curved quad from four boundary curves)
- Domain remaps: concatenation, segment, reverse, margin
- Transforms: mirror, baked mirror, offset, contour, extension, intersection
- Grid sampling: :func:`sample_curve`, :func:`sample_surface`,
  :func:`sample_volume`

Quick start
-----------

::

    from homotopy import line, cquad, sample_surface

    ab = line([0, 0, 0], [0, 1, 0])
    cd = line([1, 0, 0], [1, 1, 0.5])
    ac = line([0, 0, 0], [1, 0, 0])
    bd = line([0, 1, 0], [1, 1, 0.5])
    patch = cquad(0.5, ab, cd, ac, bd)

    points = sample_surface(patch, (32, 32))   # shape (32, 32, 3)

Short names
-----------
Every combinator also has a terse alias (``lin``, ``con``, ``mirx2``, ``x3``,
...) for compact model scripts.
"""

from ._common import (
    add2, add3, sub2, sub3, scale2, scale3, len2, len3, cast2, cast3,
)
from .maps import HomotopyMap, Curve, Surface, Volume
from .primitives import TWO_PI, line, quadratic_bezier, cubic_bezier, circle, sphere
from .interpolate import lin2, cquad
from .remap import (
    concatenate1,
    concatenate_x2,
    concatenate_y2,
    concatenate_x3,
    concatenate_y3,
    concatenate_z3,
    segment,
    reverse,
    margin1,
    margin2,
    margin3,
)
from .transforms import (
    mirror_x,
    mirror_y,
    mirror_z,
    baked_mirror_x2,
    baked_mirror_y2,
    baked_mirror_x3,
    baked_mirror_y3,
    baked_mirror_z3,
    offset,
    contour,
    extend1,
    extend2,
    intersect_x2,
    intersect_y2,
    intersect_x3,
    intersect_y3,
    intersect_z3,
)
from .grid import parameter_grid, sample_curve, sample_surface, sample_volume, save_npy

__version__ = "0.1.0"

# Short names
lin = line
qbez = quadratic_bezier
cbez = cubic_bezier
con = concatenate1
conx2 = concatenate_x2
cony2 = concatenate_y2
conx3 = concatenate_x3
cony3 = concatenate_y3
conz3 = concatenate_z3
mx = mirror_x
my = mirror_y
mz = mirror_z
mirx2 = baked_mirror_x2
miry2 = baked_mirror_y2
mirx3 = baked_mirror_x3
miry3 = baked_mirror_y3
mirz3 = baked_mirror_z3
rev = reverse
off = offset
seg1 = segment
ext1 = extend1
ext2 = extend2
x2 = intersect_x2
y2 = intersect_y2
x3 = intersect_x3
y3 = intersect_y3
z3 = intersect_z3

__all__ = [
    # Rank types
    "HomotopyMap",
    "Curve",
    "Surface",
    "Volume",

    # Vector arithmetic
    "add2", "add3", "sub2", "sub3", "scale2", "scale3",
    "len2", "len3", "cast2", "cast3",

    # Primitives
    "TWO_PI",
    "line",
    "quadratic_bezier",
    "cubic_bezier",
    "circle",
    "sphere",

    # Interpolation
    "lin2",
    "cquad",

    # Domain remaps
    "concatenate1",
    "concatenate_x2", "concatenate_y2",
    "concatenate_x3", "concatenate_y3", "concatenate_z3",
    "segment",
    "reverse",
    "margin1", "margin2", "margin3",

    # Transforms
    "mirror_x", "mirror_y", "mirror_z",
    "baked_mirror_x2", "baked_mirror_y2",
    "baked_mirror_x3", "baked_mirror_y3", "baked_mirror_z3",
    "offset",
    "contour",
    "extend1", "extend2",
    "intersect_x2", "intersect_y2",
    "intersect_x3", "intersect_y3", "intersect_z3",

    # Grid utilities
    "parameter_grid",
    "sample_curve",
    "sample_surface",
    "sample_volume",
    "save_npy",

    # Short names
    "lin", "qbez", "cbez",
    "con", "conx2", "cony2", "conx3", "cony3", "conz3",
    "mx", "my", "mz",
    "mirx2", "miry2", "mirx3", "miry3", "mirz3",
    "rev", "off", "seg1", "ext1", "ext2",
    "x2", "y2", "x3", "y3", "z3",
]
