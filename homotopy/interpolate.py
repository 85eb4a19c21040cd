"""Interpolation combinators: blends of two or more maps of one rank."""

from __future__ import annotations

import numpy as np

from ._common import _F, add3, scale3, sub3
from .maps import Curve, Surface

__all__ = ["lin2", "cquad"]


def lin2(a: Curve, b: Curve) -> Curve:
    """Linear crossfade ``a(t) * (1 - t) + b(t) * t`` between two curves."""
    a = Curve.coerce(a, "a")
    b = Curve.coerce(b, "b")
    return Curve(lambda t: add3(scale3(a(t), 1.0 - t), scale3(b(t), t)))


def cquad(smooth: float, ab: Curve, cd: Curve, ac: Curve, bd: Curve) -> Surface:
    """Curved quad reconstructed from its four boundary curves.

    *ab* and *cd* are sampled at ``t[1]`` and interpolated along ``t[0]``;
    *ac* and *bd* are sampled at ``t[0]`` and interpolated along ``t[1]``.
    The two interpolants are blended with weights
    ``w_i = 4 * (t[i] - 0.5)**2 + smooth``, normalized to sum to one, so the
    pair whose axis is closer to an edge dominates.  A larger *smooth* pulls
    the blend toward an even mix everywhere.

    A normalized weight of exactly 1 returns that interpolant unmodified.
    When both raw weights are zero (``smooth == 0`` at ``t == [0.5, 0.5]``)
    the midpoint of the two interpolants is returned.
    """
    ab = Curve.coerce(ab, "ab")
    cd = Curve.coerce(cd, "cd")
    ac = Curve.coerce(ac, "ac")
    bd = Curve.coerce(bd, "bd")

    def _cquad(t: _F) -> _F:
        t0 = t[..., 0]
        t1 = t[..., 1]
        abx = ab(t1)
        acx = ac(t0)
        a = add3(abx, scale3(sub3(cd(t1), abx), t0))
        b = add3(acx, scale3(sub3(bd(t0), acx), t1))

        w0 = 4.0 * (t0 - 0.5) * (t0 - 0.5) + smooth
        w1 = 4.0 * (t1 - 0.5) * (t1 - 0.5) + smooth
        total = w0 + w1
        zero = total == 0
        total = np.where(zero, 1, total)
        w0 = w0 / total
        w1 = w1 / total

        out = add3(scale3(a, w0), scale3(b, w1))
        out = np.where(zero[..., None], scale3(add3(a, b), 0.5), out)
        out = np.where(((w1 == 1) & ~zero)[..., None], b, out)
        return np.where(((w0 == 1) & ~zero)[..., None], a, out)

    return Surface(_cquad)
