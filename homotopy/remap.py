"""Domain-remap combinators: concatenation, segmentation and margins.

Every combinator here keeps the composed map normalized to ``[0, 1]`` on each
axis by rescaling the parameter before it reaches the wrapped map(s).

Degenerate arguments are not rejected.  A concatenation weight of exactly 1
divides by zero at ``t == 1``, and a margin with ``1 + 2m == 0`` divides by
zero at construction; both yield whatever numpy produces (``inf``/``nan`` plus
a ``RuntimeWarning``).  A weight of 0 is harmless on ``[0, 1]``: the first map
is never reached.
"""

from __future__ import annotations

from typing import Sequence, Type

import numpy as np

from ._common import _F, piecewise
from .maps import Curve, Surface, Volume, _M

__all__ = [
    "concatenate1",
    "concatenate_x2", "concatenate_y2",
    "concatenate_x3", "concatenate_y3", "concatenate_z3",
    "segment", "reverse",
    "margin1", "margin2", "margin3",
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _with_axis(t: _F, axis: int, value: _F) -> _F:
    """Copy of the parameter array *t* with column *axis* replaced by *value*."""
    out = t.copy()
    out[..., axis] = value
    return out


def _concatenate(cls: Type[_M], axis: int, w: float, a, b) -> _M:
    a = cls.coerce(a, "a")
    b = cls.coerce(b, "b")

    if cls.rank == 1:
        def _head(t: _F) -> _F:
            return a(t / w)

        def _tail(t: _F) -> _F:
            return b((t - w) / (1.0 - w))

        def _con(t: _F) -> _F:
            first = t < w
            return piecewise(t, t.shape, [first, ~first], [_head, _tail])
    else:
        def _head(t: _F) -> _F:
            return a(_with_axis(t, axis, t[..., axis] / w))

        def _tail(t: _F) -> _F:
            return b(_with_axis(t, axis, (t[..., axis] - w) / (1.0 - w)))

        def _con(t: _F) -> _F:
            first = t[..., axis] < w
            return piecewise(t, t.shape[:-1], [first, ~first], [_head, _tail])

    return cls(_con)


def _margin(cls: Type[_M], m: float, a) -> _M:
    a = cls.coerce(a, "a")
    # np.divide follows float semantics (inf + RuntimeWarning) for 1 + 2m == 0
    s = float(np.divide(1.0, 1.0 + 2.0 * m))
    return cls(lambda t: a((t + m) * s))


# ===========================================================================
# Concatenation
# ===========================================================================

def concatenate1(w: float, a: Curve, b: Curve) -> Curve:
    """Join two curves end to end.

    The result follows *a* on ``[0, w)`` and *b* on ``[w, 1]``, each rescaled
    to its full domain.  Continuity at ``w`` is not enforced: the value there
    is ``b(0)``, which need not equal ``a(1)``.
    """
    return _concatenate(Curve, 0, w, a, b)


def concatenate_x2(wx: float, a: Surface, b: Surface) -> Surface:
    """Join two surfaces along the first parameter at weight *wx*."""
    return _concatenate(Surface, 0, wx, a, b)


def concatenate_y2(wy: float, a: Surface, b: Surface) -> Surface:
    """Join two surfaces along the second parameter at weight *wy*."""
    return _concatenate(Surface, 1, wy, a, b)


def concatenate_x3(wx: float, a: Volume, b: Volume) -> Volume:
    """Join two volumes along the first parameter at weight *wx*."""
    return _concatenate(Volume, 0, wx, a, b)


def concatenate_y3(wy: float, a: Volume, b: Volume) -> Volume:
    """Join two volumes along the second parameter at weight *wy*."""
    return _concatenate(Volume, 1, wy, a, b)


def concatenate_z3(wz: float, a: Volume, b: Volume) -> Volume:
    """Join two volumes along the third parameter at weight *wz*."""
    return _concatenate(Volume, 2, wz, a, b)


# ===========================================================================
# Segmentation
# ===========================================================================

def segment(range_: Sequence[float], a: Curve) -> Curve:
    """Pick ``[range_[0], range_[1]]`` of *a*'s domain, renormalized to ``[0, 1]``.

    A descending range walks the segment backwards.
    """
    a = Curve.coerce(a, "a")
    r0, r1 = range_
    return Curve(lambda t: a(r0 + (r1 - r0) * t))


def reverse(a: Curve) -> Curve:
    """Walk *a* from its end to its start."""
    return segment((1.0, 0.0), a)


# ===========================================================================
# Margins
# ===========================================================================

def margin1(m: float, a: Curve) -> Curve:
    """Rescale the domain of a curve: ``t -> (t + m) / (1 + 2m)``.

    The endpoints land on ``a(m / (1 + 2m))`` and ``a((1 + m) / (1 + 2m))``.
    This is a rescale into a window of *a*'s domain, not a crop to
    ``[m, 1 - m]``.
    """
    return _margin(Curve, m, a)


def margin2(m: float, a: Surface) -> Surface:
    """Apply the :func:`margin1` rescale to both parameters of a surface."""
    return _margin(Surface, m, a)


def margin3(m: float, a: Volume) -> Volume:
    """Apply the :func:`margin1` rescale to all three parameters of a volume."""
    return _margin(Volume, m, a)
