"""Shared vector helpers used by every homotopy module.

This module provides:

* **Type alias**: :data:`_F`
* **Vector constructors**: :func:`vec2`, :func:`vec3`
* **Vector arithmetic**: :func:`add2`, :func:`add3`, :func:`sub2`,
  :func:`sub3`, :func:`scale2`, :func:`scale3`, :func:`len2`, :func:`len3`,
  :func:`cast2`, :func:`cast3`
* **Coercion**: :func:`as_param`, :func:`as_point`
* **Branch evaluation**: :func:`piecewise`

All vector helpers broadcast over arbitrary leading batch dimensions: a
2-vector array has shape ``(..., 2)`` and a 3-vector array ``(..., 3)``.

Not meant to be imported directly by end users; the arithmetic helpers are
re-exported from :mod:`homotopy`.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "vec2", "vec3",
    "add2", "add3", "sub2", "sub3", "scale2", "scale3",
    "len2", "len3", "cast2", "cast3",
    "as_param", "as_point", "piecewise",
]


# ===========================================================================
# Vector constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def vec3(x: _F, y: _F, z: _F) -> _F:
    """Stack *x*, *y*, *z* into a ``(..., 3)`` array."""
    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1)


# ===========================================================================
# Vector arithmetic
# ===========================================================================

def add2(a: _F, b: _F) -> _F:
    """Component-wise sum of two 2-vectors."""
    return np.add(a, b)


def add3(a: _F, b: _F) -> _F:
    """Component-wise sum of two 3-vectors."""
    return np.add(a, b)


def sub2(a: _F, b: _F) -> _F:
    """Component-wise difference ``a - b`` of two 2-vectors."""
    return np.subtract(a, b)


def sub3(a: _F, b: _F) -> _F:
    """Component-wise difference ``a - b`` of two 3-vectors."""
    return np.subtract(a, b)


def _scale(v: _F, s: float | _F) -> _F:
    # A batch of factors scales a batch of vectors row by row.
    if np.ndim(s):
        s = np.expand_dims(s, -1)
    return np.multiply(v, s)


def scale2(v: _F, s: float | _F) -> _F:
    """Scale 2-vector(s) *v* by scalar(s) *s*."""
    return _scale(v, s)


def scale3(v: _F, s: float | _F) -> _F:
    """Scale 3-vector(s) *v* by scalar(s) *s*."""
    return _scale(v, s)


def len2(v: _F) -> _F:
    """Euclidean length of 2-vector(s) along the last axis."""
    return np.linalg.norm(v, axis=-1)


def len3(v: _F) -> _F:
    """Euclidean length of 3-vector(s) along the last axis."""
    return np.linalg.norm(v, axis=-1)


def cast2(v: _F, dtype: npt.DTypeLike) -> _F:
    """Convert 2-vector(s) to *dtype*."""
    return np.asarray(v).astype(dtype)


def cast3(v: _F, dtype: npt.DTypeLike) -> _F:
    """Convert 3-vector(s) to *dtype*."""
    return np.asarray(v).astype(dtype)


# ===========================================================================
# Coercion
# ===========================================================================

def as_param(t) -> _F:
    """Return *t* as a floating array; integer input becomes ``float64``."""
    t = np.asarray(t)
    if not np.issubdtype(t.dtype, np.floating):
        t = t.astype(float)
    return t


def as_point(p: Sequence[float], name: str = "point") -> _F:
    """Return a control point as a ``(3,)`` floating array.

    Floating input keeps its dtype, anything else becomes ``float64``.
    """
    arr = as_param(p)
    if arr.shape != (3,):
        raise ValueError(f"{name} must be a 3-vector, got shape {arr.shape}")
    return arr


# ===========================================================================
# Branch evaluation
# ===========================================================================

def piecewise(
    x: _F,
    batch_shape: Tuple[int, ...],
    condlist: Sequence[npt.NDArray[np.bool_]],
    funclist: Sequence[Callable[[_F], _F]],
) -> _F:
    """Vector-valued counterpart of :func:`numpy.piecewise`.

    ``funclist[i]`` is called only on the parameters of *x* selected by
    ``condlist[i]`` and must return one 3-vector per selected parameter.
    The conditions must partition *batch_shape*.  Returns ``batch_shape + (3,)``.
    """
    pieces = []
    for cond, func in zip(condlist, funclist):
        cond = np.broadcast_to(cond, batch_shape)
        if not cond.any():
            continue
        pieces.append((cond, np.asarray(func(x[cond]))))

    dtype = np.result_type(*[r for _, r in pieces]) if pieces else x.dtype
    out = np.empty(batch_shape + (3,), dtype=dtype)
    for cond, r in pieces:
        out[cond] = r
    return out
