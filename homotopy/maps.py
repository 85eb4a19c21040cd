"""Rank types for homotopy maps: curves, surfaces and volumes."""

from __future__ import annotations

from typing import Callable, Sequence, Tuple, Type, TypeVar

import numpy as np

from ._common import _F, as_param

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_MapFunc = Callable[[_F], _F]
_M = TypeVar("_M", bound="HomotopyMap")


# ===========================================================================
# Base class
# ===========================================================================

class HomotopyMap:
    """Base class for lazily evaluated maps from ``[0, 1]**rank`` to 3-D.

    A ``HomotopyMap`` wraps a callable ``func(t) -> points``.  For rank 1 *t*
    has shape ``(...)``; for rank 2 and 3 it has shape ``(..., rank)``.  The
    return value always has shape ``(..., 3)``.

    Maps are immutable: every combinator returns a new map that closes over
    its inputs, so a map may be evaluated from any number of threads.

    Not instantiated directly: construct a :class:`Curve`, :class:`Surface`
    or :class:`Volume`.

    Implements (on every rank):
    - Reflections: :meth:`mirror_x`, :meth:`mirror_y`, :meth:`mirror_z`
    - Translation: :meth:`offset`
    - Domain inset: :meth:`margin`
    """

    rank: int = 0

    def __init__(self, func: _MapFunc) -> None:
        if self.rank == 0:
            raise TypeError("HomotopyMap is a base class; use Curve, Surface or Volume")
        if not callable(func):
            raise TypeError(
                f"{type(self).__name__} needs a callable, got {type(func).__name__}"
            )
        self._func = func

    @classmethod
    def coerce(cls: Type[_M], obj, name: str = "map") -> _M:
        """Return *obj* as an instance of *cls*.

        Plain callables are wrapped; maps of another rank are rejected.
        """
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, HomotopyMap):
            raise TypeError(
                f"{name} must be a {cls.__name__}, got a {type(obj).__name__}"
            )
        if callable(obj):
            return cls(obj)
        raise TypeError(f"{name} must be a {cls.__name__} or a callable")

    def _batch_shape(self, t: _F) -> Tuple[int, ...]:
        if self.rank == 1:
            return t.shape
        if t.ndim == 0 or t.shape[-1] != self.rank:
            raise ValueError(
                f"{type(self).__name__} expects parameters of shape (..., {self.rank}), "
                f"got {t.shape}"
            )
        return t.shape[:-1]

    def evaluate(self, t) -> _F:
        """Evaluate the map at parameter(s) *t*."""
        t = as_param(t)
        shape = self._batch_shape(t) + (3,)
        out = as_param(self._func(t))
        if out.shape != shape:
            out = np.array(np.broadcast_to(out, shape))
        return out

    def __call__(self, t) -> _F:
        return self.evaluate(t)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} rank={self.rank}>"

    # ------------------------------------------------------------------
    # Codomain transforms
    # ------------------------------------------------------------------

    def mirror_x(self: _M, x: float) -> _M:
        """Reflect across the plane ``X = x``."""
        from . import transforms
        return transforms.mirror_x(x, self)

    def mirror_y(self: _M, y: float) -> _M:
        """Reflect across the plane ``Y = y``."""
        from . import transforms
        return transforms.mirror_y(y, self)

    def mirror_z(self: _M, z: float) -> _M:
        """Reflect across the plane ``Z = z``."""
        from . import transforms
        return transforms.mirror_z(z, self)

    def offset(self: _M, pos: Sequence[float]) -> _M:
        """Translate every output point by *pos*."""
        from . import transforms
        return transforms.offset(pos, self)

    # ------------------------------------------------------------------
    # Domain transforms
    # ------------------------------------------------------------------

    def margin(self: _M, m: float) -> _M:
        """Rescale every axis ``t -> (t + m) / (1 + 2m)``."""
        from . import remap
        return {1: remap.margin1, 2: remap.margin2, 3: remap.margin3}[self.rank](m, self)


# ===========================================================================
# Ranks
# ===========================================================================

class Curve(HomotopyMap):
    """A ``1d -> 3d`` map: a curved line."""

    rank = 1

    def segment(self, range_: Sequence[float]) -> Curve:
        """Pick the sub-interval ``range_`` of the domain and renormalize it."""
        from . import remap
        return remap.segment(range_, self)

    def reverse(self) -> Curve:
        from . import remap
        return remap.reverse(self)

    def concatenate(self, w: float, other: Curve) -> Curve:
        """Follow this curve on ``[0, w)`` and *other* on ``[w, 1]``."""
        from . import remap
        return remap.concatenate1(w, self, other)

    def lin2(self, other: Curve) -> Curve:
        """Crossfade from this curve to *other* as ``t`` goes from 0 to 1."""
        from . import interpolate
        return interpolate.lin2(self, other)

    def extend(self, other: HomotopyMap) -> HomotopyMap:
        """Sweep by *other*: a Curve gives a Surface, a Surface a Volume."""
        from . import transforms
        if isinstance(other, Surface):
            return transforms.extend2(self, other)
        return transforms.extend1(self, other)


class Surface(HomotopyMap):
    """A ``2d -> 3d`` map: a curved quad."""

    rank = 2

    def contour(self) -> Curve:
        """Boundary loop ``(0,0) -> (1,0) -> (1,1) -> (0,1) -> (0,0)``."""
        from . import transforms
        return transforms.contour(self)

    def baked_mirror_x(self, x: float) -> Surface:
        from . import transforms
        return transforms.baked_mirror_x2(x, self)

    def baked_mirror_y(self, y: float) -> Surface:
        from . import transforms
        return transforms.baked_mirror_y2(y, self)

    def concatenate_x(self, w: float, other: Surface) -> Surface:
        from . import remap
        return remap.concatenate_x2(w, self, other)

    def concatenate_y(self, w: float, other: Surface) -> Surface:
        from . import remap
        return remap.concatenate_y2(w, self, other)

    def intersect_x(self, x: float) -> Curve:
        """Fix the first parameter at *x*."""
        from . import transforms
        return transforms.intersect_x2(x, self)

    def intersect_y(self, y: float) -> Curve:
        """Fix the second parameter at *y*."""
        from . import transforms
        return transforms.intersect_y2(y, self)


class Volume(HomotopyMap):
    """A ``3d -> 3d`` map: a curved cube."""

    rank = 3

    def baked_mirror_x(self, x: float) -> Volume:
        from . import transforms
        return transforms.baked_mirror_x3(x, self)

    def baked_mirror_y(self, y: float) -> Volume:
        from . import transforms
        return transforms.baked_mirror_y3(y, self)

    def baked_mirror_z(self, z: float) -> Volume:
        from . import transforms
        return transforms.baked_mirror_z3(z, self)

    def concatenate_x(self, w: float, other: Volume) -> Volume:
        from . import remap
        return remap.concatenate_x3(w, self, other)

    def concatenate_y(self, w: float, other: Volume) -> Volume:
        from . import remap
        return remap.concatenate_y3(w, self, other)

    def concatenate_z(self, w: float, other: Volume) -> Volume:
        from . import remap
        return remap.concatenate_z3(w, self, other)

    def intersect_x(self, x: float) -> Surface:
        from . import transforms
        return transforms.intersect_x3(x, self)

    def intersect_y(self, y: float) -> Surface:
        from . import transforms
        return transforms.intersect_y3(y, self)

    def intersect_z(self, z: float) -> Surface:
        from . import transforms
        return transforms.intersect_z3(z, self)
