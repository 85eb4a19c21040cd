"""Grid sampling utilities for homotopy maps."""

from __future__ import annotations

import logging
import os
from typing import Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt

from .maps import Curve, Surface, Volume

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_Resolution = Union[int, Sequence[int]]
_Resolution2D = Tuple[int, int]
_Resolution3D = Tuple[int, int, int]

__all__ = [
    "parameter_grid", "sample_curve", "sample_surface", "sample_volume", "save_npy",
]


def _check_resolution(resolution: _Resolution) -> Tuple[int, ...]:
    res = (resolution,) if np.ndim(resolution) == 0 else tuple(resolution)
    for n in res:
        if int(n) != n or n < 1:
            raise ValueError(f"resolution must be positive integers, got {resolution!r}")
    return tuple(int(n) for n in res)


def _report(label: str, points: _Array) -> _Array:
    logger.debug("sampled %s: %s points", label, points.shape[:-1])
    finite = np.isfinite(points).all(axis=-1)
    if not finite.all():
        logger.warning(
            "%s: %d of %d sampled points are not finite",
            label, finite.size - int(finite.sum()), finite.size,
        )
    return points


def parameter_grid(resolution: _Resolution, dtype: npt.DTypeLike = float) -> _Array:
    """Uniform node grid over ``[0, 1]**k``, both endpoints included.

    Parameters
    ----------
    resolution:
        ``n`` for a 1-D grid, or ``(n0, n1[, n2])`` nodes along each axis.
    dtype:
        Floating dtype of the parameters.

    Returns
    -------
    numpy.ndarray
        Shape ``(n,)`` for an integer resolution.  Otherwise
        ``(n_last, ..., n0, k)``: the first parameter varies fastest, the
        same z-first indexing as the level-set samplers.
    """
    res = _check_resolution(resolution)
    axes = [np.linspace(0.0, 1.0, n, dtype=dtype) for n in res]
    if np.ndim(resolution) == 0:
        return axes[0]
    grids = np.meshgrid(*axes[::-1], indexing="ij")
    return np.stack(grids[::-1], axis=-1)


def sample_curve(curve: Curve, n: int, dtype: npt.DTypeLike = float) -> _Array:
    """Evaluate *curve* at *n* evenly spaced parameters.

    Returns
    -------
    numpy.ndarray
        Shape ``(n, 3)``.
    """
    curve = Curve.coerce(curve, "curve")
    return _report("curve", curve(parameter_grid(n, dtype)))


def sample_surface(
    surface: Surface,
    resolution: _Resolution2D,
    dtype: npt.DTypeLike = float,
) -> _Array:
    """Evaluate *surface* on a ``(nu, nv)`` node grid.

    Returns
    -------
    numpy.ndarray
        Shape ``(nv, nu, 3)``.
    """
    surface = Surface.coerce(surface, "surface")
    if len(resolution) != 2:
        raise ValueError(f"surface resolution must be (nu, nv), got {resolution!r}")
    return _report("surface", surface(parameter_grid(tuple(resolution), dtype)))


def sample_volume(
    volume: Volume,
    resolution: _Resolution3D,
    dtype: npt.DTypeLike = float,
) -> _Array:
    """Evaluate *volume* on a ``(nu, nv, nw)`` node grid.

    Returns
    -------
    numpy.ndarray
        Shape ``(nw, nv, nu, 3)``.
    """
    volume = Volume.coerce(volume, "volume")
    if len(resolution) != 3:
        raise ValueError(f"volume resolution must be (nu, nv, nw), got {resolution!r}")
    return _report("volume", volume(parameter_grid(tuple(resolution), dtype)))


def save_npy(path: str, points: _Array) -> None:
    """Save *points* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, points)
