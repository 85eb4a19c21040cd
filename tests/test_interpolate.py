"""Tests for homotopy.interpolate — lin2 and the cquad boundary blend."""

import warnings

import numpy as np
import numpy.testing as npt
import pytest

from homotopy import Curve, Surface, cquad, lin2, line, sphere


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _grid2(n: int = 9) -> np.ndarray:
    """Uniform ``n²`` grid of parameters in ``[0, 1]²`` (shape ``(n, n, 2)``)."""
    lin = np.linspace(0.0, 1.0, n)
    V, U = np.meshgrid(lin, lin, indexing="ij")
    return np.stack([U, V], axis=-1)


def _square(smooth: float, lift: float = 0.0) -> Surface:
    """Unit square whose ``ac``/``bd`` pair is raised by *lift* in Z.

    The first interpolant is ``[t0, t1, 0]`` and the second
    ``[t0, t1, lift]``, so the output Z coordinate is ``lift * w1'``.
    """
    ab = line([0, 0, 0], [0, 1, 0])
    cd = line([1, 0, 0], [1, 1, 0])
    ac = line([0, 0, lift], [1, 0, lift])
    bd = line([0, 1, lift], [1, 1, lift])
    return cquad(smooth, ab, cd, ac, bd)


# ===========================================================================
# lin2
# ===========================================================================

class TestLin2:
    f = line([0, 0, 0], [1, 0, 0])
    g = line([0, 1, 0], [0, 1, 2])

    def test_formula(self):
        h = lin2(self.f, self.g)
        for t in (0.0, 0.2, 0.5, 0.9, 1.0):
            npt.assert_allclose(h(t), self.f(t) * (1 - t) + self.g(t) * t, atol=1e-12)

    def test_start_is_first(self):
        npt.assert_allclose(lin2(self.f, self.g)(0.0), self.f(0.0))

    def test_end_is_second(self):
        npt.assert_allclose(lin2(self.f, self.g)(1.0), self.g(1.0))

    def test_batch(self):
        t = np.linspace(0, 1, 11)
        h = lin2(self.f, self.g)
        expected = self.f(t) * (1 - t)[:, None] + self.g(t) * t[:, None]
        npt.assert_allclose(h(t), expected, atol=1e-12)

    def test_accepts_plain_callables(self):
        h = lin2(lambda t: np.stack([t, t, t], axis=-1), self.g)
        assert isinstance(h, Curve)
        npt.assert_allclose(h(0.0), [0, 0, 0])

    def test_rejects_surface(self):
        with pytest.raises(TypeError):
            lin2(self.f, _square(0.5))


# ===========================================================================
# cquad
# ===========================================================================

class TestCquad:
    def test_reproduces_flat_square(self):
        quad = _square(0.3)
        t = _grid2()
        expected = np.concatenate([t, np.zeros(t.shape[:-1] + (1,))], axis=-1)
        npt.assert_allclose(quad(t), expected, atol=1e-12)

    def test_equal_weights_give_midpoint(self):
        quad = _square(0.2, lift=1.0)
        npt.assert_allclose(quad([0.0, 0.0]), [0.0, 0.0, 0.5], atol=1e-12)
        npt.assert_allclose(quad([1.0, 1.0]), [1.0, 1.0, 0.5], atol=1e-12)

    def test_zero_total_weight_falls_back_to_midpoint(self):
        quad = _square(0.0, lift=1.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            p = quad([0.5, 0.5])
        npt.assert_allclose(p, [0.5, 0.5, 0.5])

    def test_unit_first_weight_returns_first_interpolant(self):
        # smooth = 0 on the line t1 = 0.5 makes w1 vanish
        quad = _square(0.0, lift=1.0)
        npt.assert_allclose(quad([0.2, 0.5]), [0.2, 0.5, 0.0], atol=1e-12)
        assert quad([0.2, 0.5])[2] == 0.0

    def test_unit_second_weight_returns_second_interpolant(self):
        quad = _square(0.0, lift=1.0)
        npt.assert_allclose(quad([0.5, 0.3]), [0.5, 0.3, 1.0], atol=1e-12)
        assert quad([0.5, 0.3])[2] == 1.0

    def test_weighted_blend(self):
        smooth = 0.5
        t0, t1 = 0.1, 0.3
        w0 = 4 * (t0 - 0.5) ** 2 + smooth
        w1 = 4 * (t1 - 0.5) ** 2 + smooth
        quad = _square(smooth, lift=1.0)
        npt.assert_allclose(quad([t0, t1]), [t0, t1, w1 / (w0 + w1)], atol=1e-12)

    def test_large_smooth_flattens_toward_even_mix(self):
        quad = _square(1e6, lift=1.0)
        npt.assert_allclose(quad([0.1, 0.3])[2], 0.5, atol=1e-5)

    def test_no_nan_on_grid_with_zero_smooth(self):
        quad = _square(0.0, lift=1.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            pts = quad(_grid2())
        assert pts.shape == (9, 9, 3)
        assert np.isfinite(pts).all()

    def test_boundary_edges_follow_curves(self):
        ab = line([0, 0, 0], [0, 1, 1])
        cd = line([1, 0, 0], [1, 1, 1])
        ac = line([0, 0, 0], [1, 0, 0])
        bd = line([0, 1, 1], [1, 1, 1])
        quad = cquad(0.0, ab, cd, ac, bd)
        # On t1 = 0 the w1 weight is maximal but both interpolants agree.
        for u in (0.0, 0.25, 0.75, 1.0):
            npt.assert_allclose(quad([u, 0.0]), ac(u), atol=1e-12)
            npt.assert_allclose(quad([u, 1.0]), bd(u), atol=1e-12)

    def test_rejects_wrong_rank(self):
        ab = line([0, 0, 0], [0, 1, 0])
        with pytest.raises(TypeError):
            cquad(0.5, ab, ab, ab, sphere([0, 0, 0], 1.0))
