"""Tests for homotopy.remap — concatenation, segmentation and margins."""

import numpy as np
import numpy.testing as npt
import pytest

from homotopy import (
    Curve, Surface, Volume,
    concatenate1, concatenate_x2, concatenate_y2,
    concatenate_x3, concatenate_y3, concatenate_z3,
    line, margin1, margin2, margin3, offset, reverse, segment,
)
from homotopy._common import vec3


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _identity2() -> Surface:
    """Surface ``[u, v] -> [u, v, 0]``."""
    return Surface(lambda t: vec3(t[..., 0], t[..., 1], 0.0))


def _identity3() -> Volume:
    """Volume ``[u, v, w] -> [u, v, w]``."""
    return Volume(lambda t: t)


def _recording(curve: Curve, seen: list) -> Curve:
    """Wrap *curve* so every parameter array it receives is appended to *seen*."""
    def _rec(t):
        seen.append(np.array(t, copy=True))
        return curve(t)
    return Curve(_rec)


A = line([0, 0, 0], [1, 0, 0])
B = line([0, 1, 0], [0, 2, 0])


# ===========================================================================
# Concatenation
# ===========================================================================

class TestConcatenate1:
    W = 0.25

    def test_first_part_rescaled(self):
        c = concatenate1(self.W, A, B)
        for t in (0.0, 0.1, 0.2):
            npt.assert_allclose(c(t), A(t / self.W), atol=1e-12)

    def test_second_part_rescaled(self):
        c = concatenate1(self.W, A, B)
        for t in (0.25, 0.625, 1.0):
            npt.assert_allclose(c(t), B((t - self.W) / (1 - self.W)), atol=1e-12)

    def test_split_point_is_second_start(self):
        npt.assert_allclose(concatenate1(self.W, A, B)(self.W), B(0.0))

    def test_no_continuity_enforced(self):
        c = concatenate1(self.W, A, B)
        npt.assert_allclose(c(self.W - 1e-9), A(1.0), atol=1e-6)
        assert not np.allclose(c(self.W), A(1.0))

    def test_batch_matches_scalar(self):
        c = concatenate1(0.4, A, B)
        t = np.linspace(0.0, 1.0, 11)
        expected = np.stack([c(float(x)) for x in t])
        npt.assert_allclose(c(t), expected, atol=1e-12)

    def test_batch_shape_2d(self):
        c = concatenate1(0.4, A, B)
        assert c(np.zeros((3, 4))).shape == (3, 4, 3)

    def test_each_branch_sees_only_its_parameters(self):
        seen_a, seen_b = [], []
        c = concatenate1(0.5, _recording(A, seen_a), _recording(B, seen_b))
        c(np.linspace(0.0, 1.0, 21))
        assert all(((s >= 0.0) & (s <= 1.0)).all() for s in seen_a + seen_b)

    def test_weight_one_is_degenerate(self):
        c = concatenate1(1.0, A, B)
        with pytest.warns(RuntimeWarning):
            p = c(np.array([1.0]))
        assert np.isnan(p).all()

    def test_weight_zero_is_second_map(self):
        c = concatenate1(0.0, A, B)
        t = np.linspace(0.0, 1.0, 5)
        with np.errstate(divide="raise", invalid="raise"):
            npt.assert_allclose(c(t), B(t))

    def test_float32_preserved(self):
        a = line(np.zeros(3, np.float32), np.ones(3, np.float32))
        c = concatenate1(0.5, a, a)
        assert c(np.linspace(0, 1, 5, dtype=np.float32)).dtype == np.float32


class TestConcatenate2:
    def test_x_axis(self):
        s = concatenate_x2(0.5, _identity2(), offset([10, 0, 0], _identity2()))
        npt.assert_allclose(s([0.25, 0.3]), [0.5, 0.3, 0.0])
        npt.assert_allclose(s([0.75, 0.3]), [10.5, 0.3, 0.0])

    def test_y_axis(self):
        s = concatenate_y2(0.25, _identity2(), offset([0, 10, 0], _identity2()))
        npt.assert_allclose(s([0.3, 0.125]), [0.3, 0.5, 0.0])
        npt.assert_allclose(s([0.3, 0.625]), [0.3, 10.5, 0.0])

    def test_batch(self):
        s = concatenate_x2(0.5, _identity2(), offset([10, 0, 0], _identity2()))
        lin = np.linspace(0, 1, 5)
        V, U = np.meshgrid(lin, lin, indexing="ij")
        pts = s(np.stack([U, V], axis=-1))
        assert pts.shape == (5, 5, 3)
        assert (pts[:, :2, 0] <= 1.0).all()
        assert (pts[:, 2:, 0] >= 10.0).all()

    def test_rejects_curve(self):
        with pytest.raises(TypeError):
            concatenate_x2(0.5, A, _identity2())


class TestConcatenate3:
    def test_x_axis(self):
        v = concatenate_x3(0.25, _identity3(), _identity3())
        npt.assert_allclose(v([0.125, 0.2, 0.3]), [0.5, 0.2, 0.3])
        npt.assert_allclose(v([0.5, 0.2, 0.3]), [1 / 3, 0.2, 0.3])

    def test_y_axis(self):
        v = concatenate_y3(0.25, _identity3(), _identity3())
        npt.assert_allclose(v([0.1, 0.125, 0.3]), [0.1, 0.5, 0.3])
        npt.assert_allclose(v([0.1, 0.5, 0.3]), [0.1, 1 / 3, 0.3])

    def test_z_axis(self):
        v = concatenate_z3(0.25, _identity3(), _identity3())
        npt.assert_allclose(v([0.1, 0.2, 0.125]), [0.1, 0.2, 0.5])
        npt.assert_allclose(v([0.1, 0.2, 0.5]), [0.1, 0.2, 1 / 3])

    def test_input_not_modified(self):
        v = concatenate_z3(0.25, _identity3(), _identity3())
        t = np.array([[0.1, 0.2, 0.5], [0.1, 0.2, 0.1]])
        before = t.copy()
        v(t)
        npt.assert_array_equal(t, before)


# ===========================================================================
# Segmentation
# ===========================================================================

class TestSegment:
    def test_sub_interval(self):
        s = segment([0.25, 0.75], A)
        npt.assert_allclose(s(0.0), A(0.25))
        npt.assert_allclose(s(0.5), A(0.5))
        npt.assert_allclose(s(1.0), A(0.75))

    def test_descending_range_walks_backwards(self):
        s = segment([0.75, 0.25], A)
        npt.assert_allclose(s(0.0), A(0.75))
        npt.assert_allclose(s(1.0), A(0.25))


class TestReverse:
    def test_reverse(self):
        q = line([1, 2, 3], [-1, 0, 5])
        for t in (0.0, 0.3, 1.0):
            npt.assert_allclose(reverse(q)(t), q(1 - t), atol=1e-12)

    def test_involution(self):
        t = np.linspace(0, 1, 9)
        npt.assert_allclose(reverse(reverse(B))(t), B(t), atol=1e-12)


# ===========================================================================
# Margins
# ===========================================================================

class TestMargin:
    M = 0.25

    def test_margin1_endpoints(self):
        m = margin1(self.M, A)
        npt.assert_allclose(m(0.0), A(self.M / (1 + 2 * self.M)), atol=1e-12)
        npt.assert_allclose(m(1.0), A((1 + self.M) / (1 + 2 * self.M)), atol=1e-12)

    def test_margin1_is_rescale_not_crop(self):
        # [0, 1] maps onto [1/6, 5/6] of the wrapped domain, not [0.25, 0.75]
        m = margin1(self.M, A)
        npt.assert_allclose(m(0.0), [1 / 6, 0, 0], atol=1e-12)
        npt.assert_allclose(m(1.0), [5 / 6, 0, 0], atol=1e-12)

    def test_margin2_both_axes(self):
        m = margin2(self.M, _identity2())
        npt.assert_allclose(m([0.0, 1.0]), [1 / 6, 5 / 6, 0.0], atol=1e-12)

    def test_margin3_all_axes(self):
        m = margin3(self.M, _identity3())
        npt.assert_allclose(m([0.0, 0.5, 1.0]), [1 / 6, 0.5, 5 / 6], atol=1e-12)

    def test_zero_margin_is_identity(self):
        t = np.linspace(0, 1, 5)
        npt.assert_allclose(margin1(0.0, A)(t), A(t))

    def test_negative_margin_zooms_in(self):
        m = margin1(-0.25, A)
        npt.assert_allclose(m(0.0), [-0.5, 0, 0], atol=1e-12)
        npt.assert_allclose(m(1.0), [1.5, 0, 0], atol=1e-12)

    def test_degenerate_margin_warns(self):
        with pytest.warns(RuntimeWarning):
            margin1(-0.5, A)
