"""
Unit tests for Matrix3x3

Tests cover:
- Builders (identity, translate, scale, rotate, pivot variants)
- Chain order and non-commutativity
- Inversion, including singular matrices
- Batch point transform and drawing-API projection
"""
import math

import numpy as np
import pytest

from view2d.models.matrix3x3 import Matrix3x3
from view2d.models.vector2d import Vector2d, ORIGIN


A = Matrix3x3.chain([Matrix3x3.translate(Vector2d(3, -2)), Matrix3x3.rotate(0.7)])
B = Matrix3x3.scale(2.5, -0.5)
C = Matrix3x3.rotate_at(-1.1, Vector2d(10, 4))

AFFINE = [
    Matrix3x3.identity(),
    Matrix3x3.translate(Vector2d(12.5, -7)),
    Matrix3x3.scale(5, -5),
    Matrix3x3.rotate(math.pi / 3),
    Matrix3x3.scale_at(1.1, 1.1, Vector2d(400, 300)),
    A, B, C,
    Matrix3x3.chain([A, B, C]),
]

# full 3x3, not affine
INVERTIBLE = AFFINE + [Matrix3x3(((2, 1, 0), (0, 1, 3), (1, 0, 1)))]

POINTS = [ORIGIN, Vector2d(1, 0), Vector2d(-3.5, 8.25), Vector2d(1e3, -2e3)]


def assert_vec_close(actual, expected, abs_tol=1e-9):
    assert actual.x == pytest.approx(expected.x, abs=abs_tol)
    assert actual.y == pytest.approx(expected.y, abs=abs_tol)


class TestBuilders:
    def test_identity_is_shared(self):
        assert Matrix3x3.identity() is Matrix3x3.identity()

    def test_identity_transform(self):
        p = Vector2d(4, -9)
        assert Matrix3x3.identity().transform(p) == p

    def test_translate_origin_is_exact(self):
        v = Vector2d(0.1, -123.456)
        assert Matrix3x3.translate(v).transform(ORIGIN) == v

    def test_scale(self):
        assert Matrix3x3.scale(2, -3).transform(Vector2d(1, 1)) == Vector2d(2, -3)

    def test_rotate_counter_clockwise(self):
        assert_vec_close(Matrix3x3.rotate(math.pi / 2).transform(Vector2d(1, 0)), Vector2d(0, 1))

    def test_transform_formula(self):
        m = Matrix3x3(((1, 2, 3), (4, 5, 6), (7, 8, 9)))
        # x' = m00*x + m01*y + m02, y' = m10*x + m11*y + m12
        assert m.transform(Vector2d(10, 100)) == Vector2d(213, 546)

    @pytest.mark.parametrize("angle", [0, 0.3, math.pi / 2, 2.5, math.pi, -4.0])
    def test_rotate_at_fixes_pivot(self, angle):
        center = Vector2d(17.5, -3)
        assert_vec_close(Matrix3x3.rotate_at(angle, center).transform(center), center)

    def test_scale_at_fixes_pivot(self):
        center = Vector2d(400, 300)
        assert_vec_close(Matrix3x3.scale_at(3, 0.5, center).transform(center), center)

    def test_scale_at_scales_about_pivot(self):
        m = Matrix3x3.scale_at(2, 2, Vector2d(1, 1))
        assert m.transform(Vector2d(2, 3)) == Vector2d(3, 5)


class TestComposition:
    def test_multiply_not_commutative(self):
        t = Matrix3x3.translate(Vector2d(10, 0))
        s = Matrix3x3.scale(2, 2)
        p = Vector2d(1, 1)
        assert Matrix3x3.multiply(t, s).transform(p) == Vector2d(12, 2)
        assert Matrix3x3.multiply(s, t).transform(p) == Vector2d(22, 2)

    def test_matmul_operator(self):
        assert (A @ B) == Matrix3x3.multiply(A, B)

    @pytest.mark.parametrize("p", POINTS)
    def test_chain_applies_rightmost_first(self, p):
        expected = A.transform(B.transform(C.transform(p)))
        assert_vec_close(Matrix3x3.chain([A, B, C]).transform(p), expected, abs_tol=1e-6)

    def test_chain_empty_is_identity(self):
        assert Matrix3x3.chain([]) == Matrix3x3.identity()

    def test_chain_single(self):
        assert Matrix3x3.chain([B]) == B


class TestInvert:
    def test_singular_scale_returns_none(self):
        assert Matrix3x3.scale(0, 1).invert() is None

    def test_singular_full_matrix_returns_none(self):
        assert Matrix3x3(((1, 2, 3), (2, 4, 6), (0, 0, 1))).invert() is None

    def test_determinant(self):
        assert Matrix3x3.scale(2, -3).determinant() == -6
        assert Matrix3x3.scale(0, 1).determinant() == 0

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_product_with_inverse_is_identity(self, m):
        assert Matrix3x3.multiply(m, m.invert()).almost_equals(Matrix3x3.identity(), 1e-9)

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_double_inverse(self, m):
        assert m.invert().invert().almost_equals(m, 1e-9)

    @pytest.mark.parametrize("m", AFFINE)
    @pytest.mark.parametrize("p", POINTS)
    def test_inverse_undoes_transform(self, m, p):
        assert_vec_close(m.invert().transform(m.transform(p)), p, abs_tol=1e-6)

    def test_invert_translate_exact(self):
        assert Matrix3x3.translate(Vector2d(4, -8)).invert().transform(Vector2d(4, -8)) == ORIGIN


class TestProjections:
    def test_ctx_args_order(self):
        m = Matrix3x3(((1, 2, 3), (4, 5, 6), (0, 0, 1)))
        assert m.ctx_args() == (1, 4, 2, 5, 3, 6)

    def test_to_array_rows(self):
        m = Matrix3x3.translate(Vector2d(7, 8))
        assert m.to_array() == ((1, 0, 7), (0, 1, 8), (0, 0, 1))

    def test_to_numpy(self):
        np.testing.assert_array_equal(Matrix3x3.scale(2, 3).to_numpy(), np.diag([2.0, 3.0, 1.0]))

    def test_transform_points_matches_transform(self):
        m = Matrix3x3.chain([A, B, C])
        pts = np.array([[p.x, p.y] for p in POINTS])
        out = m.transform_points(pts)
        assert out.shape == (len(POINTS), 2)
        for row, p in zip(out, POINTS):
            q = m.transform(p)
            assert row[0] == pytest.approx(q.x, abs=1e-9)
            assert row[1] == pytest.approx(q.y, abs=1e-9)

    @pytest.mark.parametrize("empty", [[], np.zeros((0, 2))])
    def test_transform_points_empty_batch(self, empty):
        out = A.transform_points(empty)
        assert out.shape == (0, 2)
        assert out.dtype == np.float64

    def test_transform_points_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Matrix3x3.identity().transform_points(np.zeros((3, 3)))

    def test_almost_equals(self):
        m = Matrix3x3.scale(1, 1)
        n = Matrix3x3(((1 + 1e-12, 0, 0), (0, 1, 0), (0, 0, 1)))
        assert m.almost_equals(n)
        assert not m.almost_equals(Matrix3x3.scale(1.1, 1))
