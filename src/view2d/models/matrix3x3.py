"""3x3 homogeneous transform matrices for 2D affine maps.

Matrices are immutable. Composition reads right to left: in
``Matrix3x3.chain([A, B, C])`` the point is transformed by C first and by A
last.

The view pipeline is built from these, e.g. real -> view:
    chain([translate(view_center), scale(ppu, -ppu), translate(-real_center)])
"""
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from view2d.models.vector2d import Vector2d

Rows = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]


class NotInvertibleError(ValueError):
    """Raised by callers of Matrix3x3.invert() when the determinant is zero.

    Indicates a degenerate viewport state (zero scale). Not transient.
    """


@dataclass(frozen=True)
class Matrix3x3:
    """Immutable 3x3 matrix. The full matrix is stored; the bottom row is
    [0, 0, 1] for everything the builders produce, but this is not enforced.
    """
    v: Rows

    @staticmethod
    def _mul3x3(v1: Rows, v2: Rows) -> Rows:
        return tuple(
            tuple(
                v1[r][0] * v2[0][c] + v1[r][1] * v2[1][c] + v1[r][2] * v2[2][c]
                for c in range(3)
            )
            for r in range(3)
        )

    # ========================================
    # Builders
    # ========================================

    @staticmethod
    def identity() -> 'Matrix3x3':
        return _IDENTITY

    @staticmethod
    def multiply(m1: 'Matrix3x3', m2: 'Matrix3x3') -> 'Matrix3x3':
        """Matrix product m1 * m2 (m2 is applied to points first)."""
        return Matrix3x3(Matrix3x3._mul3x3(m1.v, m2.v))

    @staticmethod
    def translate(v: Vector2d) -> 'Matrix3x3':
        return Matrix3x3((
            (1.0, 0.0, v.x),
            (0.0, 1.0, v.y),
            (0.0, 0.0, 1.0),
        ))

    @staticmethod
    def scale(x_factor: float, y_factor: float) -> 'Matrix3x3':
        """Axis scaling about the origin. A zero factor gives a singular matrix."""
        return Matrix3x3((
            (x_factor, 0.0, 0.0),
            (0.0, y_factor, 0.0),
            (0.0, 0.0, 1.0),
        ))

    @staticmethod
    def rotate(angle: float) -> 'Matrix3x3':
        """Counter-clockwise rotation by angle radians about the origin."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Matrix3x3((
            (c, -s, 0.0),
            (s, c, 0.0),
            (0.0, 0.0, 1.0),
        ))

    @staticmethod
    def chain(chain: Iterable['Matrix3x3']) -> 'Matrix3x3':
        """Left fold of multiply starting at identity: ((I * A) * B) * C."""
        acc = _IDENTITY
        for m in chain:
            acc = Matrix3x3.multiply(acc, m)
        return acc

    @staticmethod
    def scale_at(x_factor: float, y_factor: float, center: Vector2d) -> 'Matrix3x3':
        """Scale about a pivot point instead of the origin."""
        return Matrix3x3.chain([
            Matrix3x3.translate(center),
            Matrix3x3.scale(x_factor, y_factor),
            Matrix3x3.translate(center.neg()),
        ])

    @staticmethod
    def rotate_at(angle: float, center: Vector2d) -> 'Matrix3x3':
        """Rotate about a pivot point instead of the origin."""
        return Matrix3x3.chain([
            Matrix3x3.translate(center),
            Matrix3x3.rotate(angle),
            Matrix3x3.translate(center.neg()),
        ])

    def __matmul__(self, other: 'Matrix3x3') -> 'Matrix3x3':
        return Matrix3x3.multiply(self, other)

    # ========================================
    # Application
    # ========================================

    def transform(self, vector: Vector2d) -> Vector2d:
        """Apply to a point with implicit w = 1."""
        v = self.v
        return Vector2d(
            vector.x * v[0][0] + vector.y * v[0][1] + v[0][2],
            vector.x * v[1][0] + vector.y * v[1][1] + v[1][2],
        )

    def transform_points(self, points) -> np.ndarray:
        """Apply to an (N, 2) array of points in one go.

        Args:
            points: array-like of shape (N, 2). An empty input gives an
                empty (0, 2) result.

        Returns:
            float64 array of shape (N, 2)
        """
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim == 1 and pts.size == 0:
            pts = pts.reshape(0, 2)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"points must have shape (N, 2), got {pts.shape}")
        m = self.to_numpy()
        return pts @ m[:2, :2].T + m[:2, 2]

    # ========================================
    # Inversion
    # ========================================

    @staticmethod
    def _cofactor(v: Rows) -> Rows:
        return (
            (+(v[1][1] * v[2][2] - v[2][1] * v[1][2]),
             -(v[1][0] * v[2][2] - v[2][0] * v[1][2]),
             +(v[1][0] * v[2][1] - v[2][0] * v[1][1])),
            (-(v[0][1] * v[2][2] - v[2][1] * v[0][2]),
             +(v[0][0] * v[2][2] - v[2][0] * v[0][2]),
             -(v[0][0] * v[2][1] - v[2][0] * v[0][1])),
            (+(v[0][1] * v[1][2] - v[1][1] * v[0][2]),
             -(v[0][0] * v[1][2] - v[1][0] * v[0][2]),
             +(v[0][0] * v[1][1] - v[1][0] * v[0][1])),
        )

    @staticmethod
    def _transpose(v: Rows) -> Rows:
        return tuple(tuple(v[r][c] for r in range(3)) for c in range(3))

    def determinant(self) -> float:
        v = self.v
        return (v[0][0] * (v[1][1] * v[2][2] - v[2][1] * v[1][2])
                - v[0][1] * (v[1][0] * v[2][2] - v[2][0] * v[1][2])
                + v[0][2] * (v[1][0] * v[2][1] - v[2][0] * v[1][1]))

    def invert(self) -> Optional['Matrix3x3']:
        """Inverse via adjugate / determinant.

        Returns:
            The inverse, or None when the determinant is exactly zero.
            Callers must check for None.
        """
        det = self.determinant()
        if det == 0:
            return None
        adjugate = Matrix3x3._transpose(Matrix3x3._cofactor(self.v))
        return Matrix3x3(tuple(tuple(col / det for col in row) for row in adjugate))

    # ========================================
    # Projections
    # ========================================

    def to_array(self) -> Rows:
        """Rows as nested tuples."""
        return self.v

    def to_numpy(self) -> np.ndarray:
        return np.array(self.v, dtype=np.float64)

    def ctx_args(self) -> Tuple[float, float, float, float, float, float]:
        """The 6 affine coefficients in drawing-API order.

        (m00, m10, m01, m11, m02, m12), i.e. (a, b, c, d, e, f) for canvas
        setTransform or (m11, m12, m21, m22, dx, dy) for QTransform.
        """
        v = self.v
        return (v[0][0], v[1][0], v[0][1], v[1][1], v[0][2], v[1][2])

    def almost_equals(self, other: 'Matrix3x3', abs_tol: float = 1e-9) -> bool:
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)
            for row_a, row_b in zip(self.v, other.v)
            for a, b in zip(row_a, row_b)
        )


_IDENTITY = Matrix3x3((
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
))


def invert_or_raise(matrix: Matrix3x3, what: str = "r2v") -> Matrix3x3:
    """Invert a matrix, raising NotInvertibleError instead of returning None."""
    inverse = matrix.invert()
    if inverse is None:
        raise NotInvertibleError(f"{what} not invertible")
    return inverse
