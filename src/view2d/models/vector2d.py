"""Immutable 2D vector used for points in both real and view space."""
import math
import numbers
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2d:
    """2D point/vector value type.

    Used for any x/y pair across coordinate spaces:
    - Real world coordinates (y-up)
    - View pixels (y-down, origin top-left)
    - Pixel deltas from pointer movement

    Equality is exact component equality.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec"""
        return iter((self.x, self.y))

    def plus(self, v: 'Vector2d') -> 'Vector2d':
        return Vector2d(self.x + v.x, self.y + v.y)

    def minus(self, v: 'Vector2d') -> 'Vector2d':
        return Vector2d(self.x - v.x, self.y - v.y)

    def dot(self, v: 'Vector2d') -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: 'Vector2d') -> float:
        """Z component of the 3D cross product.

        A positive result means the rotation from this vector to v is
        counter-clockwise in a y-up frame. In view space (y-down) the sign
        reads the other way round.
        """
        return self.x * v.y - self.y * v.x

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    @staticmethod
    def dist_squared(p1: 'Vector2d', p2: 'Vector2d') -> float:
        return p2.minus(p1).length_squared()

    @staticmethod
    def dist(p1: 'Vector2d', p2: 'Vector2d') -> float:
        return math.sqrt(Vector2d.dist_squared(p1, p2))

    def multiply(self, s: float) -> 'Vector2d':
        return Vector2d(self.x * s, self.y * s)

    def neg(self) -> 'Vector2d':
        return Vector2d(-self.x, -self.y)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def normalize(self) -> 'Vector2d':
        """Return the unit vector pointing the same way.

        Raises:
            ZeroDivisionError: if the vector has zero length. Check
                is_zero() first.
        """
        length = self.length()
        if length == 0:
            raise ZeroDivisionError("Tried to normalize zero-vector")
        return self.multiply(1 / length)

    def rot90(self, clockwise: bool) -> 'Vector2d':
        """Rotate a quarter turn.

        clockwise=True turns clockwise in a y-up frame, False counter-clockwise.
        """
        if clockwise:
            return Vector2d(self.y, -self.x)
        return Vector2d(-self.y, self.x)

    def equals(self, v: 'Vector2d') -> bool:
        return self.x == v.x and self.y == v.y

    @staticmethod
    def lerp(start: 'Vector2d', end: 'Vector2d', t: float) -> 'Vector2d':
        """Linear interpolation; t outside [0, 1] extrapolates."""
        return start.plus(end.minus(start).multiply(t))

    # Operator sugar

    def __add__(self, v):
        if not isinstance(v, Vector2d):
            return NotImplemented
        return self.plus(v)

    def __sub__(self, v):
        if not isinstance(v, Vector2d):
            return NotImplemented
        return self.minus(v)

    def __neg__(self):
        return self.neg()

    def __mul__(self, s):
        # Scalars only, no element-wise product
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return self.multiply(s)

    __rmul__ = __mul__


ORIGIN = Vector2d(0.0, 0.0)
