"""
Geometry value types: points, axis aligned rectangles and affine transforms.

Each type provides a static ``equals(left, right)`` predicate that compares components with
:func:`~infinity_utils.gmath.is_equal_eps`, and treats two ``None`` values as equal.
"""

import numpy as np
from .gmath import is_equal_eps
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Optional, Tuple


def _none_check(left, right):
    """Returns True/False if at least one side is None, otherwise None (meaning the caller must compare components)"""
    if left is None or right is None:
        return left is None and right is None
    return None


class Point:
    """An immutable 2D point"""

    __slots__ = ('_x', '_y')

    def __init__(self, x: 'float' = 0.0, y: 'float' = 0.0):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> 'float':
        return self._x

    @property
    def y(self) -> 'float':
        return self._y

    def translated(self, dx: 'float', dy: 'float') -> 'Point':
        return Point(self._x + dx, self._y + dy)

    def as_tuple(self) -> 'Tuple[float, float]':
        return self._x, self._y

    @staticmethod
    def equals(left: 'Optional[Point]', right: 'Optional[Point]', eps: 'Optional[float]' = None) -> 'bool':
        checked = _none_check(left, right)
        if checked is not None:
            return checked
        return is_equal_eps(left._x, right._x, eps) and is_equal_eps(left._y, right._y, eps)

    def __repr__(self):
        return "Point(%r, %r)" % (self._x, self._y)


class Rect:
    """An immutable axis aligned rectangle given by its top-left corner and its size"""

    __slots__ = ('_x', '_y', '_width', '_height')

    def __init__(self, x: 'float' = 0.0, y: 'float' = 0.0, width: 'float' = 0.0, height: 'float' = 0.0):
        self._x = float(x)
        self._y = float(y)
        self._width = float(width)
        self._height = float(height)

    @property
    def x(self) -> 'float':
        return self._x

    @property
    def y(self) -> 'float':
        return self._y

    @property
    def width(self) -> 'float':
        return self._width

    @property
    def height(self) -> 'float':
        return self._height

    def is_empty(self) -> 'bool':
        """A rectangle with no area (zero or negative width/height) is empty"""
        return self._width <= 0 or self._height <= 0

    def contains_point(self, point: 'Point') -> 'bool':
        """Inclusive of the edges"""
        return self._x <= point.x <= self._x + self._width and self._y <= point.y <= self._y + self._height

    def translated(self, dx: 'float', dy: 'float') -> 'Rect':
        return Rect(self._x + dx, self._y + dy, self._width, self._height)

    @staticmethod
    def equals(left: 'Optional[Rect]', right: 'Optional[Rect]', eps: 'Optional[float]' = None) -> 'bool':
        checked = _none_check(left, right)
        if checked is not None:
            return checked
        return is_equal_eps(left._x, right._x, eps) and is_equal_eps(left._y, right._y, eps) \
            and is_equal_eps(left._width, right._width, eps) and is_equal_eps(left._height, right._height, eps)

    def __repr__(self):
        return "Rect(%r, %r, %r, %r)" % (self._x, self._y, self._width, self._height)


class Transform:
    """
    An immutable 2D affine transform.

    The six components map a point (x, y) to::

        x' = sx * x + shx * y + tx
        y' = shy * x + sy * y + ty

    and are stored as a 3x3 homogeneous numpy matrix.
    """

    __slots__ = ('_matrix',)

    def __init__(self, sx: 'float' = 1.0, shy: 'float' = 0.0, shx: 'float' = 0.0, sy: 'float' = 1.0,
        tx: 'float' = 0.0, ty: 'float' = 0.0):
        self._matrix = np.array([
            [sx, shx, tx],
            [shy, sy, ty],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)
        self._matrix.setflags(write=False)

    @classmethod
    def from_matrix(cls, matrix: 'np.ndarray') -> 'Transform':
        """Builds a transform from a 3x3 (or 2x3) matrix, ignoring any projective row"""
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.shape not in ((3, 3), (2, 3)):
            raise ValueError("Transform matrix must be of shape (3, 3) or (2, 3), not %s" % repr(matrix.shape))
        return cls(matrix[0, 0], matrix[1, 0], matrix[0, 1], matrix[1, 1], matrix[0, 2], matrix[1, 2])

    def components(self) -> 'Tuple[float, float, float, float, float, float]':
        """Returns (sx, shy, shx, sy, tx, ty)"""
        m = self._matrix
        return float(m[0, 0]), float(m[1, 0]), float(m[0, 1]), float(m[1, 1]), float(m[0, 2]), float(m[1, 2])

    def to_matrix(self) -> 'np.ndarray':
        """Returns a writable copy of the 3x3 homogeneous matrix"""
        return self._matrix.copy()

    def is_identity(self, eps: 'Optional[float]' = None) -> 'bool':
        return Transform.equals(self, Transform(), eps)

    def multiplied(self, other: 'Transform') -> 'Transform':
        """Returns the transform applying `self` first, then `other`"""
        return Transform.from_matrix(other._matrix @ self._matrix)

    def map_point(self, point: 'Point') -> 'Point':
        x, y, _ = self._matrix @ np.array([point.x, point.y, 1.0])
        return Point(x, y)

    @staticmethod
    def equals(left: 'Optional[Transform]', right: 'Optional[Transform]', eps: 'Optional[float]' = None) -> 'bool':
        checked = _none_check(left, right)
        if checked is not None:
            return checked
        return all(is_equal_eps(a, b, eps) for a, b in zip(left.components(), right.components()))

    def __repr__(self):
        return "Transform(%r, %r, %r, %r, %r, %r)" % self.components()
