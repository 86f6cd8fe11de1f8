# gamekit/vector2.py
from numbers import Real
from typing import Optional

import numpy as np

from gamekit.constant import VectorConstant


class Vector2:
    """
    A 2D vector of single precision floats.
    """
    __slots__ = ("_x", "_y")
    __array_ufunc__ = None

    zero = VectorConstant(0, 0)
    one = VectorConstant(1, 1)
    unit_x = VectorConstant(1, 0)
    unit_y = VectorConstant(0, 1)

    def __init__(self, x: float, y: Optional[float] = None):
        if y is None:
            y = x
        self.x = x
        self.y = y

    @property
    def x(self) -> np.float32:
        return self._x

    @x.setter
    def x(self, value: float):
        with np.errstate(over="ignore"):
            self._x = np.float32(value)

    @property
    def y(self) -> np.float32:
        return self._y

    @y.setter
    def y(self, value: float):
        with np.errstate(over="ignore"):
            self._y = np.float32(value)

    def copy(self) -> "Vector2":
        return Vector2(self._x, self._y)

    __copy__ = copy

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return bool(self._x == other._x and self._y == other._y)

    __hash__ = None

    def __neg__(self) -> "Vector2":
        return Vector2(-self._x, -self._y)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector2(self._x + other._x, self._y + other._y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector2(self._x - other._x, self._y - other._y)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            with np.errstate(all="ignore"):
                return Vector2(self._x * other._x, self._y * other._y)
        if isinstance(other, Real):
            with np.errstate(all="ignore"):
                factor = np.float32(other)
                return Vector2(self._x * factor, self._y * factor)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector2":
        if not isinstance(other, Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            factor = np.float32(other)
            return Vector2(factor * self._x, factor * self._y)

    def __truediv__(self, other):
        if isinstance(other, Vector2):
            with np.errstate(all="ignore"):
                return Vector2(self._x / other._x, self._y / other._y)
        if isinstance(other, Real):
            with np.errstate(all="ignore"):
                factor = np.float32(1.0) / np.float32(other)
                return Vector2(self._x * factor, self._y * factor)
        return NotImplemented

    def __repr__(self) -> str:
        return " ".join(str(c) for c in (self._x, self._y))
