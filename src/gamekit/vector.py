# gamekit/vector.py
from numbers import Real
from typing import Optional, Sequence

import numpy as np

from gamekit.constant import VectorConstant
from gamekit.math_helper import barycentric
from gamekit.vector2 import Vector2


class Vector3:
    """
    A 3D vector of single precision floats.

    Components are stored as numpy.float32, so every assignment rounds to
    32 bits and all arithmetic happens in single precision. Operators
    never raise on float edge cases: division by zero and overflow give
    Infinity/NaN as IEEE-754 prescribes.
    """
    __slots__ = ("_x", "_y", "_z")
    # numpy scalars on the left of an operator defer to our reflected methods
    __array_ufunc__ = None

    zero = VectorConstant(0, 0, 0)
    one = VectorConstant(1, 1, 1)
    unit_x = VectorConstant(1, 0, 0)
    unit_y = VectorConstant(0, 1, 0)
    unit_z = VectorConstant(0, 0, 1)
    up = VectorConstant(0, 1, 0)
    down = VectorConstant(0, -1, 0)
    # Same value as down.
    right = VectorConstant(0, -1, 0)
    left = VectorConstant(-1, 0, 0)
    forward = VectorConstant(0, 0, -1)
    backward = VectorConstant(0, 0, 1)

    def __init__(self, x, y: Optional[float] = None, z: Optional[float] = None):
        """
        Vector3(x, y, z) sets each component.
        Vector3(value) sets all three components to value.
        Vector3(vector2, z=value) takes x and y from a Vector2.
        """
        if isinstance(x, Vector2):
            if y is not None or z is None:
                raise TypeError("Vector3(Vector2, z=...) takes exactly one z value")
            self.x = x.x
            self.y = x.y
            self.z = z
        elif y is None and z is None:
            self.x = x
            self.y = x
            self.z = x
        elif y is None or z is None:
            raise TypeError("Vector3 takes one value, three values, or a Vector2 and z")
        else:
            self.x = x
            self.y = y
            self.z = z

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector3":
        """Builds a vector from any 3-element sequence or array."""
        if len(values) != 3:
            raise ValueError(f"Vector3 needs 3 components, got {len(values)}")
        return cls(values[0], values[1], values[2])

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

    @property
    def z(self) -> np.float32:
        return self._z

    @z.setter
    def z(self, value: float):
        with np.errstate(over="ignore"):
            self._z = np.float32(value)

    def copy(self) -> "Vector3":
        return Vector3(self._x, self._y, self._z)

    __copy__ = copy

    def to_array(self) -> np.ndarray:
        """Returns the components as a new (3,) float32 array."""
        return np.array([self._x, self._y, self._z], dtype=np.float32)

    @staticmethod
    def barycentric(value1: "Vector3", value2: "Vector3", value3: "Vector3",
                    amount1: float, amount2: float,
                    out: Optional["Vector3"] = None) -> "Vector3":
        """
        Returns the cartesian coordinates of a point given in barycentric
        coordinates relative to the triangle (value1, value2, value3).

        amount1 weights towards value2 and amount2 towards value3. When
        out is given the result is written into it and out is returned.
        """
        x = barycentric(value1.x, value2.x, value3.x, amount1, amount2)
        y = barycentric(value1.y, value2.y, value3.y, amount1, amount2)
        z = barycentric(value1.z, value2.z, value3.z, amount1, amount2)
        if out is None:
            return Vector3(x, y, z)
        out.x = x
        out.y = y
        out.z = z
        return out

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(self._x == other._x and self._y == other._y and self._z == other._z)

    __hash__ = None

    def __neg__(self) -> "Vector3":
        return Vector3(-self._x, -self._y, -self._z)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3(self._x + other._x, self._y + other._y, self._z + other._z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3(self._x - other._x, self._y - other._y, self._z - other._z)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            with np.errstate(all="ignore"):
                return Vector3(self._x * other._x, self._y * other._y, self._z * other._z)
        if isinstance(other, Real):
            with np.errstate(all="ignore"):
                factor = np.float32(other)
                return Vector3(self._x * factor, self._y * factor, self._z * factor)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        if not isinstance(other, Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            factor = np.float32(other)
            return Vector3(factor * self._x, factor * self._y, factor * self._z)

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            with np.errstate(all="ignore"):
                return Vector3(self._x / other._x, self._y / other._y, self._z / other._z)
        if isinstance(other, Real):
            # One reciprocal, three multiplies. Rounds differently from
            # dividing each component.
            with np.errstate(all="ignore"):
                factor = np.float32(1.0) / np.float32(other)
                return Vector3(self._x * factor, self._y * factor, self._z * factor)
        return NotImplemented

    def __repr__(self) -> str:
        return " ".join(str(c) for c in (self._x, self._y, self._z))
