# gamekit/__init__.py
from gamekit.math_helper import barycentric
from gamekit.vector import Vector3
from gamekit.vector2 import Vector2

__all__ = ["Vector2", "Vector3", "barycentric"]
