# gamekit/math_helper.py
import numpy as np


def barycentric(value1: float, value2: float, value3: float,
                amount1: float, amount2: float) -> np.float32:
    """
    Returns the cartesian coordinate for one axis of a point given in
    barycentric coordinates relative to a triangle.

    amount1 weights towards value2, amount2 weights towards value3.
    Amounts outside [0, 1] extrapolate.
    """
    with np.errstate(all="ignore"):
        value1 = np.float32(value1)
        value2 = np.float32(value2)
        value3 = np.float32(value3)
        amount1 = np.float32(amount1)
        amount2 = np.float32(amount2)
        return value1 + (value2 - value1) * amount1 + (value3 - value1) * amount2
