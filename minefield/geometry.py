"""
Geometry helpers
"""
import math

import numpy as np

from minefield.models import Mine


def distance(a: Mine, b: Mine) -> np.float32:
    """
    Straight line distance between two mines.

    Differences are taken in single precision, the root in double
    precision, and the result is rounded back to single precision.
    """
    dx = float(np.float32(b.x - a.x))
    dy = float(np.float32(b.y - a.y))
    return np.float32(math.sqrt(dx * dx + dy * dy))
