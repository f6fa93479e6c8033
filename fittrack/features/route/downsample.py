"""
Track downsampling.

Index-stride sampling: keeps every Nth point by position in the list,
not by spatial spacing. Fast segments with many samples stay
proportionally denser than their share of distance.
"""

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def downsample_points(points: Sequence[T], max_points: int) -> List[T]:
    """
    Reduce points to at most max_points, preserving order.

    Keeps every Nth point with N = ceil(count / max_points). The last
    point is always kept: appended when there is room, otherwise it
    replaces the final stride sample.

    Args:
        points: Ordered points
        max_points: Upper bound on result length (>= 2)

    Returns:
        New list; a plain copy if already within the limit
    """
    if max_points < 2:
        raise ValueError("max_points must be at least 2")

    count = len(points)
    if count <= max_points:
        return list(points)

    stride = math.ceil(count / max_points)
    result = list(points[::stride])

    if (count - 1) % stride != 0:
        if len(result) < max_points:
            result.append(points[-1])
        else:
            result[-1] = points[-1]

    return result
