from __future__ import annotations
from functools import lru_cache
from typing import Tuple


@lru_cache(maxsize=None)
def center_first(width: int) -> Tuple[int, ...]:
    """
    Columns from the middle outward: N//2, N//2 - 1, N//2 + 1, N//2 - 2, ...
    For width 8 this is (4, 3, 5, 2, 6, 1, 7, 0).
    """
    order = []
    right = width // 2
    left = right - 1
    while len(order) < width:
        if right < width:
            order.append(right)
            right += 1
        if left >= 0 and len(order) < width:
            order.append(left)
            left -= 1
    return tuple(order)
