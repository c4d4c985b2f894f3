"""Seeded, repeatable offer selection."""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

# Linear congruential generator constants shared with the browser front end.
_LCG_MULTIPLIER = 9301
_LCG_INCREMENT = 49297
_LCG_MODULUS = 233280

DEFAULT_DISPLAY_COUNT = 3
INITIAL_SEED = 1


def select(items: Sequence[T], count: int, seed: Optional[int]) -> List[T]:
    """Shuffle a copy of ``items`` with a seeded Fisher-Yates pass and take ``count``.

    Identical ``(items, count, seed)`` always produce the same list. A seed of
    0 or ``None`` behaves like 1. ``items`` is never mutated.
    """
    arr = list(items)
    state = seed or INITIAL_SEED
    for i in range(len(arr) - 1, 0, -1):
        state = (state * _LCG_MULTIPLIER + _LCG_INCREMENT) % _LCG_MODULUS
        j = math.floor((state / _LCG_MODULUS) * (i + 1))
        arr[i], arr[j] = arr[j], arr[i]
    return arr[: max(0, count)]


def rotate(catalog: Sequence[T], seed: Optional[int], count: int = DEFAULT_DISPLAY_COUNT) -> List[T]:
    """Default offers shown for a rotation seed before any plan is submitted."""
    return select(catalog, count, seed)
