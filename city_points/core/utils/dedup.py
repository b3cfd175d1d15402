# city_points/core/utils/dedup.py
from __future__ import annotations
from typing import Iterable, List

from ..types import Point


def filter_duplicates(points: Iterable[Point]) -> List[Point]:
    """Убирает повторы по значению, сохраняя порядок первых вхождений."""
    out: List[Point] = []
    seen = set()
    for p in points:
        if p in seen:
            continue
        seen.add(p)
        out.append(p)
    return out
