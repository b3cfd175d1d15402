# ==============================================================================
# Файл: city_points/core/types.py
# Назначение: Базовые типы данных генератора точек.
# ==============================================================================
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np


@dataclass(frozen=True)
class Point:
    """2D-координата. Сравнивается и хешируется по значению."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# Упорядоченный набор уникальных точек (результат генерации)
PointSet = List[Point]


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """Упаковывает точки в массив (N, 2) float64 для этапа Вороного."""
    data = [(p.x, p.y) for p in points]
    if not data:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(data, dtype=np.float64)
