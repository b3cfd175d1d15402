# ==============================================================================
# Файл: city_points/core/utils/rng.py
# Назначение: Источник случайных чисел, принадлежащий одному вызову генератора.
# Глобального состояния нет: каждый generate() создает свой PointRNG.
# ==============================================================================
from __future__ import annotations
import time
from typing import TYPE_CHECKING

import numpy as np

from ..constants import TIME_SEED_MASK

if TYPE_CHECKING:
    from ..settings.model import GenerationSettings


def seed_from_time() -> int:
    """Невоспроизводимый сид из текущего времени (режим без фиксированного сида)."""
    return time.time_ns() & TIME_SEED_MASK


def resolve_seed(settings: "GenerationSettings") -> int:
    if settings.use_seed and settings.seed is not None:
        return int(settings.seed)
    return seed_from_time()


class PointRNG:
    __slots__ = ("seed", "_gen")

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._gen = np.random.default_rng(self.seed)

    @classmethod
    def from_settings(cls, settings: "GenerationSettings") -> "PointRNG":
        return cls(resolve_seed(settings))

    def randint(self, low: int, high: int) -> int:
        """Целое из [low, high). При low == high возвращает low."""
        if high < low:
            raise ValueError(f"empty integer range [{low}, {high})")
        if high == low:
            return int(low)
        return int(self._gen.integers(low, high))

    def integers(self, low: int, high: int, size: int) -> np.ndarray:
        """Векторная версия randint: `size` целых из [low, high)."""
        if high < low:
            raise ValueError(f"empty integer range [{low}, {high})")
        if high == low:
            return np.full(size, low, dtype=np.int64)
        return self._gen.integers(low, high, size=size, dtype=np.int64)

    def random(self) -> float:
        """Float из [0, 1)."""
        return float(self._gen.random())
