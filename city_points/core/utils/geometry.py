# ==============================================================================
# Файл: city_points/core/utils/geometry.py
# Назначение: Геометрические помощники для стратегий распределения точек.
# ==============================================================================
from __future__ import annotations
import math
from typing import TYPE_CHECKING, Tuple

from ..constants import UNIFORM_GRANULARITY
from ..types import Point

if TYPE_CHECKING:
    from .rng import PointRNG


def integer_range(start: float, extent: float) -> Tuple[int, int]:
    """Целые из [start, start + extent) как полуинтервал [low, high)."""
    return math.ceil(start), math.ceil(start + extent)


def quantization_steps(
        width: float, length: float, granularity: int = UNIFORM_GRANULARITY
) -> Tuple[int, int]:
    """
    Число шагов сетки по (width, length). Короткая ось получает `granularity`
    шагов, длинная - пропорционально больше, чтобы физический шаг совпадал.
    При width == length обе оси получают ровно `granularity`.
    """
    if width > length:
        return int(math.floor(granularity * width / length)), granularity
    return granularity, int(math.floor(granularity * length / width))


def random_point_in_circle(center: Point, radius: float, rng: "PointRNG") -> Point:
    """Точка, равномерно распределенная по площади круга."""
    theta = rng.random() * 2.0 * math.pi
    # sqrt: иначе точки скапливаются у центра
    r = radius * math.sqrt(rng.random())
    return Point(center.x + r * math.cos(theta), center.y + r * math.sin(theta))
