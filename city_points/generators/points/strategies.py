# ==============================================================================
# Файл: city_points/generators/points/strategies.py
# Назначение: Алгоритмы распределения seed-точек (Simple, CityLike, Uniform, Circle).
# Каждая стратегия: fn(settings, rng) -> List[Point]. Настройки не изменяются.
# ==============================================================================
from __future__ import annotations
import math
from typing import Callable, Dict, List, Tuple

from ...core.constants import CITY_INNER_SHARE, CITY_INSET, CITY_OUTER_SHARE
from ...core.settings.model import (
    CircleSpread,
    CityLikeSpread,
    GenerationSettings,
    SimpleSpread,
    UniformSpread,
)
from ...core.types import Point
from ...core.utils.geometry import (
    integer_range,
    quantization_steps,
    random_point_in_circle,
)
from ...core.utils.rng import PointRNG

Strategy = Callable[[GenerationSettings, PointRNG], List[Point]]


def _fit_range(inner: Tuple[int, int], outer: Tuple[int, int]) -> Tuple[int, int]:
    # вырожденная вставка без целых точек прижимается к внешнему диапазону
    low = min(max(inner[0], outer[0]), outer[1] - 1)
    high = max(min(inner[1], outer[1]), low)
    return low, high


def _draw_points(
        rng: PointRNG, amount: int, x_range: Tuple[int, int], y_range: Tuple[int, int]
) -> List[Point]:
    xs = rng.integers(x_range[0], x_range[1], amount)
    ys = rng.integers(y_range[0], y_range[1], amount)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def simple_spread(settings: GenerationSettings, rng: PointRNG) -> List[Point]:
    """Целочисленные координаты из [start, start + extent) по каждой оси."""
    return _draw_points(
        rng,
        settings.amount,
        integer_range(settings.start_x, settings.width),
        integer_range(settings.start_y, settings.length),
    )


def city_like_spread(settings: GenerationSettings, rng: PointRNG) -> List[Point]:
    """
    Внешний слой: 30% точек по всему прямоугольнику.
    Внутренний слой: 70% от внешнего количества в прямоугольнике,
    отступающем на 20% от каждой стороны. Порядок: внешние, затем внутренние.
    """
    outer_amount = int(math.floor(settings.amount * CITY_OUTER_SHARE))
    outer = settings.with_region(
        settings.start_x, settings.start_y, settings.width, settings.length, outer_amount
    )
    points = simple_spread(outer, rng)

    inner_amount = int(math.floor(outer_amount * CITY_INNER_SHARE))
    inner = settings.with_region(
        settings.start_x + settings.width * CITY_INSET,
        settings.start_y + settings.length * CITY_INSET,
        settings.width * (1 - 2 * CITY_INSET),
        settings.length * (1 - 2 * CITY_INSET),
        inner_amount,
    )
    points.extend(_draw_points(
        rng,
        inner.amount,
        _fit_range(
            integer_range(inner.start_x, inner.width),
            integer_range(outer.start_x, outer.width),
        ),
        _fit_range(
            integer_range(inner.start_y, inner.length),
            integer_range(outer.start_y, outer.length),
        ),
    ))
    return points


def uniform_spread(settings: GenerationSettings, rng: PointRNG) -> List[Point]:
    """Точки на сетке квантования: coordinate = extent * index / steps."""
    width = settings.width
    length = settings.length
    width_steps, length_steps = quantization_steps(width, length)

    # start используется как нижняя граница индекса сетки, а не как сдвиг
    ix = rng.integers(int(settings.start_x), width_steps, settings.amount)
    iy = rng.integers(int(settings.start_y), length_steps, settings.amount)
    return [
        Point(width * int(i) / width_steps, length * int(j) / length_steps)
        for i, j in zip(ix, iy)
    ]


def circle_spread(settings: GenerationSettings, rng: PointRNG) -> List[Point]:
    """Равномерно по площади круга с центром (width/2, length/2). start_x/start_y не учитываются."""
    radius = float(settings.algorithm.radius)
    origin = Point(settings.width / 2, settings.length / 2)
    return [random_point_in_circle(origin, radius, rng) for _ in range(settings.amount)]


STRATEGIES: Dict[type, Strategy] = {
    SimpleSpread:   simple_spread,
    CityLikeSpread: city_like_spread,
    UniformSpread:  uniform_spread,
    CircleSpread:   circle_spread,
}
