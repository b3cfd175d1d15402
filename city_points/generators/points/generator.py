# ==============================================================================
# Файл: city_points/generators/points/generator.py
# Назначение: Точка входа генерации seed-точек для диаграммы Вороного.
# Поток: настройки -> стратегия -> удаление дублей -> граничные якоря.
# ==============================================================================
from __future__ import annotations
import logging
import time
from typing import List, Optional

from ...core.settings.model import GenerationSettings
from ...core.settings.validators import validate_settings
from ...core.types import Point
from ...core.utils.dedup import filter_duplicates
from ...core.utils.rng import PointRNG
from .strategies import STRATEGIES

logger = logging.getLogger(__name__)


def boundary_anchors(settings: GenerationSettings) -> List[Point]:
    """4 угла и 4 середины сторон прямоугольника области генерации."""
    sx, sy = settings.start_x, settings.start_y
    width, length = settings.width, settings.length
    half_width = width / 2
    half_length = length / 2
    return [
        Point(sx, sy),
        Point(sx + width, sy),
        Point(sx, sy + length),
        Point(sx + width, sy + length),
        Point(sx + half_width, sy),
        Point(sx + half_width, sy + length),
        Point(sx, sy + half_length),
        Point(sx + width, sy + half_length),
    ]


class PointGenerator:
    def __init__(self, settings: GenerationSettings):
        self.settings = settings
        self.last_seed: Optional[int] = None

    def generate(self, rng: Optional[PointRNG] = None) -> List[Point]:
        settings = self.settings
        validate_settings(settings)

        strategy = STRATEGIES.get(type(settings.algorithm))
        if strategy is None:
            raise ValueError(f"Unknown point algorithm: {settings.algorithm!r}")

        if rng is None:
            rng = PointRNG.from_settings(settings)
        self.last_seed = rng.seed

        t0 = time.perf_counter()
        points = filter_duplicates(strategy(settings, rng))
        sampled = len(points)

        if not settings.is_circular:
            points.extend(boundary_anchors(settings))

        logger.info(
            f"Точки '{settings.algorithm.name}' сгенерированы: {sampled} (+{len(points) - sampled} граничных), "
            f"seed={rng.seed}, {(time.perf_counter() - t0) * 1000:.1f} мс."
        )
        return points


def generate(settings: GenerationSettings, rng: Optional[PointRNG] = None) -> List[Point]:
    return PointGenerator(settings).generate(rng)
