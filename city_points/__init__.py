# ==============================================================================
# Файл: city_points/__init__.py
# Назначение: Генерация seed-точек для диаграммы Вороного (планировка города).
# ==============================================================================
from .core.types import Point, PointSet, points_to_array
from .core.settings import (
    GenerationSettings,
    SimpleSpread,
    CityLikeSpread,
    UniformSpread,
    CircleSpread,
    load_settings,
)
from .generators.points import PointGenerator, generate

__all__ = [
    "Point",
    "PointSet",
    "points_to_array",
    "GenerationSettings",
    "SimpleSpread",
    "CityLikeSpread",
    "UniformSpread",
    "CircleSpread",
    "load_settings",
    "PointGenerator",
    "generate",
]
