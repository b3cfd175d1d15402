# ==============================================================================
# Файл: city_points/core/constants.py
# Назначение: Константы алгоритмов распределения точек.
# ==============================================================================
from __future__ import annotations

# --- Uniform: размер сетки квантования по короткой оси ---
UNIFORM_GRANULARITY: int = 20000

# --- CityLike: доли точек и отступ внутреннего "ядра" ---
CITY_OUTER_SHARE: float = 0.3
CITY_INNER_SHARE: float = 0.7
CITY_INSET: float = 0.20  # с каждой стороны прямоугольника

# Число граничных якорей (4 угла + 4 середины сторон)
BOUNDARY_ANCHOR_COUNT: int = 8

# Маска для сида, полученного из текущего времени
TIME_SEED_MASK: int = 0x7FFFFFFF
