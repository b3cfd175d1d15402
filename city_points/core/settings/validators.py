# ========================
# file: city_points/core/settings/validators.py
# ========================
from __future__ import annotations
from numbers import Integral, Real
from typing import Any, Dict

from .errors import ValidationError
from .model import (
    CircleSpread,
    CityLikeSpread,
    GenerationSettings,
    SimpleSpread,
    UniformSpread,
)
from ..utils.geometry import integer_range, quantization_steps

ALGORITHM_NAMES = ("simple", "city_like", "uniform", "circle")


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Checks a raw settings dict before it is turned into GenerationSettings.

    Raises ValidationError on the first failing check.
    """
    for key in ("start_x", "start_y", "width", "length", "circle_radius"):
        _require(_is_number(cfg.get(key)), f"settings.{key} must be a number")
    _require(
        isinstance(cfg.get("amount"), Integral) and not isinstance(cfg.get("amount"), bool),
        "settings.amount must be an integer",
    )
    algo = cfg.get("algorithm")
    _require(
        algo in ALGORITHM_NAMES,
        f"settings.algorithm must be one of {', '.join(ALGORITHM_NAMES)}",
    )
    _require(isinstance(cfg.get("use_seed"), bool), "settings.use_seed must be bool")
    seed = cfg.get("seed")
    _require(
        seed is None or (isinstance(seed, Integral) and not isinstance(seed, bool)),
        "settings.seed must be an integer or null",
    )


def validate_settings(settings: GenerationSettings) -> None:
    """Проверяет настройки до начала генерации. Ничего не сэмплирует."""
    _require(float(settings.width) > 0.0, "width must be > 0")
    _require(float(settings.length) > 0.0, "length must be > 0")
    _require(
        isinstance(settings.amount, Integral) and not isinstance(settings.amount, bool),
        "amount must be an integer",
    )
    _require(settings.amount >= 0, "amount must be >= 0")

    if settings.use_seed:
        _require(settings.seed is not None, "seed is required when use_seed is set")
        _require(
            isinstance(settings.seed, Integral) and not isinstance(settings.seed, bool),
            "seed must be an integer",
        )
        _require(settings.seed >= 0, "seed must be >= 0")

    algo = settings.algorithm
    if isinstance(algo, CircleSpread):
        _require(float(algo.radius) > 0.0, "circle radius must be > 0")
    elif isinstance(algo, (SimpleSpread, CityLikeSpread)):
        # в прямоугольнике должна быть хотя бы одна целая точка по каждой оси
        low_x, high_x = integer_range(settings.start_x, settings.width)
        low_y, high_y = integer_range(settings.start_y, settings.length)
        _require(low_x < high_x, "area must contain an integer x coordinate")
        _require(low_y < high_y, "area must contain an integer y coordinate")
    elif isinstance(algo, UniformSpread):
        # индекс сетки берется из [start, steps): старт не может превышать число шагов
        width_steps, length_steps = quantization_steps(settings.width, settings.length)
        _require(
            int(settings.start_x) <= width_steps,
            f"start_x must be <= {width_steps} for uniform spread",
        )
        _require(
            int(settings.start_y) <= length_steps,
            f"start_y must be <= {length_steps} for uniform spread",
        )