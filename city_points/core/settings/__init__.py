# ========================
# file: city_points/core/settings/__init__.py
# ========================
from .errors import SettingsError, ValidationError, NotFoundError
from .model import (
    Algorithm,
    GenerationSettings,
    SimpleSpread,
    CityLikeSpread,
    UniformSpread,
    CircleSpread,
)
from .defaults import DEFAULT_SETTINGS
from .loader import load_settings, deep_merge
from .validators import validate_dict, validate_settings

__all__ = [
    "SettingsError",
    "ValidationError",
    "NotFoundError",
    "Algorithm",
    "GenerationSettings",
    "SimpleSpread",
    "CityLikeSpread",
    "UniformSpread",
    "CircleSpread",
    "DEFAULT_SETTINGS",
    "load_settings",
    "deep_merge",
    "validate_dict",
    "validate_settings",
]
