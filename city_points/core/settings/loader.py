# ========================
# file: city_points/core/settings/loader.py
# ========================
from __future__ import annotations
import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Union

from .defaults import DEFAULT_SETTINGS
from .errors import NotFoundError
from .model import (
    Algorithm,
    CircleSpread,
    CityLikeSpread,
    GenerationSettings,
    SimpleSpread,
    UniformSpread,
)
from .validators import validate_dict

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _build_algorithm(name: str, circle_radius: float) -> Algorithm:
    if name == "city_like":
        return CityLikeSpread()
    if name == "uniform":
        return UniformSpread()
    if name == "circle":
        return CircleSpread(radius=float(circle_radius))
    return SimpleSpread()


def load_settings(
    source: Union[str, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> GenerationSettings:
    """Load settings from a JSON path or a raw dict, merge with defaults and apply overrides.

    Args:
        source: path to a JSON file, raw dict, or None for pure defaults
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        GenerationSettings (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if not os.path.isfile(source):
            raise NotFoundError(f"settings file not found: {source}")
        data = _load_json_file(source)
        logger.debug("Loaded settings from %s", source)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path or dict")

    merged = deep_merge(DEFAULT_SETTINGS, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    return GenerationSettings(
        start_x=float(merged["start_x"]),
        start_y=float(merged["start_y"]),
        width=float(merged["width"]),
        length=float(merged["length"]),
        amount=int(merged["amount"]),
        algorithm=_build_algorithm(merged["algorithm"], merged["circle_radius"]),
        seed=None if merged["seed"] is None else int(merged["seed"]),
        use_seed=bool(merged["use_seed"]),
    )
