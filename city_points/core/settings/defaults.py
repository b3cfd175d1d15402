# ========================
# file: city_points/core/settings/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

DEFAULT_SETTINGS: Dict[str, Any] = {
    "start_x": 0.0,
    "start_y": 0.0,
    "width": 1000.0,
    "length": 1000.0,
    "amount": 200,
    "algorithm": "simple",
    "seed": 0,
    "use_seed": False,
    # используется только алгоритмом "circle"
    "circle_radius": 400.0,
}
