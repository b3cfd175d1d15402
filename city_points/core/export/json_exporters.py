# ==============================================================================
# Файл: city_points/core/export/json_exporters.py
# Назначение: Запись набора точек (и настроек, которыми он получен) в JSON.
# ==============================================================================
from __future__ import annotations
import dataclasses
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import numpy as np

from ..settings.model import GenerationSettings
from ..types import Point

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    """Убеждается, что директория для файла существует."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _default_serializer(o: Any) -> Any:
    if dataclasses.is_dataclass(o):
        return dataclasses.asdict(o)
    if isinstance(o, np.integer):
        return int(o)
    if isinstance(o, np.floating):
        return float(o)
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")


def _atomic_write_json(path: str, data: Any) -> None:
    """Атомарно записывает данные в JSON файл для предотвращения битых файлов."""
    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2, default=_default_serializer)
    os.replace(tmp_path, path)


def write_points_json(
        path: str,
        points: Iterable[Point],
        settings: Optional[GenerationSettings] = None,
        seed: Optional[int] = None,
) -> str:
    """Сохраняет точки как {"settings", "seed", "count", "points": [[x, y], ...]}."""
    pts = [[p.x, p.y] for p in points]
    data: Dict[str, Any] = {
        "settings": settings.to_dict() if settings is not None else None,
        "seed": seed,
        "count": len(pts),
        "points": pts,
    }
    _atomic_write_json(path, data)
    logger.info("Points JSON saved: %s (%d points)", path, len(pts))
    return str(Path(path).resolve())
