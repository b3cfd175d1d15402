"""
Генерация seed-точек для планировки города.
Запуск: python run_point_generator.py [settings.json] [out.json]
"""
from __future__ import annotations
import sys, pathlib

# Убедимся, что корень проекта в sys.path (для импорта city_points/*)
ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from city_points.core.export import write_points_json
from city_points.core.settings import load_settings
from city_points.generators.points import PointGenerator
from city_points.setup_logging import setup_logging

ARTIFACTS_ROOT = ROOT / "artifacts"


def main(argv: list[str] | None = None) -> str:
    args = sys.argv[1:] if argv is None else argv
    settings_path = args[0] if len(args) > 0 else None
    out_path = args[1] if len(args) > 1 else str(ARTIFACTS_ROOT / "points.json")

    setup_logging()
    settings = load_settings(settings_path)
    generator = PointGenerator(settings)
    points = generator.generate()
    return write_points_json(out_path, points, settings=settings, seed=generator.last_seed)


if __name__ == "__main__":
    print(main())
