# ==============================================================================
# Файл: tests/test_json_exporters.py
# Назначение: Юнит-тесты сохранения набора точек в JSON.
# ==============================================================================
import json
import os
import tempfile
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from city_points.core.export import write_points_json
from city_points.core.settings import load_settings
from city_points.generators.points import PointGenerator
from run_point_generator import main


class TestJsonExporters(unittest.TestCase):

    def test_write_generated_points(self):
        settings = load_settings({"amount": 25, "use_seed": True, "seed": 4})
        generator = PointGenerator(settings)
        points = generator.generate()

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "points.json")
            write_points_json(path, points, settings=settings, seed=generator.last_seed)

            self.assertFalse(os.path.exists(path + ".tmp"))
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)

        self.assertEqual(data["seed"], 4)
        self.assertEqual(data["count"], len(points))
        self.assertEqual(data["points"][0], [points[0].x, points[0].y])
        self.assertEqual(data["settings"]["algorithm"], "simple")

    def test_without_settings(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "points.json")
            write_points_json(path, [])
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        self.assertEqual(data, {"settings": None, "seed": None, "count": 0, "points": []})

    def test_run_script_main(self):
        with tempfile.TemporaryDirectory() as tmp:
            settings_path = os.path.join(tmp, "settings.json")
            with open(settings_path, "w", encoding="utf-8") as f:
                json.dump({"algorithm": "city_like", "amount": 100, "use_seed": True, "seed": 1}, f)
            out_path = os.path.join(tmp, "out.json")

            main([settings_path, out_path])

            with open(out_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        self.assertEqual(data["settings"]["algorithm"], "city_like")
        self.assertEqual(data["seed"], 1)
        self.assertLessEqual(data["count"], 51 + 8)


if __name__ == "__main__":
    unittest.main()
