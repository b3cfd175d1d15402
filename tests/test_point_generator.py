# ==============================================================================
# Файл: tests/test_point_generator.py
# Назначение: Юнит-тесты диспетчера generate(): сид, якоря, дубли, настройки.
# ==============================================================================
import math
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from city_points.core.settings import (
    CircleSpread,
    CityLikeSpread,
    GenerationSettings,
    SimpleSpread,
    UniformSpread,
    ValidationError,
)
from city_points.core.types import Point
from city_points.core.utils.rng import PointRNG
from city_points.generators.points import PointGenerator, boundary_anchors, generate


def _settings(algorithm=None, amount=100, **kw) -> GenerationSettings:
    params = dict(
        start_x=10.0,
        start_y=20.0,
        width=400.0,
        length=300.0,
        amount=amount,
        algorithm=algorithm if algorithm is not None else SimpleSpread(),
        seed=1234,
        use_seed=True,
    )
    params.update(kw)
    return GenerationSettings(**params)


class _UnknownSpread:
    name = "unknown"


class TestPointGenerator(unittest.TestCase):
    """Проверки контракта generate()."""

    RECT_ALGORITHMS = (SimpleSpread(), CityLikeSpread(), UniformSpread())

    def test_fixed_seed_is_deterministic(self):
        for algo in self.RECT_ALGORITHMS + (CircleSpread(radius=100.0),):
            s = _settings(algo)
            self.assertEqual(generate(s), generate(s), f"{algo.name} is not deterministic")

    def test_different_seeds_differ(self):
        a = generate(_settings(seed=1))
        b = generate(_settings(seed=2))
        self.assertNotEqual(a, b)

    def test_boundary_anchors_are_last_eight(self):
        s = _settings()
        points = generate(s)
        expected = [
            Point(10.0, 20.0),
            Point(410.0, 20.0),
            Point(10.0, 320.0),
            Point(410.0, 320.0),
            Point(210.0, 20.0),
            Point(210.0, 320.0),
            Point(10.0, 170.0),
            Point(410.0, 170.0),
        ]
        self.assertEqual(points[-8:], expected)
        self.assertEqual(boundary_anchors(s), expected)

    def test_anchors_present_with_zero_amount(self):
        for algo in self.RECT_ALGORITHMS:
            s = _settings(algo, amount=0)
            self.assertEqual(generate(s), boundary_anchors(s))

    def test_circle_has_no_anchors_and_stays_in_radius(self):
        s = _settings(CircleSpread(radius=120.0), amount=500)
        points = generate(s)
        self.assertEqual(len(points), 500)
        cx, cy = s.width / 2, s.length / 2
        for p in points:
            self.assertLessEqual(math.hypot(p.x - cx, p.y - cy), 120.0 + 1e-9)
        for anchor in boundary_anchors(s):
            self.assertNotIn(anchor, points)

    def test_sampled_part_has_no_duplicates(self):
        # маленькая область: дубли при сэмплировании гарантированы
        s = _settings(start_x=0.0, start_y=0.0, width=3.0, length=3.0, amount=200)
        points = generate(s)
        sampled = points[:-8]
        self.assertEqual(len(sampled), len(set(sampled)))
        self.assertLessEqual(len(sampled), 9)

    def test_simple_and_city_like_bounds(self):
        for algo in (SimpleSpread(), CityLikeSpread()):
            s = _settings(algo, amount=1000)
            for p in generate(s)[:-8]:
                self.assertTrue(10.0 <= p.x < 410.0, p)
                self.assertTrue(20.0 <= p.y < 320.0, p)

    def test_fractional_origin_bounds(self):
        for algo in (SimpleSpread(), CityLikeSpread()):
            s = _settings(algo, amount=400, start_x=10.5, start_y=20.5, width=5.0, length=5.0)
            for p in generate(s)[:-8]:
                self.assertTrue(10.5 <= p.x < 15.5, p)
                self.assertTrue(20.5 <= p.y < 25.5, p)

    def test_settings_unchanged_after_call(self):
        for algo in self.RECT_ALGORITHMS:
            s = _settings(algo)
            before = s.to_dict()
            generate(s)
            self.assertEqual(s.to_dict(), before)

    def test_explicit_rng_is_used(self):
        s = _settings(use_seed=False, seed=None)
        a = generate(s, PointRNG(99))
        b = generate(s, PointRNG(99))
        self.assertEqual(a, b)

    def test_unseeded_generation_records_seed(self):
        gen = PointGenerator(_settings(use_seed=False, seed=None))
        gen.generate()
        self.assertIsInstance(gen.last_seed, int)

    def test_last_seed_matches_fixed_seed(self):
        gen = PointGenerator(_settings(seed=777))
        gen.generate()
        self.assertEqual(gen.last_seed, 777)

    def test_unknown_algorithm_raises_value_error(self):
        with self.assertRaises(ValueError):
            generate(_settings(_UnknownSpread()))

    def test_invalid_settings_rejected(self):
        bad = [
            _settings(width=0.0),
            _settings(length=-5.0),
            _settings(amount=-1),
            _settings(CircleSpread(radius=0.0)),
            _settings(use_seed=True, seed=None),
        ]
        for s in bad:
            with self.assertRaises(ValidationError):
                generate(s)


if __name__ == '__main__':
    unittest.main()
