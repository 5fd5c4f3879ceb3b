import math
import unittest

from vector_core import config
from vector_core.errors import DimensionMismatchError, UnsupportedDimensionError
from vector_core.math.transforms import from_polar, rotate_point, to_polar
from vector_core.math.vector import Vector


class PolarTests(unittest.TestCase):
    def test_from_polar(self) -> None:
        v = from_polar(2.0, math.pi / 2)
        self.assertTrue(v.equals(Vector.of(0.0, 2.0), 1e-15))
        self.assertEqual(from_polar(3.0, 0.0).get(), (3.0, 0.0))

    def test_to_polar(self) -> None:
        polar = to_polar(Vector.of(0.0, -2.0))
        self.assertAlmostEqual(polar.get_value(config.R), 2.0)
        self.assertAlmostEqual(polar.get_value(config.PHI), -math.pi / 2)

    def test_polar_round_trip(self) -> None:
        v = Vector.of(-1.5, 0.75)
        polar = to_polar(v)
        restored = from_polar(polar.get_value(config.R), polar.get_value(config.PHI))
        self.assertTrue(restored.equals(v, 1e-12))

    def test_to_polar_requires_2d(self) -> None:
        with self.assertRaises(UnsupportedDimensionError):
            to_polar(Vector.of(1.0, 2.0, 3.0))


class RotatePointTests(unittest.TestCase):
    def test_rotate_about_origin(self) -> None:
        point = Vector.of(2.0, 1.0)
        origin = Vector.of(1.0, 1.0)
        rotated = rotate_point(point, origin, math.pi / 2)
        self.assertTrue(rotated.equals(Vector.of(1.0, 2.0), 1e-15))
        self.assertEqual(point.get(), (2.0, 1.0))

    def test_rotate_point_dimension_rules(self) -> None:
        with self.assertRaises(UnsupportedDimensionError):
            rotate_point(Vector.of(1.0, 2.0, 3.0), Vector.of(0.0, 0.0), 1.0)
        with self.assertRaises(DimensionMismatchError):
            rotate_point(Vector.of(1.0, 2.0), Vector.of(0.0, 0.0, 0.0), 1.0)


if __name__ == "__main__":
    unittest.main()
