import math
import unittest

from vector_core.errors import ImmutableVectorError
from vector_core.math import constants
from vector_core.math.algebra import angle, rotate
from vector_core.math.frozen import FrozenVector


class AngleConstantTests(unittest.TestCase):
    def test_values(self) -> None:
        self.assertEqual(constants.ANGLE_0, 0.0)
        self.assertEqual(constants.ANGLE_30, math.pi / 6)
        self.assertEqual(constants.ANGLE_45, math.pi / 4)
        self.assertEqual(constants.ANGLE_60, math.pi / 3)
        self.assertEqual(constants.ANGLE_90, math.pi / 2)
        self.assertEqual(constants.ANGLE_180, math.pi)
        self.assertEqual(constants.ANGLE_270, math.pi * 3 / 2)
        self.assertEqual(constants.ANGLE_360, math.pi * 2)

    def test_direction_aliases(self) -> None:
        self.assertEqual(constants.ANGLE_UP, constants.ANGLE_0)
        self.assertEqual(constants.ANGLE_LEFT, constants.ANGLE_90)
        self.assertEqual(constants.ANGLE_DOWN, constants.ANGLE_180)
        self.assertEqual(constants.ANGLE_RIGHT, constants.ANGLE_270)


class DirectionConstantTests(unittest.TestCase):
    def test_axis_directions(self) -> None:
        self.assertEqual(constants.LEFT.get(), (-1.0, 0.0))
        self.assertEqual(constants.RIGHT.get(), (1.0, 0.0))
        self.assertEqual(constants.UP.get(), (0.0, 1.0))
        self.assertEqual(constants.DOWN.get(), (0.0, -1.0))
        self.assertTrue(constants.ZERO.is_zero())

    def test_diagonals(self) -> None:
        c = math.cos(math.pi / 4)
        s = math.sin(math.pi / 4)
        self.assertEqual(constants.UP_LEFT.get(), (-c, s))
        self.assertEqual(constants.UP_RIGHT.get(), (c, s))
        self.assertEqual(constants.DOWN_LEFT.get(), (-c, -s))
        self.assertEqual(constants.DOWN_RIGHT.get(), (c, -s))
        for diagonal in (constants.UP_LEFT, constants.UP_RIGHT, constants.DOWN_LEFT, constants.DOWN_RIGHT):
            self.assertTrue(diagonal.is_normalized())

    def test_directions_are_frozen(self) -> None:
        for direction in (constants.LEFT, constants.RIGHT, constants.UP, constants.DOWN, constants.ZERO):
            self.assertIsInstance(direction, FrozenVector)
        with self.assertRaises(ImmutableVectorError):
            constants.RIGHT.scale(2.0)
        with self.assertRaises(ImmutableVectorError):
            constants.ZERO.set_null()
        self.assertEqual(constants.RIGHT.get(), (1.0, 0.0))

    def test_directions_compose_with_algebra(self) -> None:
        self.assertTrue(rotate(constants.RIGHT, constants.ANGLE_90).equals(constants.UP, 1e-15))
        self.assertAlmostEqual(angle(constants.UP_RIGHT, constants.UP_LEFT), constants.ANGLE_90)


if __name__ == "__main__":
    unittest.main()
