import unittest
import math

from ddt import ddt, data, unpack

from trisphere.helpers import geometry


@ddt
class TestVector(unittest.TestCase):

    lengths = [
        (geometry.Vector(3, 4, 0), 5.0),
        (geometry.Vector(1, 2, 2), 3.0),
        (geometry.Vector(0, 0, 0), 0.0),
    ]

    crosses = [
        (
            geometry.Vector(1, 0, 0),
            geometry.Vector(0, 1, 0),
            geometry.Vector(0, 0, 1),
        ),
        (
            geometry.Vector(0, 1, 0),
            geometry.Vector(1, 0, 0),
            geometry.Vector(0, 0, -1),
        ),
        (
            geometry.Vector(-8, -8, 0),
            geometry.Vector(0, -8, 8),
            geometry.Vector(-64, 64, 64),
        ),
    ]

    @data(*lengths)
    @unpack
    def test_length(self, vector, expected_length):
        self.assertAlmostEqual(vector.length, expected_length, delta=1e-9)
        self.assertAlmostEqual(vector.length_squared, expected_length ** 2, delta=1e-9)

    @data(*crosses)
    @unpack
    def test_cross(self, v1, v2, expected_vector):
        self.assertEqual(v1.cross(v2), expected_vector)

    @data(*crosses)
    @unpack
    def test_cross_is_orthogonal(self, v1, v2, _):
        c = v1.cross(v2)
        self.assertEqual(c.dot(v1), 0)
        self.assertEqual(c.dot(v2), 0)

    def test_dot(self):
        self.assertEqual(geometry.Vector(1, 2, 3).dot(geometry.Vector(4, -5, 6)), 12)

    def test_by_points(self):
        vector = geometry.Vector.by_points(geometry.Point(1, 1, 1), geometry.Point(2, 3, 4))
        self.assertEqual(vector, geometry.Vector(1, 2, 3))

    @data(
        geometry.Vector(3, 4, 0),
        geometry.Vector(-1, 7, 0.5),
        geometry.Vector(0, 0, 1e-3),
    )
    def test_normalize(self, vector):
        unit = vector.normalize()
        self.assertAlmostEqual(unit.length, 1.0, delta=1e-12)
        self.assertAlmostEqual(unit.dot(vector), vector.length, delta=1e-9)

    def test_normalize_zero_vector(self):
        with self.assertRaises(geometry.DegenerateVectorError):
            geometry.Vector(0, 0, 0).normalize()

    def test_scale_and_add(self):
        v = geometry.Vector(1, -2, 3).scale(2).add(geometry.Vector(1, 1, 1))
        self.assertEqual(v, geometry.Vector(3, -3, 7))
