import unittest
import math

from ddt import ddt, data, unpack

from trisphere.helpers import geometry


@ddt
class TestPoint(unittest.TestCase):

    distances = [
        (geometry.Point(0, 0, 0), geometry.Point(0, 0, 0), 0.0),
        (geometry.Point(0, 8, 0), geometry.Point(-8, 0, 0), math.sqrt(128)),
        (geometry.Point(1, 2, 3), geometry.Point(4, 6, 3), 5.0),
    ]

    @data(*distances)
    @unpack
    def test_distance(self, p1, p2, expected_distance):
        self.assertAlmostEqual(geometry.distance(p1, p2), expected_distance, delta=1e-12)

    @data(*distances)
    @unpack
    def test_distance_is_symmetric(self, p1, p2, _):
        self.assertEqual(geometry.distance(p1, p2), geometry.distance(p2, p1))

    def test_add_scaled(self):
        point = geometry.Point(1, 1, 1).add_scaled(geometry.Vector(1, 0, -2), 2.5)
        self.assertEqual(point, geometry.Point(3.5, 1, -4))

    def test_add_vector(self):
        point = geometry.Point(1, 1, 1).add_vector(geometry.Vector(1, 2, 3))
        self.assertEqual(point, geometry.Point(2, 3, 4))

    def test_equality_is_componentwise(self):
        self.assertEqual(geometry.Point(1, 2, 3), geometry.Point(1.0, 2.0, 3.0))
        self.assertNotEqual(geometry.Point(1, 2, 3), geometry.Point(1, 2, 4))
        self.assertEqual(hash(geometry.Point(1, 2, 3)), hash(geometry.Point(1, 2, 3)))

    def test_immutable(self):
        point = geometry.Point(1, 2, 3)
        with self.assertRaises(AttributeError):
            point.x = 5
        self.assertEqual(point.x, 1)
