import math
import logging

from trisphere import settings


logger = logging.getLogger(__name__)


class DegenerateVectorError(ArithmeticError):
    pass


class Point:
    __slots__ = ("x", "y", "z")

    def __init__(self, x, y, z):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", z)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self):
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"

    def add_vector(self, vector):
        return Point(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def add_scaled(self, vector, scalar):
        return Point(
            self.x + vector.x * scalar,
            self.y + vector.y * scalar,
            self.z + vector.z * scalar,
        )

    def distance_to(self, other):
        return Vector.by_points(self, other).length


def distance(p1, p2):
    return p1.distance_to(p2)


class Vector(Point):
    __slots__ = ()

    @classmethod
    def by_points(cls, p1, p2):
        return cls(
            p2.x - p1.x,
            p2.y - p1.y,
            p2.z - p1.z,
        )

    @classmethod
    def from_point(cls, point):
        return cls(point.x, point.y, point.z)

    @property
    def length_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def length(self):
        return math.sqrt(self.length_squared)

    def normalize(self):
        l = self.length
        if l == 0:
            raise DegenerateVectorError("Cannot normalize a zero-length vector")
        return Vector(
            self.x / l,
            self.y / l,
            self.z / l
        )

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def scale(self, scalar):
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def add(self, other):
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)


class Line:
    def __init__(self, point, vector):
        self.point = point
        self.vector = vector

    def point_at(self, t):
        return self.point.add_scaled(self.vector, t)


class Plane:
    """
    Plane given in normal form: all points p with normal . p == offset.
    The normal does not have to be a unit vector.
    """

    def __init__(self, normal, offset):
        self.normal = normal
        self.offset = offset

    def contains_point(self, point, tolerance=1e-6):
        return abs(self.normal.dot(point) - self.offset) <= tolerance * max(1.0, self.normal.length)

    def intersect_with_plane(self, other, epsilon=None):
        """
        Returns the line common to both planes, or None when the planes are
        parallel or coincident (squared length of the direction <= epsilon).

        The direction of the returned line is n1 x n2, not normalized.
        """
        if epsilon is None:
            epsilon = settings.EPSILON

        direction = self.normal.cross(other.normal)
        direction_sq = direction.length_squared

        if direction_sq <= epsilon:
            return None

        p0 = other.normal.cross(direction).scale(self.offset) \
            .add(direction.cross(self.normal).scale(other.offset)) \
            .scale(1.0 / direction_sq)

        return Line(Point(p0.x, p0.y, p0.z), direction)


class Quaternion:
    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    @classmethod
    def from_unit_vectors(cls, v_from, v_to):
        """
        Shortest rotation taking unit vector v_from onto unit vector v_to.
        Antiparallel vectors rotate half a turn around any perpendicular axis.
        """
        r = v_from.dot(v_to) + 1

        if r < 0.000001:
            r = 0
            if abs(v_from.x) > abs(v_from.z):
                x, y, z = -v_from.y, v_from.x, 0
            else:
                x, y, z = 0, -v_from.z, v_from.y
        else:
            axis = v_from.cross(v_to)
            x, y, z = axis.x, axis.y, axis.z

        return cls(x, y, z, r).normalize()

    @property
    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self):
        l = self.length
        return Quaternion(self.x / l, self.y / l, self.z / l, self.w / l)

    def rotate(self, vector):
        q = Vector(self.x, self.y, self.z)
        t = q.cross(vector).scale(2)
        return vector.add(t.scale(self.w)).add(q.cross(t))

    def as_tuple(self):
        return self.x, self.y, self.z, self.w


class Circle:
    reference_normal = Vector(0, 0, 1)

    def __init__(self, exists, center=None, radius=0.0, normal=None):
        self.exists = exists
        self.center = center if center is not None else Point(0, 0, 0)
        self.radius = radius
        self.normal = normal if normal is not None else self.reference_normal

    @classmethod
    def none(cls):
        return cls(False)

    @property
    def orientation(self):
        return Quaternion.from_unit_vectors(self.reference_normal, self.normal)

    def point_at(self, angle):
        """Point on the circle, angle measured in the circle plane."""
        offset = Vector(math.cos(angle), math.sin(angle), 0).scale(self.radius)
        return self.center.add_vector(self.orientation.rotate(offset))

    def to_dict(self):
        if not self.exists:
            return {"exists": False}
        return {
            "exists": True,
            "center": tuple(self.center),
            "radius": self.radius,
            "normal": tuple(self.normal),
            "orientation": self.orientation.as_tuple(),
        }


class Sphere:
    def __init__(self, center, radius):
        self.center = center
        self.radius = radius

    def contains_point(self, point, tolerance=1e-6):
        return abs(self.center.distance_to(point) - self.radius) <= tolerance

    def radical_plane(self, other):
        """
        Plane of points with equal power with respect to both spheres.
        Points on both surfaces always lie on it.
        """
        c1 = Vector.from_point(self.center)
        c2 = Vector.from_point(other.center)

        normal = Vector.by_points(self.center, other.center)
        offset = (self.radius * self.radius - other.radius * other.radius
                  - c1.length_squared + c2.length_squared) / 2

        return Plane(normal, offset)

    def intersect_with_sphere(self, other):
        c1, r1 = self.center, self.radius
        c2, r2 = other.center, other.radius

        d = distance(c1, c2)

        if d >= r1 + r2 or d <= abs(r1 - r2) or d == 0:
            logger.debug("Spheres %r and %r do not meet in a circle", self, other)
            return Circle.none()

        a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
        h = math.sqrt(max(0, r1 * r1 - a * a))

        # rounding on a near-tangent pair
        if h == 0:
            return Circle.none()

        direction = Vector.by_points(c1, c2).normalize()
        center = c1.add_scaled(direction, a)

        return Circle(True, center, h, direction)

    def intersect_with_line(self, line, epsilon=None):
        if epsilon is None:
            epsilon = settings.EPSILON

        delta = Vector.by_points(self.center, line.point)

        A = line.vector.length_squared
        if A == 0:
            raise DegenerateVectorError("Line has a zero-length direction")

        B = 2.0 * delta.dot(line.vector)
        C = delta.length_squared - self.radius * self.radius

        D = B * B - 4 * A * C

        # NaN discriminant from non-finite radii misses as well
        if not D >= -epsilon:
            logger.debug("Line misses sphere %r (discriminant %s)", self, D)
            return ()

        if abs(D) <= epsilon:
            return line.point_at(-B / (2.0 * A)),

        t1 = (-B + math.sqrt(D)) / (2.0 * A)
        t2 = (-B - math.sqrt(D)) / (2.0 * A)

        return line.point_at(t1), line.point_at(t2)

    def to_dict(self):
        return {"center": tuple(self.center), "radius": self.radius}

    def __repr__(self):
        return f"Sphere({self.center!r}, {self.radius!r})"
