import math
import logging
import numbers

from trisphere import settings
from trisphere.helpers import geometry
from trisphere.helpers.trilateration import trilaterate, canonical_order


logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    pass


class GeometryResult:
    def __init__(self, spheres, circle, points):
        self.spheres = tuple(spheres)
        self.circle = circle
        self.points = tuple(points)

    @property
    def radii(self):
        return tuple(sphere.radius for sphere in self.spheres)

    def to_dict(self):
        return {
            "spheres": [sphere.to_dict() for sphere in self.spheres],
            "radii": list(self.radii),
            "circle": self.circle.to_dict(),
            "points": [tuple(point) for point in self.points],
        }

    def __repr__(self):
        return f"GeometryResult(radii={self.radii!r}, circle_exists={self.circle.exists!r}, points={self.points!r})"


def _to_point(value, name):
    try:
        coords = tuple(value)
    except TypeError:
        raise InvalidInputError(f"{name} is not a point: {value!r}")

    if len(coords) != 3:
        raise InvalidInputError(f"{name} must have 3 coordinates, got {len(coords)}")

    values = []
    for coord in coords:
        if isinstance(coord, bool) or not isinstance(coord, numbers.Real):
            raise InvalidInputError(f"{name} has a non-numeric coordinate: {coord!r}")
        try:
            value = float(coord)
        except OverflowError:
            raise InvalidInputError(f"{name} has a coordinate out of float range: {coord!r}")
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} has a non-finite coordinate: {coord!r}")
        values.append(value)

    return geometry.Point(*values)


def compute_geometry(anchors, movable, epsilon=None, sort_points=None):
    """
    Spheres around three anchors passing through the movable point, the
    circle where the first two meet and the points common to all three.

    Anchors and the movable point may be Points or any 3-item sequences of
    finite numbers; anything else raises InvalidInputError.
    """
    if sort_points is None:
        sort_points = settings.SORT_POINTS

    anchors = tuple(anchors)
    if len(anchors) != 3:
        raise InvalidInputError(f"Exactly 3 anchors are required, got {len(anchors)}")

    anchors = [_to_point(anchor, f"anchor {i + 1}") for i, anchor in enumerate(anchors)]
    movable = _to_point(movable, "movable point")

    spheres = [
        geometry.Sphere(anchor, geometry.distance(anchor, movable))
        for anchor in anchors
    ]

    circle = spheres[0].intersect_with_sphere(spheres[1])
    points = trilaterate(*spheres, epsilon=epsilon)

    if sort_points:
        points = canonical_order(points)

    logger.debug("Circle exists: %s, %d intersection point(s)", circle.exists, len(points))

    return GeometryResult(spheres, circle, points)


def compute_many(anchors, movables, epsilon=None, sort_points=None):
    """Independent evaluation of compute_geometry for each movable point."""
    anchors = tuple(anchors)
    for movable in movables:
        yield compute_geometry(anchors, movable, epsilon=epsilon, sort_points=sort_points)
