import logging

from trisphere import settings


logger = logging.getLogger(__name__)


def trilaterate(sphere1, sphere2, sphere3, epsilon=None):
    """
    Points common to the surfaces of three spheres.

    The radical planes of spheres (1, 2) and (1, 3) meet in a line, every
    common point lies on that line, so intersecting it with sphere 1 gives
    the answer: 0, 1 or 2 points.

    Nearly collinear centers (|n1 x n2|^2 <= epsilon) give no points.
    A discriminant within epsilon of zero gives a single tangent point.
    """
    if epsilon is None:
        epsilon = settings.EPSILON

    plane_a = sphere1.radical_plane(sphere2)
    plane_b = sphere1.radical_plane(sphere3)

    line = plane_a.intersect_with_plane(plane_b, epsilon=epsilon)
    if line is None:
        logger.debug("Sphere centers are collinear, no intersection points")
        return ()

    return sphere1.intersect_with_line(line, epsilon=epsilon)


def canonical_order(points):
    """Lexicographic order on (x, y, z)."""
    return tuple(sorted(points, key=lambda p: (p.x, p.y, p.z)))
