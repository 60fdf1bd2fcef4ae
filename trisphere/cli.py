import sys
import json
import argparse
from logging import config

from trisphere import settings
from trisphere.engine import compute_geometry, InvalidInputError


def _parser():
    parser = argparse.ArgumentParser(
        prog="trisphere",
        description="Intersect three spheres centered on fixed anchors "
                    "and passing through a movable point.",
    )
    parser.add_argument("x", type=float, nargs="?", default=settings.DEFAULT_MOVABLE[0])
    parser.add_argument("y", type=float, nargs="?", default=settings.DEFAULT_MOVABLE[1])
    parser.add_argument("z", type=float, nargs="?", default=settings.DEFAULT_MOVABLE[2])
    parser.add_argument(
        "--anchors",
        type=float,
        nargs=9,
        metavar="C",
        help="x1 y1 z1 x2 y2 z2 x3 y3 z3",
    )
    parser.add_argument("--epsilon", type=float, default=None)
    parser.add_argument("--unsorted", action="store_true", help="keep solver order of points")
    return parser


def main(argv=None, stdout=None):
    stdout = stdout or sys.stdout
    args = _parser().parse_args(argv)

    config.dictConfig(settings.LOGGING)

    if args.anchors:
        c = args.anchors
        anchors = (c[0:3], c[3:6], c[6:9])
    else:
        anchors = settings.DEFAULT_ANCHORS

    try:
        result = compute_geometry(
            anchors,
            (args.x, args.y, args.z),
            epsilon=args.epsilon,
            sort_points=False if args.unsorted else None,
        )
    except InvalidInputError as e:
        print(f"trisphere: error: {e}", file=sys.stderr)
        return 2

    json.dump(result.to_dict(), stdout, indent=2)
    stdout.write("\n")
    return 0
