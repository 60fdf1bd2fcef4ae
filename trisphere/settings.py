import os
import logging


def _to_bool(v):
    return str(v).lower()[:1] in ("t", "y", "1")


# tolerance for collinear centers and tangent discriminants
EPSILON = float(os.environ.get("TRISPHERE_EPSILON", 1e-6))

SORT_POINTS = _to_bool(os.environ.get("TRISPHERE_SORT_POINTS", True))

# top, left, front
DEFAULT_ANCHORS = (
    (0, 8, 0),
    (-8, 0, 0),
    (0, 0, 8),
)

DEFAULT_MOVABLE = (0, 0, 0)

LOG_LEVEL = os.environ.get("TRISPHERE_LOG_LEVEL", "WARNING").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "[%(asctime)s] %(levelname)s:%(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "level": logging.DEBUG,
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {"": {"level": LOG_LEVEL, "handlers": ["console"],},},
}
