from typing import Any, Dict
CONFIG_VERSION = "1.0.0"

DEFAULTS: Dict[str, Any] = {
    # Colocation
    "COLOCATION_EPS": 1.0 / 16384.0,   # vequal: points closer than this are the same point

    # Triangle / polygon queries
    "BARYCENTRIC_EPS": 1e-4,           # height queries accept points on shared edges
    "SAT_EPS": 1e-4,                   # projected interval overlap slack

    # Segment intersection
    "PARALLEL_EPS": 1e-8,              # segment vs. polygon edge
    "SEGSEG_PARALLEL_EPS": 1e-6,       # segment vs. segment determinant

    # Logging
    "LOGGER_NAME": "navgeom",
}
