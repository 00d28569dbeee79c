from ..default_config import CONFIG_VERSION, DEFAULTS

COLOCATION_EPS = DEFAULTS["COLOCATION_EPS"]
COLOCATION_EPS_SQR = COLOCATION_EPS * COLOCATION_EPS   # (1/16384)^2

# ===== Triangle / polygon tolerances =====
BARYCENTRIC_EPS = DEFAULTS["BARYCENTRIC_EPS"]
SAT_EPS = DEFAULTS["SAT_EPS"]

# ===== Segment tolerances =====
PARALLEL_EPS = DEFAULTS["PARALLEL_EPS"]
SEGSEG_PARALLEL_EPS = DEFAULTS["SEGSEG_PARALLEL_EPS"]

DEFAULT_LOGGER_NAME = DEFAULTS["LOGGER_NAME"]

__all__ = [
    "BARYCENTRIC_EPS",
    "COLOCATION_EPS",
    "COLOCATION_EPS_SQR",
    "CONFIG_VERSION",
    "DEFAULT_LOGGER_NAME",
    "PARALLEL_EPS",
    "SAT_EPS",
    "SEGSEG_PARALLEL_EPS",
]
