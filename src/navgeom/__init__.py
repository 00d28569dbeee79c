__version__ = "1.0.0"
__license__ = "MIT"
# -*- coding: utf-8 -*-

import logging

from .default_config import CONFIG_VERSION, DEFAULTS
from .geometry_kernel import *  # noqa: F401,F403
from .geometry_kernel import __all__ as _kernel_all
from .logging_config import setup_logging

logging.getLogger(DEFAULTS["LOGGER_NAME"]).addHandler(logging.NullHandler())

__all__ = ["DEFAULTS", "setup_logging", *_kernel_all]
