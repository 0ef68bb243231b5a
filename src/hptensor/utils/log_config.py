"""
hptensor.utils.log_config
=========================

Logging set-up shared by every module of the package.
"""

import logging
import sys

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.INFO, format_string=_FORMAT):
    """Configure basic logging of the ``hptensor`` logger to stdout."""
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stdout
    )
    logging.getLogger("hptensor").setLevel(level)


def set_log_level(level):
    """Change the verbosity of the ``hptensor`` logger (name or number)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)


setup_logging()

logger = logging.getLogger("hptensor")
