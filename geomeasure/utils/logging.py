"""Logging utility for geomeasure"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Optional

LOGGER = logging.getLogger('geomeasure')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str, *args, logger: Optional[logging.Logger] = None):
    """
    Log a warning the first time it is seen. Warnings are deduplicated on the
    unformatted message, before args are applied.

    Args:
        warning:
            The %-style warning message

        *args:
            Arguments merged into the message

        logger:
            (Optional) The logger to warn through, defaults to the package logger
    """
    if warning in _WARNINGS:
        return

    (logger or LOGGER).warning(warning, *args)
    _WARNINGS.add(warning)
