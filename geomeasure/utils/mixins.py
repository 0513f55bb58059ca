"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional

from geomeasure.utils.logging import LOGGER, warn_once


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """Gives instances a logger beneath the package logger, named for their class"""
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        name = self.__class__.__name__
        if logstr:
            name += f'.{logstr}'

        self.logger = LOGGER.getChild(name)

    def warn_once(self, msg, *args):
        """Logs a warning only once per message"""
        warn_once(msg, *args, logger=self.logger)
