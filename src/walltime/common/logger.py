"""Defines the :class:`.Logger` class and the package-level logging helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "walltime"
"""Name of the top-level logger every walltime module reports to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""Record layout shared by stdout and file handlers."""


class Logger:
    """Thin wrapper around a standard :class:`logging.Logger`.

    The handler, level and file rotation are taken from the ``[logging]`` section of
    :class:`.BehavioralConfig` unless given explicitly. Any attribute not defined here is forwarded
    to the wrapped logger, so a :class:`.Logger` can be used wherever a standard logger is expected.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``): name of the wrapped logger
            level (``int``, optional): minimum level of published records
            path (``str``, optional): directory for log files, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether to attach a handler to a logger
                that already has one
        """
        settings = BehavioralConfig.getConfig().logging
        if not level:
            level = settings.Level
        if not path:
            path = settings.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = settings.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = "stdout"
        if self.logger.handlers and allow_multiple_handlers is not True:
            return

        handler = self._buildHandler(name, path, settings)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def _buildHandler(self, name, path, settings) -> logging.Handler:
        """Return a stdout handler, or a rotating file handler rooted at `path`."""
        if path == "stdout":
            return logging.StreamHandler(sys.stdout)

        if not exists(path):
            self.logger.info(f"Log directory {path!r} does not exist, creating it")
            makedirs(path)

        self.filename = join(path, f"{name}_{pathSafeTime()}.log")
        return RotatingFileHandler(
            self.filename,
            maxBytes=settings.MaxFileSize,
            backupCount=settings.MaxFileCount,
        )

    def __getattr__(self, name):
        """Forward unknown attributes to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _walltimeLog(message: str, level: int):
    """Log `message` at `level` to the top-level ``walltime`` logger.

    This avoids pre-initializing a logger object in small functions that only report failures.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(level, message)


def walltimeLogCritical(message: str):
    """Log a CRITICAL message to the ``walltime`` logger."""
    _walltimeLog(message, logging.CRITICAL)


def walltimeLogError(message: str):
    """Log an ERROR message to the ``walltime`` logger."""
    _walltimeLog(message, logging.ERROR)


def walltimeLogWarning(message: str):
    """Log a WARNING message to the ``walltime`` logger."""
    _walltimeLog(message, logging.WARNING)


def walltimeLogInfo(message: str):
    """Log an INFO message to the ``walltime`` logger."""
    _walltimeLog(message, logging.INFO)


def walltimeLogDebug(message: str):
    """Log a DEBUG message to the ``walltime`` logger."""
    _walltimeLog(message, logging.DEBUG)
