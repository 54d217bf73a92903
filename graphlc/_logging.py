# This code is a Qiskit project.
#
# (C) Copyright IBM 2026.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Utilities for logging."""

import logging
from logging.config import dictConfig


class SimpleInfoFormatter(logging.Formatter):
    """Custom Formatter that uses a simple format for INFO."""

    _style_info = logging.PercentStyle("%(message)s")

    def formatMessage(self, record):
        if record.levelno == logging.INFO:
            return self._style_info.format(record)
        return logging.Formatter.formatMessage(self, record)


GRAPHLC_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "f": {
            "()": SimpleInfoFormatter,
            "format": "%(asctime)s:%(name)s:%(levelname)s: %(message)s",
        },
    },
    "handlers": {"h": {"class": "logging.StreamHandler", "formatter": "f"}},
    "loggers": {"graphlc": {"handlers": ["h"], "level": logging.INFO}},
}


def set_graphlc_logger():
    """Update 'graphlc' logger configuration using the package default one.

    * console logging using a custom format for levels != INFO.
    * console logging with simple format for level INFO, which is where the
      verbose synthesis output (matrices, equations and gates) is written.
    * set logger level to INFO.

    Warning:
        This function modifies the configuration of the standard logging system
        for the 'graphlc.*' loggers, and might interfere with custom logger
        configurations.
    """
    dictConfig(GRAPHLC_LOGGING_CONFIG)


def unset_graphlc_logger():
    """Remove the handlers for the 'graphlc' logger."""
    graphlc_logger = logging.getLogger("graphlc")
    for handler in list(graphlc_logger.handlers):
        graphlc_logger.removeHandler(handler)
