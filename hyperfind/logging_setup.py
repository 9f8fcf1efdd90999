#===============================================================================
#  HyperFind | logging_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  One-time setup of the "hyperfind" package logger (stderr, key=value lines).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "hyperfind"
LOG_FORMAT = "ts=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"

_HANDLER: Optional[logging.Handler] = None


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    global _HANDLER
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    if _HANDLER is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _HANDLER = handler
    return logger
