"""
dimline: linear dimension geometry for 2D drawings.

Builds the dimension line, its terminators and the measurement label from
two reference points and the drawing's dimension-style variables.
"""

from dimline.logging_config import (
    setup_logging,
    get_logger,
    configure_default_logging,
    log_timing,
    timed,
    LogContext,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "configure_default_logging",
    "log_timing",
    "timed",
    "LogContext",
]
