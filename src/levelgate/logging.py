# ===== MODULE DOCSTRING ===== #
"""
LevelGate Logging Configuration

This module configures the two stdlib loggers used by the LevelGate package:

- ``levelgate``: the package's own diagnostics (TRACE messages emitted while
  normalizing levels, compiling fragments and mutating configuration).
- ``levelgate.sink``: the parent of every logger the default sink writes
  through. Filtering has already happened by the time a record reaches it,
  so it accepts everything down to DEBUG and does not propagate.

The package logger is configured with the following defaults:
- Output: Standard error stream (sys.stderr)
- Format: "%(levelname)s:%(name)s: %(message)s"
- Default Level: WARNING

Usage:
    from levelgate.logging import set_verbosity
    import logging

    # See what LevelGate itself is doing
    set_verbosity(logging.DEBUG)
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List
import logging
import sys

# ===== GLOBALS ===== #

## ===== CONSTANTS ===== ##
# Logging format string for consistent message formatting
LOG_FORMAT: Final[str] = '%(levelname)s:%(name)s: %(message)s'

# Valid logging levels for verbosity configuration
VALID_LEVELS: Final[List[int]] = [
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL
]

# Name of the parent logger used by the default sink
SINK_LOGGER_NAME: Final[str] = 'levelgate.sink'

## ===== LOGGER SETUP ===== ##
_log: Final[logging.Logger] = logging.getLogger('levelgate')

handler: Final[logging.StreamHandler] = logging.StreamHandler(sys.stderr)
handler.setFormatter(logging.Formatter(LOG_FORMAT))

if not _log.handlers:
    _log.addHandler(handler)
    _log.propagate = True
    _log.setLevel(logging.WARNING)

_sink_log: Final[logging.Logger] = logging.getLogger(SINK_LOGGER_NAME)

sink_handler: Final[logging.StreamHandler] = logging.StreamHandler(sys.stderr)
sink_handler.setFormatter(logging.Formatter(LOG_FORMAT))

if not _sink_log.handlers:
    _sink_log.addHandler(sink_handler)
    # Records here already passed the level/name filter
    _sink_log.propagate = False
    _sink_log.setLevel(logging.DEBUG)

## ===== PUBLIC API ALIAS ===== ##
logger = _log

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'logger',
    'set_verbosity',
    'SINK_LOGGER_NAME',
]

# ===== FUNCTIONS ===== #

def set_verbosity(level: int) -> None:
    """Set the verbosity of LevelGate's own diagnostic logger.

    This does not affect what ``levelgate.Logger`` instances emit; those are
    governed by their own level and the allow/deny lists.

    Args:
        level: A logging level constant from the logging module
              (e.g., logging.DEBUG, logging.INFO, logging.WARNING)

    Raises:
        ValueError: If an invalid logging level is provided

    Example:
        >>> import logging
        >>> from levelgate.logging import set_verbosity
        >>> set_verbosity(logging.DEBUG)
    """
    if level not in VALID_LEVELS:
        _log.debug(f"TRACE logging.set_verbosity: Invalid level provided: {level!r}")
        raise ValueError(
            f"Invalid logging level: {level}. "
            f"Use logging module constants (e.g., logging.DEBUG). "
            f"Valid levels: {[logging.getLevelName(l) for l in VALID_LEVELS]}"
        )

    _log.setLevel(level)
    if _log.isEnabledFor(logging.DEBUG):
        level_name = logging.getLevelName(level)
        _log.debug(f"TRACE logging.set_verbosity: LevelGate verbosity set to {level_name}")
