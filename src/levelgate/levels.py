# ===== MODULE DOCSTRING ===== #
"""
Severity levels for LevelGate.

The scale is ordinal and integer-backed:

    NONE (0) < ERROR (1) < WARN (2) < INFO (3) < LOG (4) < DEBUG (5)

A logger configured at level N shows every message whose severity is at most
N, so DEBUG is the most verbose setting and NONE silences a logger entirely.
``WARNING`` is an alias of ``WARN``, not a separate member.

``normalize_level`` turns whatever a caller hands to ``Logger.set_level`` (a
member, a number or a keyword string) into a ``Level``.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Dict, Final, FrozenSet, List, Tuple, Union
import enum
import logging
import numbers

## ===== LOCAL ===== ##
from .error_utils import InvalidLevelError

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('levelgate')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'Level',
    'LevelInput',
    'DEFAULT_LEVEL',
    'MIN_LEVEL',
    'MAX_LEVEL',
    'normalize_level',
    'clamp_level',
]

# ===== CLASSES ===== #

class Level(enum.IntEnum):
    """Ordinal severity scale."""
    NONE = 0
    ERROR = 1
    WARN = 2
    WARNING = 2  # alias of WARN
    INFO = 3
    LOG = 4
    DEBUG = 5


## ===== CONSTANTS ===== ##
MIN_LEVEL: Final[Level] = Level.NONE
MAX_LEVEL: Final[Level] = Level.DEBUG

# Level a Logger starts at when none is given
DEFAULT_LEVEL: Final[Level] = Level.WARN

# Accepted keyword spellings, checked in order. Matching is case-exact.
_KEYWORDS: Final[Tuple[Tuple[FrozenSet[str], Level], ...]] = (
    (frozenset({'none', 'NONE'}), Level.NONE),
    (frozenset({'error', 'ERROR'}), Level.ERROR),
    (frozenset({'warn', 'warning', 'WARN', 'WARNING'}), Level.WARN),
    (frozenset({'info', 'INFO'}), Level.INFO),
    (frozenset({'log', 'LOG'}), Level.LOG),
    (frozenset({'debug', 'DEBUG'}), Level.DEBUG),
)

_BY_VALUE: Final[Dict[int, Level]] = {int(member): member for member in Level}

## ===== TYPE ALIASES ===== ##
LevelInput = Union[Level, int, float, str]

# ===== FUNCTIONS ===== #

def clamp_level(value: Union[int, float], max_level: int = MAX_LEVEL) -> Level:
    """Round a number to the nearest integer and clamp it into [NONE, max_level].

    Args:
        value: Any real number.
        max_level: Upper bound; itself clamped to the scale.

    Returns:
        The matching Level member.
    """
    ceiling = min(max(int(MIN_LEVEL), int(max_level)), int(MAX_LEVEL))
    return _BY_VALUE[min(max(int(MIN_LEVEL), round(value)), ceiling)]


def _resolve_keyword(value: str) -> Level:
    for keywords, level in _KEYWORDS:
        if value in keywords:
            return level
    raise InvalidLevelError(value)


def normalize_level(value: LevelInput, max_level: int = MAX_LEVEL) -> Level:
    """Resolve a heterogeneous level input to a canonical Level.

    Inputs are handled by kind:

    - ``Level`` members and real numbers are rounded and clamped into
      ``[NONE, max_level]``.
    - Strings must be one of the lower- or upper-case keyword spellings
      (``'debug'``/``'DEBUG'``, ``'warning'``/``'WARNING'`` ...) and are
      clamped the same way. Mixed case such as ``'Debug'`` is rejected.
    - Anything else, including booleans, is rejected.

    Args:
        value: The level to normalize.
        max_level: The ceiling applied to the resolved level.

    Returns:
        The canonical Level.

    Raises:
        InvalidLevelError: If ``value`` matches none of the accepted forms.
    """
    if isinstance(value, bool):
        raise InvalidLevelError(value)

    if isinstance(value, numbers.Real):
        try:
            level = clamp_level(value, max_level)
        except (ValueError, OverflowError) as e:
            # NaN / infinity
            raise InvalidLevelError(value) from e
    elif isinstance(value, str):
        level = clamp_level(_resolve_keyword(value), max_level)
    else:
        raise InvalidLevelError(value)

    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE levels.normalize_level: {value!r} -> {level.name} (max_level={int(max_level)})")
    return level
