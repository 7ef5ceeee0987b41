# ===== MODULE DOCSTRING ===== #
"""
Name matching for allow/deny fragments.

A fragment is either:

- a regular expression body wrapped in slashes, e.g. ``/^Work/``, which
  matches when the expression is found anywhere in the logger name; or
- a literal, e.g. ``Worker.cache``, which matches when it occurs as a
  substring of the logger name. Every regex metacharacter in a literal is
  escaped, so ``.`` only matches a dot.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from functools import lru_cache
from typing import Callable, Final, List, Pattern
import logging
import re

## ===== LOCAL ===== ##
from .error_utils import InvalidPatternError

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('levelgate')

## ===== CONSTANTS ===== ##
WILDCARD: Final[str] = '*'
REGEX_DELIMITER: Final[str] = '/'

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'WILDCARD',
    'NameMatcher',
    'is_regex_fragment',
    'compile_fragment',
    'get_fragment_matcher',
    'clear_matcher_cache',
]

## ===== TYPE ALIASES ===== ##
NameMatcher = Callable[[str], bool]

# ===== FUNCTIONS ===== #

def is_regex_fragment(fragment: str) -> bool:
    """Return True if ``fragment`` is delimited as ``/body/``."""
    return (
        len(fragment) >= 2
        and fragment.startswith(REGEX_DELIMITER)
        and fragment.endswith(REGEX_DELIMITER)
    )


@lru_cache(maxsize=256)
def compile_fragment(fragment: str) -> Pattern[str]:
    """Compile a fragment into the pattern its matcher searches with.

    Raises:
        InvalidPatternError: If a ``/.../`` body is not a valid expression.
    """
    if is_regex_fragment(fragment):
        body = fragment[1:-1]
        try:
            pattern = re.compile(body)
        except re.error as e:
            raise InvalidPatternError(fragment, str(e)) from e
    else:
        pattern = re.compile(re.escape(fragment))

    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"TRACE matcher.compile_fragment: {fragment!r} compiled to {pattern.pattern!r}")
    return pattern


def get_fragment_matcher(fragment: str) -> NameMatcher:
    """Build a predicate telling whether a logger name matches ``fragment``.

    Args:
        fragment: A literal or ``/regex/`` fragment.

    Returns:
        A callable taking a logger name and returning a bool.
    """
    pattern = compile_fragment(fragment)

    def matches(name: str) -> bool:
        return pattern.search(name) is not None

    return matches


def clear_matcher_cache() -> None:
    """Drop all compiled fragments."""
    compile_fragment.cache_clear()
