# ===== MODULE DOCSTRING ===== #
"""
The display decision.

``can_display`` answers one question: should a message of a given severity,
sent through a logger configured at a given verbosity, reach the sink?

Two stages, always in this order:

1. Threshold: a message whose severity exceeds the logger's verbosity is
   dropped, whatever the allow/deny lists say.
2. Name: the logger's name is checked against the config.

   - ``'*'`` in the allow list lets everything through.
   - Otherwise a non-empty allow list lets through only names matching one
     of its fragments; the deny list is not consulted at all.
   - With an empty allow list, ``'*'`` in the deny list blocks everything
     and other deny fragments block the names they match.
   - With both lists empty everything passes.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List
import logging

## ===== LOCAL ===== ##
from .config import GlobalConfig
from .matcher import WILDCARD, get_fragment_matcher

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('levelgate')

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['can_display', 'name_allowed']

# ===== FUNCTIONS ===== #

def name_allowed(name: str, config: GlobalConfig) -> bool:
    """Apply the allow/deny stage to ``name``."""
    allow_list = config.allow_list
    deny_list = config.deny_list

    if WILDCARD in allow_list:
        return True

    if allow_list:
        for fragment in allow_list:
            if get_fragment_matcher(fragment)(name):
                return True
        return False

    if WILDCARD in deny_list:
        return False
    for fragment in deny_list:
        if get_fragment_matcher(fragment)(name):
            if _log.isEnabledFor(logging.DEBUG):
                _log.debug(f"TRACE filtering.name_allowed: {name!r} denied by fragment {fragment!r}")
            return False
    return True


def can_display(verbosity: int, severity: int, name: str, config: GlobalConfig) -> bool:
    """Decide whether a message reaches the sink.

    Args:
        verbosity: The level the logger is configured at.
        severity: The level of the message being logged.
        name: The logger's name.
        config: The config holding the allow/deny lists.

    Returns:
        False if ``verbosity < severity`` or the name is filtered out,
        True otherwise.
    """
    if verbosity < severity:
        return False
    return name_allowed(name, config)
