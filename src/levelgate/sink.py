# ===== MODULE DOCSTRING ===== #
"""
Sinks: where a message goes once it has passed the filter.

A sink is any callable ``sink(context, output, level)``:

- ``context``: the ``Logger`` emitting the message (use ``context.name``)
- ``output``: the ordered list of values to render
- ``level``: the message's ``Level``

``forward`` is the only path by which LevelGate calls a sink. It rejects
output that is not a list or tuple and never calls a sink with nothing to
say.

``logging_sink``, the default, renders the values space-separated and emits
them through the stdlib logger ``levelgate.sink.<name>``.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Any, Dict, Final, List, Sequence
import logging

## ===== THIRD PARTY ===== ##
from typing_extensions import Protocol

## ===== LOCAL ===== ##
from .error_utils import InvalidOutputError
from .levels import Level
from .logging import SINK_LOGGER_NAME

# ===== GLOBALS ===== #

## ===== CONSTANTS ===== ##
# stdlib level for Level.LOG, between INFO (20) and DEBUG (10)
LOGGING_LOG_LEVEL: Final[int] = 15
logging.addLevelName(LOGGING_LOG_LEVEL, 'LOG')

STDLIB_LEVELS: Final[Dict[Level, int]] = {
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.LOG: LOGGING_LOG_LEVEL,
    Level.DEBUG: logging.DEBUG,
}

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'Sink',
    'forward',
    'logging_sink',
    'STDLIB_LEVELS',
]

# ===== CLASSES ===== #

class Sink(Protocol):
    def __call__(self, context: Any, output: Sequence[Any], level: Level) -> None: ...

# ===== FUNCTIONS ===== #

def forward(sink: Sink, context: Any, output: Sequence[Any], level: Level) -> None:
    """Hand ``output`` to ``sink``.

    Raises:
        InvalidOutputError: If ``output`` is not a list or tuple.
    """
    if not isinstance(output, (list, tuple)):
        raise InvalidOutputError(output)
    if not output:
        return
    sink(context, list(output), level)


def logging_sink(context: Any, output: Sequence[Any], level: Level) -> None:
    """Emit ``output`` through the stdlib logger ``levelgate.sink.<name>``."""
    stdlib_level = STDLIB_LEVELS.get(Level(level), logging.DEBUG)
    target = logging.getLogger(f"{SINK_LOGGER_NAME}.{context.name}")
    target.log(stdlib_level, ' '.join(str(value) for value in output))
