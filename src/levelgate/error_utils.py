# ===== MODULE DOCSTRING ===== #
"""Error types for the LevelGate package.

Every failure in LevelGate is a programmer error raised synchronously at the
call that caused it. A suppressed log call is not an error and never raises.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Any, Final, List, Optional

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'LevelGateError',
    'InvalidLevelError',
    'InvalidOutputError',
    'InvalidPatternError',
]

# ===== CLASSES ===== #

class LevelGateError(Exception):
    """Base class for all LevelGate errors."""


class InvalidLevelError(LevelGateError, ValueError):
    """Raised when a value cannot be resolved to a log level.

    Attributes:
        value (Any): The offending input, kept for diagnostics.
    """
    def __init__(self, value: Any, message: Optional[str] = None):
        super().__init__(message or f'Invalid log level "{value}"')
        self.value = value


class InvalidOutputError(LevelGateError, TypeError):
    """Raised when the forwarding path is handed something that is not a sequence of values."""
    def __init__(self, output: Any):
        super().__init__(
            f"Sink output must be a list or tuple of values, got {type(output).__name__}"
        )
        self.output = output


class InvalidPatternError(LevelGateError, ValueError):
    """Raised when a fragment is not a string, or a ``/.../`` fragment is not a valid regular expression."""
    def __init__(self, fragment: Any, reason: str):
        super().__init__(f"Invalid name pattern {fragment!r}: {reason}")
        self.fragment = fragment
