# ===== MODULE DOCSTRING ===== #
"""
The namespaced, leveled logger.

Usage:
    from levelgate import Logger

    class Worker:
        def __init__(self):
            self.log = Logger(self, 'info')   # named "Worker"

        def run(self):
            self.log.info("starting")
            self.log.debug("not shown at INFO")
            self.log.dt("tick")               # "<n> ms tick" at LOG and above

Every severity method returns the logger, so calls can be chained whether
or not the message was shown.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from datetime import datetime, timezone
from typing import Any, Callable, Final, List, Optional
import logging
import time

## ===== LOCAL ===== ##
from . import config as _config
from .config import GlobalConfig
from .filtering import can_display
from .levels import DEFAULT_LEVEL, Level, LevelInput, normalize_level
from .sink import Sink, forward, logging_sink

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('levelgate')

## ===== CONSTANTS ===== ##
DEFAULT_NAME: Final[str] = 'Logger'

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['Logger', 'derive_name', 'monotonic_ms']

## ===== TYPE ALIASES ===== ##
Clock = Callable[[], float]

# ===== FUNCTIONS ===== #

def monotonic_ms() -> float:
    """Default clock for ``Logger.dt``: monotonic time in milliseconds."""
    return time.monotonic() * 1000


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def derive_name(bind_to: Any) -> str:
    """Derive a logger name from a binding value.

    - falsy values give ``'Logger'``
    - strings are used as they are
    - objects exposing a ``logger_name`` attribute use it
    - any other object uses its class name

    The first space in the result, and only the first, becomes ``_``.
    """
    if not bind_to:
        name = DEFAULT_NAME
    elif isinstance(bind_to, str):
        name = bind_to
    else:
        name = getattr(bind_to, 'logger_name', None) or type(bind_to).__name__
    return str(name).replace(' ', '_', 1)

# ===== CLASSES ===== #

class Logger:
    """A leveled logger bound to a name.

    Args:
        bind_to: A name, or an object whose class (or ``logger_name``) names
            the logger. Falsy values give ``'Logger'``.
        level: Initial level (Level, number or keyword). Defaults to WARN.
        config: Shared configuration. Defaults to the process config.
        sink: Where shown messages go. Defaults to ``logging_sink``.
        clock: Millisecond clock used by ``dt``.
    """

    NONE: Final[Level] = Level.NONE
    ERROR: Final[Level] = Level.ERROR
    WARN: Final[Level] = Level.WARN
    WARNING: Final[Level] = Level.WARNING
    INFO: Final[Level] = Level.INFO
    LOG: Final[Level] = Level.LOG
    DEBUG: Final[Level] = Level.DEBUG
    DEFAULT_LEVEL: Final[Level] = DEFAULT_LEVEL

    # Global configuration, acting on the process config
    set_max_level = staticmethod(_config.set_max_level)
    set_global_prepend_timestamp = staticmethod(_config.set_prepend_timestamp)
    allow = staticmethod(_config.allow)
    deny = staticmethod(_config.deny)
    allow_all = staticmethod(_config.allow_all)

    def __init__(
        self,
        bind_to: Any = None,
        level: Optional[LevelInput] = None,
        *,
        config: Optional[GlobalConfig] = None,
        sink: Optional[Sink] = None,
        clock: Optional[Clock] = None,
    ):
        self._name = derive_name(bind_to)
        self._config = config
        self.sink: Sink = sink if sink is not None else logging_sink
        self.clock: Clock = clock if clock is not None else monotonic_ms
        self.prepend_timestamp_override: Optional[bool] = None
        self.last_timestamp: Optional[float] = None

        self.config.register(self._name)
        self.set_level(DEFAULT_LEVEL if level is None else level)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE logger.Logger.__init__: Created {self!r}")

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, level={self.level.name})"

    @classmethod
    def max_level(cls) -> int:
        """The ceiling currently applied by the process config."""
        return _config.get_config().max_level

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> GlobalConfig:
        if self._config is not None:
            return self._config
        return _config.get_config()

    @property
    def prepend_timestamp(self) -> bool:
        """Whether output gets a timestamp prefix: the instance override if set, else the config default."""
        if self.prepend_timestamp_override is not None:
            return self.prepend_timestamp_override
        return self.config.prepend_timestamp

    def set_level(self, level: LevelInput) -> 'Logger':
        """Set the level, clamped to the config's max level.

        Raises:
            InvalidLevelError: If ``level`` is not a recognized level.
        """
        self.level = normalize_level(level, self.config.max_level)
        return self

    def set_prepend_timestamp(self, flag: Optional[bool]) -> 'Logger':
        """Override the timestamp default for this logger. ``None`` removes the override."""
        self.prepend_timestamp_override = None if flag is None else bool(flag)
        return self

    def can_display(self, severity: int) -> bool:
        return can_display(self.level, severity, self._name, self.config)

    def _emit(self, severity: Level, args: tuple) -> None:
        output: List[Any] = list(args)
        if self.prepend_timestamp:
            output.insert(0, f"[{_timestamp()}]")
        forward(self.sink, self, output, severity)

    ## ===== SEVERITY METHODS ===== ##
    def error(self, *args: Any) -> 'Logger':
        if self.can_display(Level.ERROR):
            self._emit(Level.ERROR, args)
        return self

    def warn(self, *args: Any) -> 'Logger':
        if self.can_display(Level.WARN):
            self._emit(Level.WARN, args)
        return self

    warning = warn

    def info(self, *args: Any) -> 'Logger':
        if self.can_display(Level.INFO):
            self._emit(Level.INFO, args)
        return self

    def log(self, *args: Any) -> 'Logger':
        if self.can_display(Level.LOG):
            self._emit(Level.LOG, args)
        return self

    def debug(self, *args: Any) -> 'Logger':
        if self.can_display(Level.DEBUG):
            self._emit(Level.DEBUG, args)
        return self

    def dt(self, *args: Any) -> 'Logger':
        """Log the milliseconds elapsed since the previous ``dt`` call.

        The first call reports ``0 ms``. The stored timestamp advances on
        every call, including calls the filter drops. Shown when the logger
        displays LOG messages, and sent to the sink as DEBUG.
        """
        now = self.clock()
        elapsed = 0.0 if self.last_timestamp is None else now - self.last_timestamp
        self.last_timestamp = now

        if self.can_display(Level.LOG):
            self._emit(Level.DEBUG, (f"{round(elapsed)} ms",) + args)
        return self
