# ===== MODULE DOCSTRING ===== #
"""
Shared configuration for LevelGate loggers.

A ``GlobalConfig`` holds the state every logger's display decision reads:

- ``max_level``: ceiling applied when a logger's level is normalized
- ``prepend_timestamp``: default for the timestamp prefix
- ``allow_list`` / ``deny_list``: name fragments consulted by the filter
- ``names``: every logger name registered against this config

Loggers take a config explicitly (``Logger('Worker', config=cfg)``) or fall
back to the process default returned by ``get_config()``. The default is
seeded once from ``LevelGateSettings`` and can be rebuilt with
``reset_config()``, which tests use to isolate from one another.

The module-level ``allow``, ``deny``, ``allow_all``, ``set_max_level`` and
``set_prepend_timestamp`` functions act on the default config.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Any, Final, Iterable, List, Optional, Tuple
import dataclasses
import logging
import threading

## ===== LOCAL ===== ##
from .error_utils import InvalidPatternError
from .levels import MAX_LEVEL, LevelInput, normalize_level
from .settings import LevelGateSettings

# ===== GLOBALS ===== #

## ===== LOGGER ===== ##
_log: Final[logging.Logger] = logging.getLogger('levelgate')

## ===== CONSTANTS ===== ##
FRAGMENT_SEPARATOR: Final[str] = ','
DENY_PREFIX: Final[str] = '-'

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'GlobalConfig',
    'parse_filter_string',
    'get_config',
    'reset_config',
    'set_max_level',
    'set_prepend_timestamp',
    'allow',
    'deny',
    'allow_all',
]

# ===== FUNCTIONS ===== #

def parse_filter_string(text: Optional[str]) -> Tuple[List[str], List[str]]:
    """Split an initial filter string into allow and deny fragments.

    Fragments are comma separated. A fragment starting with ``-`` is a deny
    fragment (the ``-`` is dropped); every other fragment is an allow
    fragment. Surrounding whitespace is stripped and empty fragments are
    skipped.

    Args:
        text: The filter string, or None.

    Returns:
        A tuple ``(allow_list, deny_list)``.
    """
    allow_list: List[str] = []
    deny_list: List[str] = []
    if not text:
        return allow_list, deny_list

    for raw in text.split(FRAGMENT_SEPARATOR):
        fragment = raw.strip()
        if not fragment:
            continue
        if fragment.startswith(DENY_PREFIX):
            fragment = fragment[len(DENY_PREFIX):]
            if fragment:
                deny_list.append(fragment)
        else:
            allow_list.append(fragment)
    return allow_list, deny_list


def _flatten(fragments: Iterable[Any]) -> List[str]:
    """Flatten one level of list/tuple nesting.

    Raises:
        InvalidPatternError: If a flattened fragment is not a string.
    """
    flat: List[str] = []
    for item in fragments:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)
    for fragment in flat:
        if not isinstance(fragment, str):
            raise InvalidPatternError(fragment, f"fragments must be strings, got {type(fragment).__name__}")
    return flat

# ===== CLASSES ===== #

@dataclasses.dataclass
class GlobalConfig:
    """Mutable configuration shared by a set of loggers.

    Mutations go through the methods below, which hold a lock so concurrent
    setup code cannot lose appends. Display decisions read the lists without
    locking.
    """
    max_level: int = int(MAX_LEVEL)
    prepend_timestamp: bool = False
    allow_list: List[str] = dataclasses.field(default_factory=list)
    deny_list: List[str] = dataclasses.field(default_factory=list)
    names: List[str] = dataclasses.field(default_factory=list)
    _lock: threading.Lock = dataclasses.field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @classmethod
    def from_filter_string(cls, text: Optional[str], **kwargs: Any) -> 'GlobalConfig':
        """Build a config whose allow/deny lists are seeded from ``text``."""
        allow_list, deny_list = parse_filter_string(text)
        return cls(allow_list=allow_list, deny_list=deny_list, **kwargs)

    @classmethod
    def from_settings(cls, settings: Optional[LevelGateSettings] = None) -> 'GlobalConfig':
        """Build a config from environment settings (read now if not given)."""
        if settings is None:
            settings = LevelGateSettings()
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE config.GlobalConfig.from_settings: Seeding from {settings!r}")
        return cls.from_filter_string(
            settings.filter,
            max_level=settings.max_level,
            prepend_timestamp=settings.timestamps,
        )

    def set_max_level(self, value: LevelInput) -> None:
        """Replace the ceiling for level normalization.

        Loggers already constructed keep their current level.
        """
        level = normalize_level(value)
        with self._lock:
            self.max_level = int(level)

    def set_prepend_timestamp(self, flag: bool) -> None:
        """Set the default for prefixing output with a timestamp."""
        with self._lock:
            self.prepend_timestamp = bool(flag)

    def allow(self, *fragments: Any) -> None:
        """Append fragments to the allow list. Lists/tuples are flattened one level."""
        flat = _flatten(fragments)
        with self._lock:
            self.allow_list.extend(flat)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE config.GlobalConfig.allow: allow_list={self.allow_list!r}")

    def deny(self, *fragments: Any) -> None:
        """Append fragments to the deny list. Lists/tuples are flattened one level."""
        flat = _flatten(fragments)
        with self._lock:
            self.deny_list.extend(flat)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"TRACE config.GlobalConfig.deny: deny_list={self.deny_list!r}")

    def allow_all(self) -> None:
        """Clear both the allow and deny lists."""
        with self._lock:
            self.allow_list.clear()
            self.deny_list.clear()

    def register(self, name: str) -> None:
        """Record a logger name, once."""
        with self._lock:
            if name not in self.names:
                self.names.append(name)

## ===== DEFAULT CONFIG ===== ##
_default_config: Optional[GlobalConfig] = None
_default_config_lock = threading.Lock()


def get_config() -> GlobalConfig:
    """Return the process default config, seeding it from settings on first use."""
    global _default_config
    if _default_config is None:
        with _default_config_lock:
            if _default_config is None:
                _default_config = GlobalConfig.from_settings()
    return _default_config


def reset_config(settings: Optional[LevelGateSettings] = None) -> GlobalConfig:
    """Rebuild the default config from settings and return it.

    Loggers built without an explicit config resolve the default on every
    call, so they see the rebuilt one.
    """
    global _default_config
    with _default_config_lock:
        _default_config = GlobalConfig.from_settings(settings)
    return _default_config


def set_max_level(value: LevelInput) -> None:
    get_config().set_max_level(value)


def set_prepend_timestamp(flag: bool) -> None:
    get_config().set_prepend_timestamp(flag)


def allow(*fragments: Any) -> None:
    get_config().allow(*fragments)


def deny(*fragments: Any) -> None:
    get_config().deny(*fragments)


def allow_all() -> None:
    get_config().allow_all()
