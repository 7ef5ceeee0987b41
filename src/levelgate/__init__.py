# ===== MODULE DOCSTRING ===== #
"""
LevelGate: leveled, name-filtered diagnostic logging.

    from levelgate import Logger, allow

    allow('/^Work/')
    log = Logger('Worker', 'debug')
    log.info('shown')
    Logger('Other', 'debug').info('hidden: name not allowed')
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List

## ===== LOCAL ===== ##
from .config import (
    GlobalConfig, get_config, reset_config, parse_filter_string,
    set_max_level, set_prepend_timestamp, allow, deny, allow_all
)
from .error_utils import (
    LevelGateError, InvalidLevelError, InvalidOutputError, InvalidPatternError
)
from .filtering import can_display
from .levels import Level, DEFAULT_LEVEL, normalize_level
from .logger import Logger
from .logging import logger, set_verbosity
from .matcher import get_fragment_matcher
from .settings import LevelGateSettings
from .sink import Sink, forward, logging_sink

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'Logger',
    'Level',
    'DEFAULT_LEVEL',
    'normalize_level',
    'can_display',
    'get_fragment_matcher',
    'GlobalConfig',
    'LevelGateSettings',
    'get_config',
    'reset_config',
    'parse_filter_string',
    'set_max_level',
    'set_prepend_timestamp',
    'allow',
    'deny',
    'allow_all',
    'Sink',
    'forward',
    'logging_sink',
    'LevelGateError',
    'InvalidLevelError',
    'InvalidOutputError',
    'InvalidPatternError',
    'logger',
    'set_verbosity',
]
