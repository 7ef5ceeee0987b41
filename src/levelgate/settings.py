# ===== MODULE DOCSTRING ===== #
"""
Process-level defaults read from the environment.

    LEVELGATE_FILTER="Worker,/^Http/,-Worker.cache"
    LEVELGATE_MAX_LEVEL=4
    LEVELGATE_TIMESTAMPS=true

``LEVELGATE_FILTER`` uses the filter-string grammar of
``levelgate.config.parse_filter_string``. No ``.env`` file is read unless
one is passed explicitly, e.g. ``LevelGateSettings(_env_file='.env')``.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List

## ===== THIRD PARTY ===== ##
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ===== GLOBALS ===== #

## ===== CONSTANTS ===== ##
ENV_PREFIX: Final[str] = 'LEVELGATE_'

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['LevelGateSettings', 'ENV_PREFIX']

# ===== CLASSES ===== #

class LevelGateSettings(BaseSettings):
    filter: str = ""
    max_level: int = Field(default=5, ge=0, le=5)
    timestamps: bool = False

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )
