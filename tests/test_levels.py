import math

import pytest

from levelgate import InvalidLevelError, Level, normalize_level
from levelgate.levels import DEFAULT_LEVEL, clamp_level

# --- Scale --- #

def test_levels_are_ordered_and_integer_backed():
    """The scale runs NONE=0 through DEBUG=5."""
    assert [int(level) for level in Level] == [0, 1, 2, 3, 4, 5]
    assert Level.NONE < Level.ERROR < Level.WARN < Level.INFO < Level.LOG < Level.DEBUG

def test_warning_is_an_alias_of_warn():
    assert Level.WARNING is Level.WARN
    assert Level['WARNING'] is Level.WARN
    assert len(list(Level)) == 6

def test_default_level_is_warn():
    assert DEFAULT_LEVEL is Level.WARN

# --- Numeric input --- #

@pytest.mark.parametrize("value, expected", [
    (0, Level.NONE),
    (3, Level.INFO),
    (5, Level.DEBUG),
    (2.4, Level.WARN),
    (2.6, Level.INFO),
    (-3, Level.NONE),
    (-0.4, Level.NONE),
    (99, Level.DEBUG),
])
def test_numbers_are_rounded_and_clamped(value, expected):
    assert normalize_level(value) is expected

def test_numbers_are_clamped_to_max_level():
    assert normalize_level(5, max_level=3) is Level.INFO
    assert normalize_level(Level.DEBUG, max_level=2) is Level.WARN
    assert normalize_level(1, max_level=3) is Level.ERROR

@pytest.mark.parametrize("keyword, max_level, expected", [
    ("debug", 3, Level.INFO),
    ("DEBUG", 0, Level.NONE),
    ("warning", 1, Level.ERROR),
    ("error", 3, Level.ERROR),
])
def test_keywords_are_clamped_to_max_level(keyword, max_level, expected):
    assert normalize_level(keyword, max_level=max_level) is expected

def test_level_members_pass_through():
    for level in Level:
        assert normalize_level(level) is level

def test_clamp_level_keeps_ceiling_on_scale():
    assert clamp_level(4, max_level=10) is Level.LOG
    assert clamp_level(4, max_level=-1) is Level.NONE

@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_numbers_are_rejected(value):
    with pytest.raises(InvalidLevelError):
        normalize_level(value)

# --- Keyword input --- #

@pytest.mark.parametrize("keyword, expected", [
    ("none", Level.NONE), ("NONE", Level.NONE),
    ("error", Level.ERROR), ("ERROR", Level.ERROR),
    ("warn", Level.WARN), ("WARN", Level.WARN),
    ("warning", Level.WARN), ("WARNING", Level.WARN),
    ("info", Level.INFO), ("INFO", Level.INFO),
    ("log", Level.LOG), ("LOG", Level.LOG),
    ("debug", Level.DEBUG), ("DEBUG", Level.DEBUG),
])
def test_keywords_resolve_exactly(keyword, expected):
    assert normalize_level(keyword) is expected

@pytest.mark.parametrize("keyword", ["Debug", "Info", "wArN", "verbose", "", "5"])
def test_unknown_or_mixed_case_keywords_are_rejected(keyword):
    with pytest.raises(InvalidLevelError) as excinfo:
        normalize_level(keyword)
    assert excinfo.value.value == keyword
    assert f'Invalid log level "{keyword}"' in str(excinfo.value)

# --- Other input --- #

@pytest.mark.parametrize("value", [None, True, False, [], {}, object()])
def test_other_types_are_rejected(value):
    with pytest.raises(InvalidLevelError):
        normalize_level(value)

def test_invalid_level_error_is_a_value_error():
    with pytest.raises(ValueError):
        normalize_level("loud")
