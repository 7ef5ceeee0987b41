import pytest

from levelgate.config import reset_config
from levelgate.matcher import clear_matcher_cache
from levelgate.settings import LevelGateSettings


class RecordingSink:
    """Sink that keeps every call it receives."""
    def __init__(self):
        self.calls = []

    def __call__(self, context, output, level):
        self.calls.append((context, list(output), level))

    @property
    def outputs(self):
        return [output for _, output, _ in self.calls]

    @property
    def levels(self):
        return [level for _, _, level in self.calls]


class FakeClock:
    """Millisecond clock advanced by hand."""
    def __init__(self, start=1000.0):
        self.now = start

    def advance(self, ms):
        self.now += ms

    def __call__(self):
        return self.now


ENV_VARS = ("LEVELGATE_FILTER", "LEVELGATE_MAX_LEVEL", "LEVELGATE_TIMESTAMPS")


# ADD FIXTURE to isolate the process config between tests
@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Rebuild the default config from an empty environment around each test."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    clear_matcher_cache()
    reset_config(LevelGateSettings(_env_file=None))
    yield
    # Tests may leave invalid values behind; monkeypatch restores them only
    # after this fixture finishes.
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_config(LevelGateSettings(_env_file=None))


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FakeClock()
