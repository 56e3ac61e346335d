import pytest

from rer.rename import FilenameMatcher, RenameConfig, ResourceFormatter
from rer.utils import LogLevel, constants, logger

_ENV_NAMES = [value for key, value in vars(constants).items() if key.startswith("ENV_")]


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """Keep RER_* variables and logger state from leaking between tests."""
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield
    logger.set_log_file(None)
    logger.set_log_level(LogLevel.INFO)


@pytest.fixture
def make_pipeline():
    """Build (config, matcher, formatter) from RenameConfig keyword arguments."""

    def _make(**kwargs):
        config = RenameConfig(**kwargs)
        return config, FilenameMatcher(config), ResourceFormatter(config)

    return _make
