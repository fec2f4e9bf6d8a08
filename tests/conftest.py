from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# Walltime Imports
from walltime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from walltime.time import clock

# Local Imports
from . import fixedClock


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the config environment variable, and reset the shared config.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        BehavioralConfig()
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="fixed_clock")
def patchSystemClock(monkeypatch: pytest.MonkeyPatch):
    """Replace the host wall clock with :func:`.fixedClock` for the duration of a test."""
    monkeypatch.setattr(clock, "systemClock", fixedClock)
    return fixedClock


@pytest.fixture(name="raise_policy")
def setRaisePolicy() -> BehavioralConfig:
    """Switch the shared config to reject out-of-range microseconds."""
    config = BehavioralConfig.getConfig()
    config.time.InvalidMicrosPolicy = "raise"
    return config
