from __future__ import annotations

# Standard Library Imports
import os
from collections import OrderedDict
from logging import DEBUG, INFO

# Third Party Imports
import pytest

# Walltime Imports
from walltime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig

# Local Imports
from .. import CUSTOM_CONFIG_FILE, FIXTURE_DATA_DIR

CORRECT_DEFAULTS = OrderedDict(
    {
        "logging": {
            "OutputLocation": "stdout",
            "Level": DEBUG,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "time": {
            "InvalidMicrosPolicy": "normalize",
            "DurationSubSecond": False,
        },
    },
)


@pytest.fixture(name="file_config")
def mockCustomSettingsFile(monkeypatch: pytest.MonkeyPatch, datafiles) -> BehavioralConfig:
    """Point the config environment variable at the custom fixture config file.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes
        datafiles (``Path``): location of current test data directory

    Yields:
        :class:`.BehavioralConfig`: non-default configuration object
    """
    with monkeypatch.context() as m_patch:
        m_patch.setenv(CONFIG_ENV_VARIABLE, os.path.join(datafiles, CUSTOM_CONFIG_FILE))
        yield BehavioralConfig(os.environ.get(CONFIG_ENV_VARIABLE))


def testImported():
    """Test that the default config results in the default values."""
    config = BehavioralConfig.getConfig()
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            conf_section = getattr(config, section)
            conf_option = getattr(conf_section, option)
            assert value == conf_option


def testSinglePattern():
    """Test that :class:`.BehavioralConfig` is a proper Singleton class."""
    config = BehavioralConfig.getConfig()
    assert config is BehavioralConfig.getConfig()


def testOverwrite():
    """Test overwriting the default :class:`.BehavioralConfig` directly with custom settings."""
    custom_config = BehavioralConfig.getConfig()
    custom_config.time.InvalidMicrosPolicy = "raise"
    custom_config.time.DurationSubSecond = True

    second_config = BehavioralConfig.getConfig()
    assert second_config.time.InvalidMicrosPolicy == "raise"
    assert second_config.time.DurationSubSecond is True
    assert custom_config is second_config


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testNonDefaultFile(file_config: BehavioralConfig):
    """Test loading a custom config file, which also becomes the shared config."""
    assert file_config.logging.OutputLocation == "./logs/"
    assert file_config.logging.Level == INFO
    assert file_config.logging.MaxFileSize == 2048
    assert file_config.logging.MaxFileCount == 10
    assert file_config.time.InvalidMicrosPolicy == "raise"
    assert file_config.time.DurationSubSecond is True

    # Options missing from the file fall back to the defaults
    assert file_config.logging.AllowMultipleHandlers is False

    assert BehavioralConfig.getConfig() is file_config


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testEnvironmentVariable(monkeypatch: pytest.MonkeyPatch, datafiles):
    """Test that the first shared config is read from the file named by the environment variable."""
    monkeypatch.setenv(CONFIG_ENV_VARIABLE, os.path.join(datafiles, CUSTOM_CONFIG_FILE))
    monkeypatch.setattr(BehavioralConfig, "_BehavioralConfig__shared_inst", None)

    config = BehavioralConfig.getConfig()
    assert config.time.InvalidMicrosPolicy == "raise"
    assert config.logging.Level == INFO


def testMissingFile(tmp_path):
    """Test that a missing config file leaves every option at its default."""
    config = BehavioralConfig(str(tmp_path / "missing.config"))
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            assert getattr(getattr(config, section), option) == value


def testBadMicrosPolicy(tmp_path):
    """Test that an unknown microseconds policy is rejected when the file is read."""
    config_path = tmp_path / "bad.config"
    config_path.write_text("[time]\nInvalidMicrosPolicy = ignore\n", encoding="utf-8")
    with pytest.raises(ValueError, match="microseconds policy"):
        BehavioralConfig(str(config_path))
