"""Configuration file defaults, migration and updates."""

import pytest
from yaml import safe_load

from bristol.configuration import get_default_configuration
from bristol.repository.configuration import ConfigurationRepository
from bristol.repository.error import StoreError


def test_defaults(configuration_repository):
    config = configuration_repository.get_config()
    assert config == get_default_configuration()
    assert config["reminder_enabled"] is False
    assert config["reminder_time"] == "20:00"
    assert config["default_period"] == "month"


def test_missing_keys_are_back_filled(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("show_header: false\n")

    repository = ConfigurationRepository(path)
    config = repository.get_config()

    assert config["show_header"] is False
    assert config["log_level"] == "INFO"
    assert repository.flush() is True
    assert safe_load(path.read_text())["onboarding_complete"] is False


def test_update_is_written_on_flush(config_path, configuration_repository):
    configuration_repository.update_config(
        log_level="debug", default_period="week", reminder_time="07:30"
    )
    configuration_repository.flush()

    stored = safe_load(config_path.read_text())
    assert stored["log_level"] == "DEBUG"
    assert stored["default_period"] == "week"
    assert stored["reminder_time"] == "07:30"


def test_data_path_can_be_removed(configuration_repository):
    configuration_repository.update_config(data_path="/tmp/bristol")
    assert configuration_repository.get_config()["data_path"] == "/tmp/bristol"

    configuration_repository.update_config(remove_data_path=True)
    assert configuration_repository.get_config()["data_path"] is None


def test_get_config_returns_a_copy(configuration_repository):
    configuration_repository.get_config()["show_header"] = False
    assert configuration_repository.get_config()["show_header"] is True


def test_unreadable_file(tmp_path):
    with pytest.raises(StoreError):
        ConfigurationRepository(tmp_path / "missing.yaml").get_config()
