"""
Shared fixtures for the bristol test suite.

Timestamps are built in a fixed local time zone so that day bucketing does
not depend on the machine running the tests.
"""

from typing import Callable, Optional

import pendulum
import pytest
from pendulum.tz.local_timezone import test_local_timezone as local_timezone_override
from yaml import dump

from bristol import configuration
from bristol.model.entry import Entry, Volume
from bristol.repository.configuration import ConfigurationRepository
from bristol.repository.entry import EntryRepository
from bristol.repository.id_map import IdMapRepository

LOCAL_TIMEZONE = "Asia/Tokyo"


# ─────────────────────────────────────────────────────────
# Time
# ─────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def local_timezone():
    with local_timezone_override(pendulum.timezone(LOCAL_TIMEZONE)):
        yield


def at(
    day: int,
    hour: int = 12,
    minute: int = 0,
    month: int = 3,
    year: int = 2024,
) -> pendulum.DateTime:
    """A local wall-clock time, March 2024 unless told otherwise."""
    return pendulum.datetime(year, month, day, hour, minute, tz=LOCAL_TIMEZONE)


# ─────────────────────────────────────────────────────────
# Entries
# ─────────────────────────────────────────────────────────


def build_entry(
    timestamp: Optional[pendulum.DateTime],
    stool_form: int = 4,
    color: Optional[str] = "Brown",
    volume: Optional[Volume] = "medium",
    has_pain: bool = False,
    has_blood: bool = False,
    has_mucus: bool = False,
    comment: Optional[str] = None,
    id: Optional[str] = None,
) -> Entry:
    return {
        "id": id,
        "timestamp": timestamp,
        "stool_form": stool_form,
        "color": color,
        "volume": volume,
        "has_pain": has_pain,
        "has_blood": has_blood,
        "has_mucus": has_mucus,
        "comment": comment,
        "created": timestamp if timestamp is not None else at(1),
    }


@pytest.fixture
def make_entry() -> Callable[..., Entry]:
    return build_entry


# ─────────────────────────────────────────────────────────
# Repositories
# ─────────────────────────────────────────────────────────


@pytest.fixture
def entry_repository(tmp_path) -> EntryRepository:
    return EntryRepository(tmp_path / "entries")


@pytest.fixture
def id_map_repository(tmp_path) -> IdMapRepository:
    return IdMapRepository(tmp_path / "id_map.yaml")


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(dump(dict(configuration.get_default_configuration())))
    return path


@pytest.fixture
def configuration_repository(config_path) -> ConfigurationRepository:
    return ConfigurationRepository(config_path)


# ─────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────


@pytest.fixture
def isolated_paths(tmp_path, monkeypatch):
    """Point every configuration and data path into tmp_path."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "log"

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", log_dir)
    monkeypatch.setattr(configuration, "LOG_FILE_PATH", log_dir / "bristol.log")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_ENTRIES_DIR", data_dir / "entries")
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_dir / "id_map.yaml")

    return tmp_path
