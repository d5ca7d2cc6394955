# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "bristol"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)
LOG_FILE_PATH: Path = LOG_PATH / "bristol.log"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_DIR: Path = DATA_PATH / "entries"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"

Period = Literal["week", "month", "all"]


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    log_level: str
    default_period: Period
    reminder_enabled: bool
    reminder_time: str  # HH:mm, local time
    onboarding_complete: bool


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "log_level": "INFO",
        "default_period": "month",
        "reminder_enabled": False,
        "reminder_time": "20:00",
        "onboarding_complete": False,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    global DATA_PATH, DATA_ENTRIES_DIR, DATA_ID_MAP_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_ENTRIES_DIR = DATA_PATH / "entries"
        DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
