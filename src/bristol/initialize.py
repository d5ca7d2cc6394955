# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from bristol import configuration
from bristol.logger import get_logger, setup_logging
from bristol.repository.configuration import ConfigurationRepository
from bristol.repository.entry import EntryRepository
from bristol.repository.id_map import IdMapRepository
from bristol.state import AppState
from bristol.view import state as view_state

logger = get_logger(__name__)


def initialize() -> AppState:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    configuration_repository = ConfigurationRepository(configuration.APP_CONFIG_PATH)
    config = configuration_repository.get_config()

    setup_logging(config["log_level"], configuration.LOG_FILE_PATH)
    view_state.set_show_header(config["show_header"])

    logger.debug("initialized", data_path=str(configuration.DATA_PATH))

    return AppState(
        configuration_repository=configuration_repository,
        entry_repository=EntryRepository(configuration.DATA_ENTRIES_DIR),
        id_map_repository=IdMapRepository(configuration.DATA_ID_MAP_PATH),
    )


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    # Directory-based entity store (one file per entry)
    if not configuration.DATA_ENTRIES_DIR.is_dir():
        configuration.DATA_ENTRIES_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_ENTRIES_DIR / ".gitkeep").touch()
