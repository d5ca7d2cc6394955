# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bristol import configuration
from bristol.logger import get_logger
from bristol.repository.error import StoreError

logger = get_logger(__name__)


class ConfigurationRepository:
    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        try:
            raw_config = load(self.config_path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, yaml.YAMLError) as e:
            raise StoreError(f"Could not read configuration {self.config_path}: {e}")

        if raw_config is None:
            raw_config = {}

        # Migration: back-fill any setting added after the file was created
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in raw_config:
                raw_config[key] = value
                self.is_dirty = True

        self._config = cast(configuration.Configuration, raw_config)

    def __save_data(self, config: configuration.Configuration) -> None:
        try:
            self.config_path.write_text(
                dump(dict(config), Dumper=Dumper), encoding="utf-8"
            )
        except OSError as e:
            raise StoreError(f"Could not write configuration {self.config_path}: {e}")

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        log_level: Optional[str] = None,
        default_period: Optional[configuration.Period] = None,
        reminder_enabled: Optional[bool] = None,
        reminder_time: Optional[str] = None,
        onboarding_complete: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True
        changed: dict[str, Any] = {}

        if show_header is not None:
            self.config["show_header"] = show_header
            changed["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
            changed["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
            changed["data_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
            changed["log_level"] = log_level.upper()
        if default_period is not None:
            self.config["default_period"] = default_period
            changed["default_period"] = default_period
        if reminder_enabled is not None:
            self.config["reminder_enabled"] = reminder_enabled
            changed["reminder_enabled"] = reminder_enabled
        if reminder_time is not None:
            self.config["reminder_time"] = reminder_time
            changed["reminder_time"] = reminder_time
        if onboarding_complete is not None:
            self.config["onboarding_complete"] = onboarding_complete
            changed["onboarding_complete"] = onboarding_complete

        logger.info("config_updated", **changed)
