# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bristol.model.entity_id import EntityId
from bristol.repository.error import StoreError


class IdMap(TypedDict):
    """
    Short numbers shown in listings, mapped to the store's entry ids.

    synthetic_to_real[3] is the real id of the entry listed as 3.
    """

    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]


def get_id_map_template() -> IdMap:
    return {"synthetic_to_real": {}, "real_to_synthetic": {}}


class IdMapRepository:
    def __init__(self, id_map_path: Path) -> None:
        self.id_map_path = id_map_path
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        if not self.id_map_path.is_file():
            self._id_map = get_id_map_template()
            return
        try:
            loaded = load(self.id_map_path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, yaml.YAMLError) as e:
            raise StoreError(f"Could not read id map {self.id_map_path}: {e}")
        self._id_map = loaded if loaded is not None else get_id_map_template()

    def __save_data(self, id_map: IdMap) -> None:
        try:
            self.id_map_path.parent.mkdir(parents=True, exist_ok=True)
            self.id_map_path.write_text(dump(dict(id_map), Dumper=Dumper), encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Could not write id map {self.id_map_path}: {e}")

    def flush(self) -> bool:
        if self._id_map is not None and self.is_dirty:
            self.__save_data(self._id_map)
            self.is_dirty = False
            return True
        return False

    def clear_ids(self) -> None:
        self.is_dirty = True
        self._id_map = get_id_map_template()

    def associate_id(self, entity_id: EntityId) -> int:
        """
        Create a new synthetic id to associate with an entity id
        """
        if entity_id in self.id_map["real_to_synthetic"]:
            return self.id_map["real_to_synthetic"][entity_id]

        self.is_dirty = True
        next_id = len(self.id_map["real_to_synthetic"]) + 1
        self.id_map["real_to_synthetic"][entity_id] = next_id
        self.id_map["synthetic_to_real"][next_id] = entity_id
        return next_id

    def get_real_id(self, synthetic_id: int) -> Optional[EntityId]:
        """
        Get the entity id associated with a synthetic id
        """
        return self.id_map["synthetic_to_real"].get(synthetic_id)
