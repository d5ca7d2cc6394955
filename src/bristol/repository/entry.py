# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Literal, Optional, cast

import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bristol import time
from bristol.logger import get_logger
from bristol.model.entity_id import EntityId, generate_entity_id
from bristol.model.entry import Entry
from bristol.model.stool_form import UNSPECIFIED_STOOL_FORM
from bristol.repository.error import StoreError

StoreEvent = Literal["inserted", "deleted"]
StoreListener = Callable[[StoreEvent, EntityId], None]

logger = get_logger(__name__)


class EntryRepository:
    def __init__(self, entries_dir: Path) -> None:
        self.entries_dir = entries_dir
        self._entries: Optional[list[Entry]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()
        self._listeners: list[StoreListener] = []

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        entries: list[Entry] = []
        if self.entries_dir.is_dir():
            try:
                for file_path in sorted(self.entries_dir.iterdir()):
                    if file_path.suffix != ".yaml":
                        continue
                    raw_entry = load(file_path.read_text(encoding="utf-8"), Loader=Loader)
                    if raw_entry is not None:
                        entries.append(
                            self.__convert_entry_for_deserialization(raw_entry)
                        )
            except (OSError, yaml.YAMLError) as e:
                logger.error("store_load_failed", path=str(self.entries_dir), error=str(e))
                raise StoreError(f"Could not read entries from {self.entries_dir}: {e}")
        self._entries = entries
        logger.debug("store_loaded", path=str(self.entries_dir), count=len(entries))

    def __save_data(self) -> None:
        try:
            self.entries_dir.mkdir(parents=True, exist_ok=True)

            # Write dirty entities
            for entry in self.entries:
                if entry["id"] in self._dirty_ids:
                    serializable_entry = self.__convert_entry_for_serialization(
                        deepcopy(entry)
                    )
                    file_path = self.entries_dir / f"{entry['id']}.yaml"
                    file_path.write_text(
                        dump(serializable_entry, Dumper=Dumper, allow_unicode=True),
                        encoding="utf-8",
                    )

            # Remove hard-deleted entity files
            for entity_id in self._deleted_ids:
                file_path = self.entries_dir / f"{entity_id}.yaml"
                if file_path.exists():
                    file_path.unlink()
        except OSError as e:
            logger.error("store_flush_failed", path=str(self.entries_dir), error=str(e))
            raise StoreError(f"Could not write entries to {self.entries_dir}: {e}")

        logger.info(
            "store_flushed",
            written=len(self._dirty_ids),
            removed=len(self._deleted_ids),
        )

        # Clear tracking sets
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._entries is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["timestamp"] = time.datetime_to_iso_str_optional(
            serializable_entry["timestamp"]
        )
        serializable_entry["created"] = time.datetime_to_iso_str(
            serializable_entry["created"]
        )
        return serializable_entry

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        deserializable_entry = entry
        deserializable_entry["timestamp"] = time.datetime_from_str_optional(
            deserializable_entry.get("timestamp")
        )
        deserializable_entry["created"] = time.datetime_from_str(
            deserializable_entry["created"]
        )
        # Older records may predate some fields
        deserializable_entry.setdefault("stool_form", UNSPECIFIED_STOOL_FORM)
        deserializable_entry.setdefault("color", None)
        deserializable_entry.setdefault("volume", None)
        deserializable_entry.setdefault("has_pain", False)
        deserializable_entry.setdefault("has_blood", False)
        deserializable_entry.setdefault("has_mucus", False)
        deserializable_entry.setdefault("comment", None)
        return cast(Entry, deserializable_entry)

    def subscribe(self, listener: StoreListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def __notify(self, event: StoreEvent, entity_id: EntityId) -> None:
        for listener in list(self._listeners):
            listener(event, entity_id)

    def save_new_entry(self, entry: Entry) -> EntityId:
        self.is_dirty = True

        new_entry = deepcopy(entry)
        new_entry["id"] = generate_entity_id()

        self.entries.append(new_entry)
        self._dirty_ids.add(new_entry["id"])

        logger.info("entry_inserted", entry_id=new_entry["id"])
        self.__notify("inserted", new_entry["id"])

        return new_entry["id"]

    def delete_entry(self, id: EntityId) -> None:
        matching = [entry for entry in self.entries if entry["id"] == id]
        if len(matching) == 0:
            logger.debug("entry_delete_ignored", entry_id=id)
            return

        self.is_dirty = True
        self.entries.remove(matching[0])
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

        logger.info("entry_deleted", entry_id=id)
        self.__notify("deleted", id)

    def get_all_entries(self) -> list[Entry]:
        """All entries, newest first; entries without a timestamp come last."""
        timestamped = [entry for entry in self.entries if entry["timestamp"] is not None]
        untimestamped = [entry for entry in self.entries if entry["timestamp"] is None]
        timestamped.sort(
            key=lambda entry: cast(Any, entry["timestamp"]), reverse=True
        )
        return deepcopy(timestamped + untimestamped)

    def get_entry(self, id: EntityId) -> Entry:
        return deepcopy([entry for entry in self.entries if entry["id"] == id][0])

    def has_entry(self, id: EntityId) -> bool:
        return any(entry["id"] == id for entry in self.entries)
