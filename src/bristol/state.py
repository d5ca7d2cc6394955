# SPDX-License-Identifier: MIT

import click

from bristol.logger import get_logger
from bristol.model.entity_id import EntityId
from bristol.repository.configuration import ConfigurationRepository
from bristol.repository.entry import EntryRepository, StoreEvent
from bristol.repository.id_map import IdMapRepository

logger = get_logger(__name__)


class AppState:
    """
    Repositories for one invocation, handed to commands through ctx.obj.

    Store changes are recorded as they are published. Commands that mutate
    the store take them afterwards and re-render the days they touched.
    """

    def __init__(
        self,
        configuration_repository: ConfigurationRepository,
        entry_repository: EntryRepository,
        id_map_repository: IdMapRepository,
    ) -> None:
        self.configuration_repository = configuration_repository
        self.entry_repository = entry_repository
        self.id_map_repository = id_map_repository
        self.changes: list[tuple[StoreEvent, EntityId]] = []
        self.entry_repository.subscribe(self.on_store_change)

    def on_store_change(self, event: StoreEvent, entity_id: EntityId) -> None:
        self.changes.append((event, entity_id))
        logger.debug("store_changed", store_event=event, entry_id=entity_id)

    def take_changes(self) -> list[tuple[StoreEvent, EntityId]]:
        """Changes recorded since the last call, oldest first."""
        changes, self.changes = self.changes, []
        return changes


def get_app_state(ctx: click.Context) -> AppState:
    app_state = ctx.find_object(AppState)
    if app_state is None:
        raise RuntimeError("Application state was not initialized")
    return app_state
