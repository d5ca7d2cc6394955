"""Store changes collected by the per-invocation application state."""

from bristol.state import AppState
from conftest import at, build_entry


def test_changes_are_taken_once(
    configuration_repository, entry_repository, id_map_repository
):
    app_state = AppState(configuration_repository, entry_repository, id_map_repository)

    first = entry_repository.save_new_entry(build_entry(at(5, 8)))
    second = entry_repository.save_new_entry(build_entry(at(6, 9)))
    entry_repository.delete_entry(first)

    assert app_state.take_changes() == [
        ("inserted", first),
        ("inserted", second),
        ("deleted", first),
    ]
    assert app_state.take_changes() == []


def test_unknown_delete_records_nothing(
    configuration_repository, entry_repository, id_map_repository
):
    app_state = AppState(configuration_repository, entry_repository, id_map_repository)

    entry_repository.delete_entry("missing")

    assert app_state.take_changes() == []
