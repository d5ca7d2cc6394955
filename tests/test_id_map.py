"""Short listing numbers for entry ids."""

from bristol.repository.id_map import IdMapRepository


def test_numbers_are_assigned_in_order(id_map_repository):
    assert id_map_repository.associate_id("a") == 1
    assert id_map_repository.associate_id("b") == 2
    assert id_map_repository.associate_id("a") == 1
    assert id_map_repository.get_real_id(2) == "b"
    assert id_map_repository.get_real_id(99) is None


def test_clear_restarts_numbering(id_map_repository):
    id_map_repository.associate_id("a")
    id_map_repository.clear_ids()
    assert id_map_repository.get_real_id(1) is None
    assert id_map_repository.associate_id("b") == 1


def test_survives_a_reload(tmp_path):
    path = tmp_path / "id_map.yaml"
    repository = IdMapRepository(path)
    repository.associate_id("a")
    repository.associate_id("b")
    assert repository.flush() is True

    assert IdMapRepository(path).get_real_id(2) == "b"
