"""Tests for the in-memory software engineer repository."""

from software_engineers_api.app.models.software_engineer import SoftwareEngineerEntity
from software_engineers_api.app.repositories.software_engineer_repository import SoftwareEngineerRepository

ENGINEER_NAME = "Pawa"
UPDATED_NAME = "Vladislav"
STACK = ["java", "spring"]


def test_create_assigns_id_and_stores_engineer(repository: SoftwareEngineerRepository):
    created = repository.create(ENGINEER_NAME, STACK)

    assert created.id == 1
    assert created.name == ENGINEER_NAME
    assert list(created.tech_stack) == STACK
    assert repository.find_by_id(created.id) == created


def test_find_by_id_returns_none_when_missing(repository: SoftwareEngineerRepository):
    assert repository.find_by_id(999) is None


def test_ids_strictly_increase_and_are_never_reused(repository: SoftwareEngineerRepository):
    ids = []
    for i in range(5):
        engineer = repository.create(f"Eng{i}", [])
        ids.append(engineer.id)
        if i % 2 == 0:
            repository.delete(engineer.id)

    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)

    repository.clear()
    assert repository.create("After", []).id == ids[-1] + 1


def test_list_returns_all_engineers(repository: SoftwareEngineerRepository):
    first = repository.create("Pawa", STACK)
    second = repository.create("Miha", ["java", "kotlin"])

    engineers = repository.list()

    assert {e.id for e in engineers} == {first.id, second.id}
    assert set(engineers) == {first, second}


def test_update_replaces_fields_and_preserves_id(repository: SoftwareEngineerRepository):
    created = repository.create(ENGINEER_NAME, STACK)

    repository.update(created.id, UPDATED_NAME, ["go"])

    updated = repository.find_by_id(created.id)
    assert updated == SoftwareEngineerEntity(id=created.id, name=UPDATED_NAME, tech_stack=("go",))
    assert repository.count() == 1


def test_update_unknown_id_inserts(repository: SoftwareEngineerRepository):
    # Existence is enforced by the command service, not by the repository.
    repository.update(42, "Ghost", None)

    assert repository.find_by_id(42) == SoftwareEngineerEntity(id=42, name="Ghost", tech_stack=())


def test_delete_removes_and_ignores_unknown_ids(repository: SoftwareEngineerRepository):
    created = repository.create(ENGINEER_NAME, STACK)

    repository.delete(created.id)
    repository.delete(created.id)
    repository.delete(-1)

    assert repository.find_by_id(created.id) is None
    assert repository.count() == 0


def test_clear_empties_store(repository: SoftwareEngineerRepository):
    repository.create("Pawa", STACK)
    repository.create("Miha", STACK)

    repository.clear()

    assert repository.list() == []


def test_tech_stack_is_copied_on_create(repository: SoftwareEngineerRepository):
    stack = ["java", "spring"]
    created = repository.create(ENGINEER_NAME, stack)

    stack.append("kotlin")
    stack[0] = "cobol"

    assert repository.find_by_id(created.id).tech_stack == ("java", "spring")


def test_missing_tech_stack_becomes_empty(repository: SoftwareEngineerRepository):
    created = repository.create(ENGINEER_NAME, None)

    assert created.tech_stack == ()


def test_seed_demo_data(repository: SoftwareEngineerRepository):
    seeded = repository.seed_demo_data()

    assert [(e.id, e.name) for e in seeded] == [(1, "Pawa"), (2, "Miha")]
    assert repository.find_by_id(2).tech_stack == ("java", "kotlin", "spring")
    assert repository.create("Next", []).id == 3
