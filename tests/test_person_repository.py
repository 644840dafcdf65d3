from person_crud_api.app.core.db import get_cursor, init_db
from person_crud_api.app.schemas.person import Person


def make_person(**overrides):
    fields = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "phone_number": "123-456-7890",
        "address": "123 Main St",
        "age": 30,
    }
    fields.update(overrides)
    return Person(**fields)


def test_save_assigns_id_and_find_by_id(repository):
    saved = repository.save(make_person())

    assert saved.id is not None
    assert saved.first_name == "John"
    found = repository.find_by_id(saved.id)
    assert found == saved
    assert found.email == "john.doe@example.com"


def test_find_all(repository):
    repository.save(make_person(email="john@example.com"))
    repository.save(make_person(first_name="Jane", last_name="Smith", email="jane@example.com"))

    persons = repository.find_all()
    assert [p.email for p in persons] == ["john@example.com", "jane@example.com"]


def test_find_all_empty(repository):
    assert repository.find_all() == []


def test_find_by_missing_id_returns_none(repository):
    assert repository.find_by_id(999) is None


def test_save_with_id_overwrites_existing_row(repository):
    saved = repository.save(make_person())
    saved.first_name = "Updated"
    saved.age = 35

    updated = repository.save(saved)

    assert updated.id == saved.id
    assert updated.first_name == "Updated"
    assert updated.age == 35
    assert repository.count() == 1


def test_save_with_unknown_id_inserts_under_that_id(repository):
    saved = repository.save(make_person(id=50))

    assert saved.id == 50
    assert repository.exists_by_id(50)


def test_delete(repository):
    saved = repository.save(make_person())
    assert repository.find_by_id(saved.id) is not None

    repository.delete(saved)

    assert repository.find_by_id(saved.id) is None


def test_delete_unsaved_person_is_noop(repository):
    repository.save(make_person())
    repository.delete(make_person())
    assert repository.count() == 1


def test_ids_are_not_reused_after_delete(repository):
    first = repository.save(make_person())
    repository.delete(first)

    second = repository.save(make_person())

    assert second.id != first.id


def test_exists_by_id(repository):
    saved = repository.save(make_person())
    assert repository.exists_by_id(saved.id)
    assert not repository.exists_by_id(999)


def test_count(repository):
    initial = repository.count()
    repository.save(make_person())
    assert repository.count() == initial + 1


def test_count_after_creates_and_deletes(repository):
    saved = [repository.save(make_person(email=f"p{i}@example.com")) for i in range(5)]
    for person in saved[:2]:
        repository.delete(person)
    assert repository.count() == 3


def test_init_db_is_idempotent(database):
    init_db()
    with get_cursor() as cursor:
        cursor.execute("SELECT COUNT(*) AS total FROM migrations")
        assert cursor.fetchone()["total"] == 1
