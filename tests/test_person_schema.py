import pytest
from pydantic import ValidationError

from person_crud_api.app.schemas.person import (
    Person,
    PersonCreate,
    describe_person,
    same_person,
)


@pytest.fixture
def john():
    return Person(
        id=1,
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        phone_number="123-456-7890",
        address="123 Main St",
        age=30,
    )


def test_parses_camel_case_payload():
    person = Person.model_validate(
        {"id": 7, "firstName": "Ada", "lastName": "Lovelace", "phoneNumber": "555", "age": 36}
    )
    assert person.id == 7
    assert person.first_name == "Ada"
    assert person.phone_number == "555"
    assert person.email is None


def test_serializes_with_camel_case_aliases(john):
    data = john.model_dump(by_alias=True)
    assert data == {
        "id": 1,
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phoneNumber": "123-456-7890",
        "address": "123 Main St",
        "age": 30,
    }


def test_create_schema_ignores_id():
    person = PersonCreate.model_validate({"id": 42, "firstName": "Ada"})
    assert not hasattr(person, "id")
    assert person.first_name == "Ada"


def test_rejects_wrong_field_type():
    with pytest.raises(ValidationError):
        Person.model_validate({"firstName": "Ada", "age": "old"})


def test_same_person_is_reflexive(john):
    assert same_person(john, john)


def test_same_person_rejects_none_and_other_types(john):
    assert not same_person(john, None)
    assert not same_person(john, "not a person")


def test_same_id_and_email_is_same_person(john):
    other = Person(id=1, first_name="Different", last_name="Person", email="john.doe@example.com", age=35)
    assert same_person(john, other)


def test_same_email_different_id_is_same_person(john):
    other = Person(id=2, first_name="Johnny", email="john.doe@example.com")
    assert same_person(john, other)


def test_same_id_different_email_is_same_person(john):
    other = Person(id=1, first_name="John", email="someone.else@example.com")
    assert same_person(john, other)


def test_different_id_and_email_is_not_same_person(john):
    jane = Person(id=2, first_name="Jane", last_name="Smith", email="jane.smith@example.com", age=25)
    assert not same_person(john, jane)


def test_null_ids_fall_back_to_email():
    first = Person(first_name="John", email="john@example.com")
    second = Person(first_name="Jane", email="john@example.com")
    assert same_person(first, second)


def test_null_emails_compare_by_id():
    first = Person(id=1, first_name="John")
    second = Person(id=1, first_name="Jane")
    assert same_person(first, second)


def test_null_id_and_null_email_is_not_same_person():
    assert not same_person(Person(first_name="A"), Person(first_name="A"))


def test_one_sided_id_falls_through_to_email():
    assert same_person(Person(id=1, email="x@example.com"), Person(email="x@example.com"))
    assert not same_person(Person(id=1, email="x@example.com"), Person(email="y@example.com"))


def test_describe_person(john):
    assert describe_person(john) == (
        "Person{id=1, firstName='John', lastName='Doe', "
        "email='john.doe@example.com', phoneNumber='123-456-7890', "
        "address='123 Main St', age=30}"
    )


def test_describe_person_with_nulls():
    text = describe_person(Person())
    assert text.startswith("Person{")
    assert "id=null" in text
    assert "age=null" in text
