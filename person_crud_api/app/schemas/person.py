"""
Pydantic schemas for person records.

A person has a storage-assigned integer ``id`` and six editable
fields.  On the wire every field uses camelCase (``firstName``,
``phoneNumber`` ...); Python code uses the snake_case attribute names.
All editable fields are nullable, but a value of the wrong JSON type
is rejected during validation.

Two records are the same person when they share an ``id`` or share an
``email``.  This is a business rule for deduplication and lives in
:func:`same_person`; the models keep Pydantic's ordinary field-by-field
``==``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Ids are stored as SQLite INTEGER (64-bit); ages are 32-bit.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1
AGE_MIN = -(2**31)
AGE_MAX = 2**31 - 1


class PersonBase(BaseModel):
    """Fields shared by every person payload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: Optional[str] = Field(None, description="Given name")
    last_name: Optional[str] = Field(None, description="Family name")
    email: Optional[str] = Field(None, description="Contact e-mail address")
    phone_number: Optional[str] = Field(None, description="Contact phone number")
    address: Optional[str] = Field(None, description="Postal address")
    age: Optional[int] = Field(None, ge=AGE_MIN, le=AGE_MAX, description="Age in years")


class PersonCreate(PersonBase):
    """Schema for creating a person.

    Any ``id`` sent by the client is ignored; identifiers are assigned
    by the database.
    """


class PersonUpdate(PersonBase):
    """Schema for replacing the editable fields of an existing person.

    Every field is written, so an omitted field is stored as null.
    """


class Person(PersonBase):
    """A person record as stored and returned by the API."""

    id: Optional[int] = Field(None, ge=ID_MIN, le=ID_MAX, description="Identifier assigned on creation")


def same_person(a: Any, b: Any) -> bool:
    """Return ``True`` if ``a`` and ``b`` denote the same person.

    Matching non-null identifiers or matching non-null e-mail addresses
    are each sufficient; other fields are not compared.
    """
    if not isinstance(a, PersonBase) or not isinstance(b, PersonBase):
        return False
    if a is b:
        return True
    a_id = getattr(a, "id", None)
    b_id = getattr(b, "id", None)
    if a_id is not None and b_id is not None and a_id == b_id:
        return True
    return a.email is not None and b.email is not None and a.email == b.email


def _quoted(value: Optional[str]) -> str:
    return "null" if value is None else f"'{value}'"


def describe_person(person: PersonBase) -> str:
    """Render a person for log messages."""
    person_id = getattr(person, "id", None)
    age = "null" if person.age is None else person.age
    return (
        f"Person{{id={'null' if person_id is None else person_id}, "
        f"firstName={_quoted(person.first_name)}, "
        f"lastName={_quoted(person.last_name)}, "
        f"email={_quoted(person.email)}, "
        f"phoneNumber={_quoted(person.phone_number)}, "
        f"address={_quoted(person.address)}, "
        f"age={age}}}"
    )
