"""
Service layer for person records.

Reads and creates are plain delegation to the repository.  Updates
and deletes are read-modify-write: the existing record is looked up
first and nothing is written when it is missing.  A missing record is
reported as ``None`` (update, lookup) or ``False`` (delete), never as
an exception.

The lookup and the following write are separate repository calls with
no lock or version check between them.  Within one process the
methods never yield to the event loop in between, but two worker
processes can still interleave on the same id.

The methods are ``async`` to match the route handlers, but the
repository calls underneath are blocking ``sqlite3`` calls that run on
the event loop thread.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from person_crud_api.app.repositories.person_repository import PersonRepository
from person_crud_api.app.schemas.person import Person, PersonBase, describe_person


logger = logging.getLogger(__name__)


class PersonService:
    """Business operations on persons."""

    def __init__(self, repository: PersonRepository) -> None:
        self.repository = repository

    async def get_all_persons(self) -> List[Person]:
        return self.repository.find_all()

    async def get_person_by_id(self, person_id: int) -> Optional[Person]:
        return self.repository.find_by_id(person_id)

    async def create_person(self, person: Person) -> Person:
        """Persist ``person`` and return it with its identifier."""
        created = self.repository.save(person)
        logger.info("Created %s", describe_person(created))
        return created

    async def update_person(self, person_id: int, details: PersonBase) -> Optional[Person]:
        """Overwrite the editable fields of an existing person.

        First name, last name, email, phone number, address and age are
        copied from ``details``; the identifier is never changed.
        Returns the stored result, or ``None`` without writing anything
        if ``person_id`` does not exist.
        """
        existing = self.repository.find_by_id(person_id)
        if existing is None:
            return None
        existing.first_name = details.first_name
        existing.last_name = details.last_name
        existing.email = details.email
        existing.phone_number = details.phone_number
        existing.address = details.address
        existing.age = details.age
        updated = self.repository.save(existing)
        logger.info("Updated %s", describe_person(updated))
        return updated

    async def delete_person(self, person_id: int) -> bool:
        """Delete a person by id.

        Returns ``True`` if the person existed and was deleted,
        ``False`` otherwise.
        """
        existing = self.repository.find_by_id(person_id)
        if existing is None:
            return False
        self.repository.delete(existing)
        logger.info("Deleted person %s", person_id)
        return True
