"""
Dependency providers for the API routes.

Objects are composed explicitly here: a repository is created and
handed to the service constructor.  Tests replace either provider via
``app.dependency_overrides``.
"""

from fastapi import Depends

from person_crud_api.app.repositories.person_repository import PersonRepository
from person_crud_api.app.services.person_service import PersonService


def get_person_repository() -> PersonRepository:
    return PersonRepository()


def get_person_service(
    repository: PersonRepository = Depends(get_person_repository),
) -> PersonService:
    return PersonService(repository)
