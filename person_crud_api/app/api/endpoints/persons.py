"""
Person endpoints.

These routes expose a CRUD API for person records.  Lookups, updates
and deletes of an unknown id answer 404 with an empty body.  Malformed
bodies and ids that are not 64-bit integers never reach the service;
the application's validation handler turns them into 400 responses.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from person_crud_api.app.api.deps import get_person_service
from person_crud_api.app.schemas.person import ID_MAX, ID_MIN, Person, PersonCreate, PersonUpdate
from person_crud_api.app.services.person_service import PersonService

router = APIRouter()


@router.get("", response_model=List[Person])
async def list_persons(
    service: PersonService = Depends(get_person_service),
) -> List[Person]:
    """Return all persons."""
    return await service.get_all_persons()


@router.get("/{person_id}", response_model=Person)
async def get_person(
    person_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: PersonService = Depends(get_person_service),
):
    """Retrieve a single person by ID."""
    person = await service.get_person_by_id(person_id)
    if person is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return person


@router.post("", response_model=Person, status_code=status.HTTP_201_CREATED)
async def create_person(
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Create a new person; the identifier is assigned by the database."""
    person = Person(**person_in.model_dump())
    return await service.create_person(person)


@router.put("/{person_id}", response_model=Person)
async def update_person(
    person_in: PersonUpdate,
    person_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: PersonService = Depends(get_person_service),
):
    """Replace the editable fields of an existing person."""
    person = await service.update_person(person_id, person_in)
    if person is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return person


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Delete a person."""
    deleted = await service.delete_person(person_id)
    if not deleted:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
