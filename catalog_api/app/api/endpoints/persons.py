"""
Person endpoints.

CRUD over the in-memory person store.  Ids in request bodies are
ignored; a missing id yields a 404 through the ``NotFound`` handler.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from catalog_api.app.dependencies import get_person_service
from catalog_api.app.schemas.person import PersonCreate, PersonRead
from catalog_api.app.services.person_service import PersonService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[PersonRead])
def list_persons(service: PersonService = Depends(get_person_service)) -> List[PersonRead]:
    """Return every stored person ordered by id."""
    return [PersonRead.model_validate(person) for person in service.find_all()]


@router.get("/{person_id}", response_model=PersonRead)
def get_person(person_id: int, service: PersonService = Depends(get_person_service)) -> PersonRead:
    return PersonRead.model_validate(service.find_by_id(person_id))


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
def create_person(
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> PersonRead:
    person = service.create(person_in.to_person())
    logger.info("Created person %s", person.id)
    return PersonRead.model_validate(person)


@router.put("/{person_id}", response_model=PersonRead)
def update_person(
    person_id: int,
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> PersonRead:
    """Replace the person stored under ``person_id``."""
    person = service.update(person_id, person_in.to_person())
    logger.info("Updated person %s", person_id)
    return PersonRead.model_validate(person)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: int, service: PersonService = Depends(get_person_service)) -> Response:
    service.delete(person_id)
    logger.info("Deleted person %s", person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
