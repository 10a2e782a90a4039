# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Person CRUD endpoints.
Thin HTTP layer — delegates ALL logic to PersonService.
"""

from fastapi import APIRouter, Depends, Query
from starlette.responses import Response

from safetynet.core.dependencies import get_person_service
from safetynet.models.domain import Resident
from safetynet.schemas.records import PersonInput
from safetynet.services.person_service import PersonService

router = APIRouter(prefix="/person", tags=["Persons"])


@router.get("", response_model=list[Resident])
def list_persons(
    service: PersonService = Depends(get_person_service),
):
    """List every person."""
    return service.list_persons()


@router.get("/byName", response_model=Resident)
def get_person(
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    service: PersonService = Depends(get_person_service),
):
    """Get the first person with this name."""
    return service.get_person(first_name, last_name)


@router.post("", status_code=201, response_model=Resident)
def add_person(
    payload: PersonInput,
    service: PersonService = Depends(get_person_service),
):
    """Add a person. 409 if the same name already lives at that address."""
    return service.add_person(payload.to_resident())


@router.put("", response_model=Resident)
def update_person(
    payload: PersonInput,
    service: PersonService = Depends(get_person_service),
):
    """Update the contact details of the person named in the body."""
    return service.update_person(
        payload.first_name, payload.last_name, payload.contact_changes()
    )


@router.delete("", status_code=204)
def delete_person(
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    service: PersonService = Depends(get_person_service),
):
    """Delete every person with this name."""
    service.delete_person(first_name, last_name)
    return Response(status_code=204)
