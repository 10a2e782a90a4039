# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Alert endpoints — child, phone, fire, flood, person info and
community email lookups.
Thin HTTP layer — delegates ALL logic to the Resolver.
"""

from fastapi import APIRouter, Depends, Query

from safetynet.core.dependencies import get_resolver
from safetynet.core.errors import NotFoundError, ValidationError
from safetynet.models.views import (
    ChildAlert,
    CommunityEmail,
    FireAlert,
    FloodAlert,
    PersonInfo,
    PhoneAlert,
)
from safetynet.schemas.records import parse_station_list
from safetynet.services.resolver import Resolver

router = APIRouter(tags=["Alerts"])


def _required(value: str, name: str) -> str:
    if not value.strip():
        raise ValidationError(f"'{name}' must not be blank", {name: value})
    return value


@router.get("/childAlert", response_model=ChildAlert)
def get_children_at_address(
    address: str = Query(..., description="Street address"),
    resolver: Resolver = Depends(get_resolver),
):
    """Children living at an address and the other members of the household."""
    return resolver.children_at_address(_required(address, "address"))


@router.get("/phoneAlert", response_model=PhoneAlert)
def get_phone_numbers_by_station(
    firestation: int = Query(..., gt=0, description="Fire station number"),
    resolver: Resolver = Depends(get_resolver),
):
    """Phone numbers of every resident covered by a station."""
    return resolver.phone_numbers_by_station(firestation)


@router.get("/fire", response_model=FireAlert)
def get_residents_by_address(
    address: str = Query(..., description="Street address"),
    resolver: Resolver = Depends(get_resolver),
):
    """Residents of an address with medical details and the covering station."""
    return resolver.residents_and_station_by_address(_required(address, "address"))


@router.get("/flood/stations", response_model=FloodAlert)
def get_households_by_stations(
    stations: str = Query(..., description="Comma-separated station numbers"),
    resolver: Resolver = Depends(get_resolver),
):
    """Households covered by the given stations, grouped by address."""
    return resolver.households_by_stations(parse_station_list(stations))


@router.get("/personInfo", response_model=PersonInfo)
def get_person_info(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
    resolver: Resolver = Depends(get_resolver),
):
    """Address, age, email and medical details of a person. Name match ignores case."""
    info = resolver.person_info(
        _required(first_name, "firstName"), _required(last_name, "lastName")
    )
    if info is None:
        raise NotFoundError.person(first_name, last_name)
    return info


@router.get("/personInfo/byLastName", response_model=list[PersonInfo])
def get_persons_by_last_name(
    last_name: str = Query(..., alias="lastName"),
    resolver: Resolver = Depends(get_resolver),
):
    """Details of every person sharing a last name."""
    persons = resolver.persons_by_last_name(_required(last_name, "lastName"))
    if not persons:
        raise NotFoundError(
            f"No person found with last name {last_name}", {"lastName": last_name}
        )
    return persons


@router.get("/communityEmail", response_model=CommunityEmail)
def get_emails_by_city(
    city: str = Query(..., description="City name, case-insensitive"),
    resolver: Resolver = Depends(get_resolver),
):
    """Email addresses of every resident of a city."""
    return resolver.emails_by_city(_required(city, "city"))
