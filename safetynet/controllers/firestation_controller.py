# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Fire station coverage and mapping CRUD endpoints.
Thin HTTP layer — delegates ALL logic to Resolver / FireStationService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from starlette.responses import Response

from safetynet.core.dependencies import get_fire_station_service, get_resolver
from safetynet.core.errors import ValidationError
from safetynet.models.domain import StationAssignment
from safetynet.models.views import CoverageSummary
from safetynet.schemas.records import FireStationInput
from safetynet.services.fire_station_service import FireStationService
from safetynet.services.resolver import Resolver

router = APIRouter(prefix="/firestation", tags=["Fire Stations"])


@router.get("", response_model=CoverageSummary)
def get_persons_covered_by_station(
    station_number: int = Query(..., alias="stationNumber", gt=0),
    resolver: Resolver = Depends(get_resolver),
):
    """Residents covered by a station with adult and child counts."""
    return resolver.coverage_by_station(station_number)


@router.get("/all", response_model=list[StationAssignment])
def list_fire_stations(
    service: FireStationService = Depends(get_fire_station_service),
):
    """List every address-to-station mapping."""
    return service.list_mappings()


@router.get("/mapping", response_model=StationAssignment)
def get_fire_station(
    address: str = Query(..., min_length=1),
    service: FireStationService = Depends(get_fire_station_service),
):
    """Get the station mapping of one address."""
    return service.get_mapping(address)


@router.post("", status_code=201, response_model=StationAssignment)
def add_fire_station(
    payload: FireStationInput,
    service: FireStationService = Depends(get_fire_station_service),
):
    """Map an address to a station. 409 if the address is already mapped."""
    return service.add_mapping(payload.address, payload.station)


@router.put("", response_model=StationAssignment)
def update_fire_station(
    payload: FireStationInput,
    service: FireStationService = Depends(get_fire_station_service),
):
    """Change the station number of a mapped address."""
    return service.update_mapping(payload.address, payload.station)


@router.delete("", status_code=204)
def delete_fire_station(
    address: Optional[str] = None,
    station: Optional[int] = Query(default=None, gt=0),
    service: FireStationService = Depends(get_fire_station_service),
):
    """Delete the mapping of one address, or every mapping of a station."""
    if address is not None and address.strip():
        service.delete_by_address(address)
    elif station is not None:
        service.delete_by_station(station)
    else:
        raise ValidationError("Invalid DELETE request: provide 'address' or 'station'")
    return Response(status_code=204)
