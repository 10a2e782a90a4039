# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Medical record CRUD endpoints.
Thin HTTP layer — delegates ALL logic to MedicalRecordService.
"""

from fastapi import APIRouter, Depends, Query
from starlette.responses import Response

from safetynet.core.dependencies import get_medical_record_service
from safetynet.models.domain import MedicalProfile
from safetynet.schemas.records import MedicalRecordInput
from safetynet.services.medical_record_service import MedicalRecordService

router = APIRouter(prefix="/medicalRecord", tags=["Medical Records"])


@router.get("", response_model=MedicalProfile)
def get_medical_record(
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    service: MedicalRecordService = Depends(get_medical_record_service),
):
    """Get the medical record of a person."""
    return service.get_record(first_name, last_name)


@router.get("/all", response_model=list[MedicalProfile])
def list_medical_records(
    service: MedicalRecordService = Depends(get_medical_record_service),
):
    """List every medical record."""
    return service.list_records()


@router.post("", status_code=201, response_model=MedicalProfile)
def add_medical_record(
    payload: MedicalRecordInput,
    service: MedicalRecordService = Depends(get_medical_record_service),
):
    """Add a medical record."""
    return service.add_record(payload.to_profile())


@router.put("", response_model=MedicalProfile)
def update_medical_record(
    payload: MedicalRecordInput,
    service: MedicalRecordService = Depends(get_medical_record_service),
):
    """Replace birthdate, medications and allergies of the person named in the body."""
    return service.update_record(
        payload.first_name, payload.last_name, payload.medical_changes()
    )


@router.delete("", status_code=204)
def delete_medical_record(
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    service: MedicalRecordService = Depends(get_medical_record_service),
):
    """Delete the medical record of a person."""
    service.delete_record(first_name, last_name)
    return Response(status_code=204)
