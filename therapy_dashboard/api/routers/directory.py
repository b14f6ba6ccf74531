"""
Therapist and patient API endpoints.

Routes: GET /therapists, GET /patients

Dependencies: therapy_dashboard.application.services, therapy_dashboard.models
System role: Reference-data HTTP API for the create-session form
"""

from fastapi import APIRouter, Depends, Response

from therapy_dashboard.application.services.directory_service import DirectoryService
from therapy_dashboard.api.deps.dependencies import get_directory_service
from therapy_dashboard.api.routers.router_utils import DIRECTORY_CACHE, handle_api_errors
from therapy_dashboard.models.common import ErrorResponse
from therapy_dashboard.models.directory import PatientResponse, TherapistResponse

therapists_router = APIRouter(prefix="/therapists", tags=["therapists"])
patients_router = APIRouter(prefix="/patients", tags=["patients"])


@therapists_router.get("", response_model=list[TherapistResponse], responses={500: {"model": ErrorResponse}})
@handle_api_errors("Failed to fetch therapists")
async def list_therapists(
    response: Response,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> list[TherapistResponse]:
    """List therapists ordered by name."""
    therapists = await directory_service.list_therapists()
    response.headers["Cache-Control"] = DIRECTORY_CACHE
    return [TherapistResponse(**t) for t in therapists]


@patients_router.get("", response_model=list[PatientResponse], responses={500: {"model": ErrorResponse}})
@handle_api_errors("Failed to fetch patients")
async def list_patients(
    response: Response,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> list[PatientResponse]:
    """List patients ordered by name."""
    patients = await directory_service.list_patients()
    response.headers["Cache-Control"] = DIRECTORY_CACHE
    return [PatientResponse(**p) for p in patients]
