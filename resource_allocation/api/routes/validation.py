from fastapi import APIRouter

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.application.dtos import ValidationReportResponse

router = APIRouter(prefix="/validation", tags=["validation"])


@router.get(
    "/",
    summary="Get validation report",
    description="Diagnostics for the current dataset with per-type counts.",
    response_model=ValidationReportResponse,
)
def get_validation_report(workspace: WorkspaceDep) -> ValidationReportResponse:
    return ValidationReportResponse(
        errors=workspace.validation_errors,
        summary=workspace.validation_summary(),
    )
