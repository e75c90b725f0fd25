from fastapi import APIRouter

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.application.dtos import PrioritySettingsResponse
from resource_allocation.domain.allocation.value_objects import PrioritySettings

router = APIRouter(prefix="/priorities", tags=["priorities"])


@router.get("/", summary="Get priority weights", response_model=PrioritySettingsResponse)
def get_priorities(workspace: WorkspaceDep) -> PrioritySettingsResponse:
    return PrioritySettingsResponse.from_settings(workspace.priorities)


@router.put(
    "/",
    summary="Update priority weights",
    description="Each weight is 0-100; the weights need not sum to 100.",
    response_model=PrioritySettingsResponse,
)
def update_priorities(
    priorities: PrioritySettings, workspace: WorkspaceDep
) -> PrioritySettingsResponse:
    return PrioritySettingsResponse.from_settings(
        workspace.update_priorities(priorities)
    )
