"""
Dataset API Routes.

Read the current collections, replace one after a table edit, or start
over.
"""

from typing import Literal

from fastapi import APIRouter, status

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.application.dtos import (
    DatasetResponse,
    ReplaceRowsRequest,
    to_rows,
)
from resource_allocation.application.services.workspace import AllocationWorkspace
from resource_allocation.domain.allocation.value_objects import EntityKind

router = APIRouter(prefix="/data", tags=["data"])

Collection = Literal["clients", "workers", "tasks"]


def _dataset_response(workspace: AllocationWorkspace) -> DatasetResponse:
    return DatasetResponse(
        clients=to_rows(workspace.clients),
        workers=to_rows(workspace.workers),
        tasks=to_rows(workspace.tasks),
        has_data=workspace.has_data,
    )


@router.get("/", summary="Get dataset", response_model=DatasetResponse)
def get_dataset(workspace: WorkspaceDep) -> DatasetResponse:
    return _dataset_response(workspace)


@router.put(
    "/{collection}",
    summary="Replace collection",
    description="Replace one collection with edited rows and revalidate.",
    response_model=DatasetResponse,
)
def replace_collection(
    collection: Collection, request: ReplaceRowsRequest, workspace: WorkspaceDep
) -> DatasetResponse:
    workspace.replace_collection(EntityKind.from_collection(collection), request.rows)
    return _dataset_response(workspace)


@router.delete("/", summary="Reset workspace", status_code=status.HTTP_204_NO_CONTENT)
def reset_workspace(workspace: WorkspaceDep) -> None:
    workspace.reset()
