"""
Export API Routes.

Download the prepared dataset as a single JSON document or one CSV file
per collection.
"""

from typing import Literal

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.application.dtos import to_rows
from resource_allocation.core.config import settings
from resource_allocation.infrastructure.export import export_csv, export_json

router = APIRouter(prefix="/export", tags=["export"])


def _attachment(content: str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get(
    "/json",
    summary="Export everything as JSON",
    description="Clients, workers, tasks, rules, priorities and diagnostics.",
)
def export_dataset_json(workspace: WorkspaceDep) -> Response:
    return _attachment(
        export_json(workspace.export_data()),
        "application/json",
        settings.EXPORT_JSON_FILENAME,
    )


@router.get(
    "/csv/{collection}",
    summary="Export one collection as CSV",
    responses={404: {"description": "Collection is empty"}},
)
def export_collection_csv(
    collection: Literal["clients", "workers", "tasks"], workspace: WorkspaceDep
) -> Response:
    records = getattr(workspace, collection)
    content = export_csv(to_rows(records))
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No {collection} to export",
        )
    return _attachment(content, "text/csv", f"{collection}.csv")
