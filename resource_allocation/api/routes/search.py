from fastapi import APIRouter, Query

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.application.dtos import SearchResponse

router = APIRouter(prefix="/search", tags=["search"])


@router.get(
    "/",
    summary="Search dataset",
    description=(
        "Case-insensitive search over names, ids, client references and "
        "skills. Queries like 'tasks with phase > 2' filter tasks by phase "
        "count instead."
    ),
    response_model=SearchResponse,
)
def search_dataset(
    workspace: WorkspaceDep,
    q: str = Query("", max_length=500, description="Search text"),
) -> SearchResponse:
    return SearchResponse.from_result(q, workspace.search(q))
