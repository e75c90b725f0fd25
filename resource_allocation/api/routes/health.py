from fastapi import APIRouter

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
def health_check(workspace: WorkspaceDep) -> dict[str, str | bool]:
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "has_data": workspace.has_data,
    }
