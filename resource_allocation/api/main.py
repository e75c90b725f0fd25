from fastapi import APIRouter

from resource_allocation.api.routes import (
    data,
    export,
    health,
    priorities,
    rules,
    search,
    uploads,
    validation,
)

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(uploads.router)
api_router.include_router(data.router)
api_router.include_router(validation.router)
api_router.include_router(search.router)
api_router.include_router(rules.router)
api_router.include_router(priorities.router)
api_router.include_router(export.router)
