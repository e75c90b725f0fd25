"""
API Dependencies

The workspace lives on ``app.state`` so that every request of a running
application shares one dataset, and tests can swap in a fresh one.
"""

from typing import Annotated

from fastapi import Depends, Request

from resource_allocation.application.services.workspace import AllocationWorkspace


def get_workspace(request: Request) -> AllocationWorkspace:
    return request.app.state.workspace


WorkspaceDep = Annotated[AllocationWorkspace, Depends(get_workspace)]
