"""
Business Rules API Routes.

Rules are created from structured forms or from short English sentences,
and afterwards can only be toggled or deleted.
"""

from fastapi import APIRouter, HTTPException, status

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.application.dtos import CreateRuleRequest, ParseRuleRequest
from resource_allocation.domain.allocation.entities import BusinessRule
from resource_allocation.domain.allocation.services import build_rule
from resource_allocation.domain.shared.exceptions import (
    RuleConfigurationError,
    RuleNotFoundError,
    RuleParseError,
)

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("/", summary="List rules", response_model=list[BusinessRule])
def list_rules(workspace: WorkspaceDep) -> list[BusinessRule]:
    return workspace.rules


@router.post(
    "/",
    summary="Create rule",
    description="Create a rule from a structured form definition.",
    response_model=BusinessRule,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Config does not fit the rule type"}},
)
def create_rule(request: CreateRuleRequest, workspace: WorkspaceDep) -> BusinessRule:
    try:
        parsed = build_rule(request.type, request.config, request.description)
    except RuleConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.to_dict()
        ) from e
    return workspace.add_rule(parsed)


@router.post(
    "/parse",
    summary="Create rule from text",
    description=(
        "Create a rule from a sentence such as 'Task T1 and Task T2 must run "
        "together' or 'Worker W1 limited to 2 slots per phase'."
    ),
    response_model=BusinessRule,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Sentence matches no rule template"}},
)
def create_rule_from_text(
    request: ParseRuleRequest, workspace: WorkspaceDep
) -> BusinessRule:
    try:
        return workspace.add_rule_from_text(request.text)
    except RuleParseError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.to_dict()
        ) from e


@router.patch(
    "/{rule_id}/toggle",
    summary="Enable or disable rule",
    response_model=BusinessRule,
    responses={404: {"description": "Rule not found"}},
)
def toggle_rule(rule_id: str, workspace: WorkspaceDep) -> BusinessRule:
    try:
        return workspace.toggle_rule(rule_id)
    except RuleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict()
        ) from e


@router.delete(
    "/{rule_id}",
    summary="Delete rule",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Rule not found"}},
)
def delete_rule(rule_id: str, workspace: WorkspaceDep) -> None:
    try:
        workspace.remove_rule(rule_id)
    except RuleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict()
        ) from e
