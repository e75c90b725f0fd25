"""
Rule Parser

Turns short English sentences into typed business rules by keyword and
pattern matching. This is deliberately naive: each template has a trigger
(keywords that must appear) and an extractor (patterns that must match).
Templates are tried in a fixed order and the first one whose trigger fires
and whose extractor succeeds wins; if an extractor fails, parsing moves on
to the next template.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ...shared.exceptions import RuleConfigurationError
from ..entities.business_rule import (
    CONFIG_MODELS,
    CoRunConfig,
    LoadLimitConfig,
    ParsedRule,
    PhaseRestrictionConfig,
    RuleConfig,
    SkillRequirementConfig,
)
from ..value_objects.enums import RuleType

_TOKEN = r"([A-Za-z0-9_]+)"
_TASK_PATTERN = re.compile(rf"task\s+{_TOKEN}", re.IGNORECASE)
_WORKER_PATTERN = re.compile(rf"worker\s+{_TOKEN}", re.IGNORECASE)
_SKILL_PATTERN = re.compile(rf"skill\s+{_TOKEN}", re.IGNORECASE)
_SLOTS_PATTERN = re.compile(r"([0-9]+)\s+slots?", re.IGNORECASE)
_PHASE_PATTERN = re.compile(r"phase\s+([0-9]+)", re.IGNORECASE)


@dataclass(frozen=True)
class RuleTemplate:
    """A sentence template: trigger keywords plus a config extractor."""

    rule_type: RuleType
    trigger: Callable[[str], bool]
    extract: Callable[[str], RuleConfig | None]

    def apply(self, text: str) -> ParsedRule | None:
        if not self.trigger(text.lower()):
            return None
        config = self.extract(text)
        if config is None:
            return None
        return ParsedRule(
            type=self.rule_type,
            description=describe_rule(self.rule_type, config),
            config=config,
        )


def _extract_co_run(text: str) -> CoRunConfig | None:
    task_ids = _TASK_PATTERN.findall(text)
    if len(task_ids) < 2:
        return None
    return CoRunConfig(task_ids=task_ids)


def _extract_load_limit(text: str) -> LoadLimitConfig | None:
    worker = _WORKER_PATTERN.search(text)
    slots = _SLOTS_PATTERN.search(text)
    if not (worker and slots):
        return None
    return LoadLimitConfig(worker_id=worker.group(1), max_slots=int(slots.group(1)))


def _extract_phase_restriction(text: str) -> PhaseRestrictionConfig | None:
    # Only the first task and phase mentioned are captured.
    task = _TASK_PATTERN.search(text)
    phase = _PHASE_PATTERN.search(text)
    if not (task and phase):
        return None
    return PhaseRestrictionConfig(
        task_id=task.group(1), allowed_phases=[int(phase.group(1))]
    )


def _extract_skill_requirement(text: str) -> SkillRequirementConfig | None:
    skill = _SKILL_PATTERN.search(text)
    task = _TASK_PATTERN.search(text)
    if not (skill and task):
        return None
    return SkillRequirementConfig(task_id=task.group(1), required_skill=skill.group(1))


TEMPLATES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        RuleType.CO_RUN,
        trigger=lambda lowered: "co-run" in lowered or "run together" in lowered,
        extract=_extract_co_run,
    ),
    RuleTemplate(
        RuleType.LOAD_LIMIT,
        trigger=lambda lowered: "limit" in lowered
        and ("load" in lowered or "slot" in lowered),
        extract=_extract_load_limit,
    ),
    RuleTemplate(
        RuleType.PHASE_RESTRICTION,
        trigger=lambda lowered: "phase" in lowered
        and ("only" in lowered or "restrict" in lowered),
        extract=_extract_phase_restriction,
    ),
    RuleTemplate(
        RuleType.SKILL_REQUIREMENT,
        trigger=lambda lowered: "skill" in lowered and "require" in lowered,
        extract=_extract_skill_requirement,
    ),
)


def parse_rule(text: str) -> ParsedRule | None:
    """
    Parse a natural-language rule.

    Args:
        text: Free text such as "Task T3 runs only in Phase 2"

    Returns:
        The parsed rule, or None when no template matches
    """
    for template in TEMPLATES:
        parsed = template.apply(text)
        if parsed is not None:
            return parsed
    return None


def describe_rule(rule_type: RuleType, config: RuleConfig) -> str:
    """Human summary of a rule, shared by parsed and form-built rules."""
    if isinstance(config, CoRunConfig):
        return f"Tasks {' and '.join(config.task_ids)} must run together"
    if isinstance(config, LoadLimitConfig):
        return (
            f"Worker {config.worker_id} limited to {config.max_slots} slots per phase"
        )
    if isinstance(config, PhaseRestrictionConfig):
        phases = ", ".join(str(phase) for phase in config.allowed_phases)
        return f"Task {config.task_id} only runs in Phase {phases}"
    if isinstance(config, SkillRequirementConfig):
        return f"Task {config.task_id} requires skill {config.required_skill}"
    raise TypeError(f"No description for {rule_type.value} config {config!r}")


def build_rule(
    rule_type: RuleType,
    config: Mapping[str, Any],
    description: str | None = None,
) -> ParsedRule:
    """
    Build a rule from structured form input.

    Raises:
        RuleConfigurationError: If the config does not fit the rule type
    """
    try:
        typed_config = CONFIG_MODELS[rule_type].model_validate(dict(config))
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc']) or 'config'}: {error['msg']}"
            for error in e.errors()
        )
        raise RuleConfigurationError(rule_type.value, problems) from e

    return ParsedRule(
        type=rule_type,
        description=description or describe_rule(rule_type, typed_config),
        config=typed_config,
    )
