"""
Business rules as a tagged union.

The rule ``type`` is the tag and selects the model of ``config``; a config
that does not fit its tag is rejected when the rule is built.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, Field, model_validator
from typing_extensions import Self

from ...shared.base import ValueObject
from ..value_objects.enums import RuleType


class RuleConfig(ValueObject):
    """Base class for rule payloads."""

    model_config = ConfigDict(extra="forbid")


class CoRunConfig(RuleConfig):
    """Tasks that must be scheduled together."""

    task_ids: list[str] = Field(min_length=2)


class LoadLimitConfig(RuleConfig):
    """Maximum number of slots a worker may take per phase."""

    worker_id: str = Field(min_length=1)
    max_slots: int = Field(ge=0)


class PhaseRestrictionConfig(RuleConfig):
    """Phases a task may be scheduled into."""

    task_id: str = Field(min_length=1)
    allowed_phases: list[int] = Field(min_length=1)


class SkillRequirementConfig(RuleConfig):
    """A skill the assigned worker must have for a task."""

    task_id: str = Field(min_length=1)
    required_skill: str = Field(min_length=1)


CONFIG_MODELS: dict[RuleType, type[RuleConfig]] = {
    RuleType.CO_RUN: CoRunConfig,
    RuleType.LOAD_LIMIT: LoadLimitConfig,
    RuleType.PHASE_RESTRICTION: PhaseRestrictionConfig,
    RuleType.SKILL_REQUIREMENT: SkillRequirementConfig,
}

AnyRuleConfig = (
    CoRunConfig | LoadLimitConfig | PhaseRestrictionConfig | SkillRequirementConfig
)


class _TaggedRule(ValueObject):
    """Shared tag/config consistency checks."""

    @model_validator(mode="before")
    @classmethod
    def _select_config_model(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        rule_type = data.get("type")
        config = data.get("config")
        if rule_type is not None and isinstance(config, Mapping):
            model = CONFIG_MODELS[RuleType(rule_type)]
            data = {**data, "config": model.model_validate(config)}
        return data

    @model_validator(mode="after")
    def _check_config_matches_type(self) -> Self:
        expected = CONFIG_MODELS[self.type]
        if not isinstance(self.config, expected):
            raise ValueError(
                f"'{self.type.value}' rules take a {expected.__name__}, "
                f"got {type(self.config).__name__}"
            )
        return self


class ParsedRule(_TaggedRule):
    """A rule produced by the parser or a form, before it gets an identity."""

    type: RuleType
    description: str
    config: AnyRuleConfig

    def to_business_rule(self, rule_id: str) -> "BusinessRule":
        return BusinessRule(
            id=rule_id,
            type=self.type,
            description=self.description,
            config=self.config,
            enabled=True,
        )


class BusinessRule(_TaggedRule):
    """An allocation rule held by the workspace."""

    id: str
    type: RuleType
    description: str
    config: AnyRuleConfig
    enabled: bool = True

    def toggled(self) -> "BusinessRule":
        return self.model_copy(update={"enabled": not self.enabled})
