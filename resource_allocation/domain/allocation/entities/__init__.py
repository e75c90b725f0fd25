"""Allocation records and business rules."""

from .business_rule import (
    CONFIG_MODELS,
    BusinessRule,
    CoRunConfig,
    LoadLimitConfig,
    ParsedRule,
    PhaseRestrictionConfig,
    RuleConfig,
    SkillRequirementConfig,
)
from .dataset import AllocationDataset
from .records import RECORD_TYPES, Client, Record, Task, Worker

__all__ = [
    "CONFIG_MODELS",
    "AllocationDataset",
    "RECORD_TYPES",
    "BusinessRule",
    "Client",
    "CoRunConfig",
    "LoadLimitConfig",
    "ParsedRule",
    "PhaseRestrictionConfig",
    "Record",
    "RuleConfig",
    "SkillRequirementConfig",
    "Task",
    "Worker",
]
