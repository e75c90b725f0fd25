"""The aggregate handed to exporters."""

from typing import Any

from pydantic import Field

from ...shared.base import WireModel
from ..value_objects.diagnostics import ValidationDiagnostic
from ..value_objects.priorities import PrioritySettings
from .business_rule import BusinessRule
from .records import Client, Task, Worker


class AllocationDataset(WireModel):
    """
    Snapshot of everything the tool prepares for an allocator.

    Records dump only the columns they were uploaded with; everything else
    dumps in full.
    """

    clients: list[Client] = Field(default_factory=list)
    workers: list[Worker] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    rules: list[BusinessRule] = Field(default_factory=list)
    priorities: PrioritySettings = Field(default_factory=PrioritySettings)
    validation_errors: list[ValidationDiagnostic] = Field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return bool(self.clients or self.workers or self.tasks)

    def to_document(self) -> dict[str, Any]:
        return {
            "clients": [client.to_row() for client in self.clients],
            "workers": [worker.to_row() for worker in self.workers],
            "tasks": [task.to_row() for task in self.tasks],
            "rules": [rule.to_wire() for rule in self.rules],
            "priorities": self.priorities.to_wire(),
            "validationErrors": [
                diagnostic.to_wire() for diagnostic in self.validation_errors
            ],
        }
