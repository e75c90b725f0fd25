"""Priority weights handed to the downstream allocator."""

from pydantic import Field

from ...shared.base import ValueObject


class PrioritySettings(ValueObject):
    """
    Relative weights for the four allocation criteria.

    Each weight is a 0-100 slider value. The weights are not required to sum
    to 100; ``total`` reports the sum so callers can show it.
    """

    client_value: int = Field(default=25, ge=0, le=100)
    workload_balance: int = Field(default=25, ge=0, le=100)
    skill_match: int = Field(default=25, ge=0, le=100)
    deadline_urgency: int = Field(default=25, ge=0, le=100)

    @classmethod
    def evenly_split(cls, weight: int) -> "PrioritySettings":
        return cls(
            client_value=weight,
            workload_balance=weight,
            skill_match=weight,
            deadline_urgency=weight,
        )

    @property
    def total(self) -> int:
        return (
            self.client_value
            + self.workload_balance
            + self.skill_match
            + self.deadline_urgency
        )

    @property
    def is_balanced(self) -> bool:
        """True when the weights add up to exactly 100."""
        return self.total == 100
