"""Ground actions."""

from dataclasses import dataclass, field
from typing import Tuple

from .state import Condition, ConditionalEffect, Effect


@dataclass(frozen=True)
class Action:
    """Fully instantiated operator.

    Attributes:
        name: Ground name, e.g. ``"pick-up a"``
        precondition: Condition required for applicability
        effect: Unconditional effect
        conditional_effects: Applied in listed order after ``effect``
        cost: Action cost (plans are not cost-optimal, kept for reporting)
    """
    name: str
    precondition: Condition = field(default_factory=Condition)
    effect: Effect = field(default_factory=Effect)
    conditional_effects: Tuple[ConditionalEffect, ...] = ()
    cost: int = 1

    def __post_init__(self):
        if not isinstance(self.conditional_effects, tuple):
            object.__setattr__(self, "conditional_effects", tuple(self.conditional_effects))

    def __str__(self) -> str:
        return f"({self.name})"
