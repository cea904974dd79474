"""Propositional state representation.

Note: State is immutable. A successor is always built by copying the
parent's fluents, applying effects to the copy and freezing it again.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, MutableSet


def _frozen(fluents: Iterable[str]) -> FrozenSet[str]:
    return fluents if isinstance(fluents, frozenset) else frozenset(fluents)


@dataclass(frozen=True)
class Condition:
    """Conjunction of positive and negative fluents.

    Attributes:
        positive: Fluents that must be true
        negative: Fluents that must be false
    """
    positive: FrozenSet[str] = field(default_factory=frozenset)
    negative: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "positive", _frozen(self.positive))
        object.__setattr__(self, "negative", _frozen(self.negative))

    def is_empty(self) -> bool:
        return not self.positive and not self.negative

    def __repr__(self) -> str:
        parts = sorted(self.positive) + [f"not {f}" for f in sorted(self.negative)]
        return f"Condition({', '.join(parts)})"


@dataclass(frozen=True)
class Effect:
    """Add and delete lists.

    Adds are applied first, then deletes, so a fluent in both ends up false.
    """
    add: FrozenSet[str] = field(default_factory=frozenset)
    delete: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "add", _frozen(self.add))
        object.__setattr__(self, "delete", _frozen(self.delete))

    def apply_to(self, fluents: MutableSet[str]) -> None:
        """Apply in place to a mutable fluent set (a state copy under construction)."""
        fluents |= self.add
        fluents -= self.delete


@dataclass(frozen=True)
class ConditionalEffect:
    """Effect guarded by a condition."""
    condition: Condition
    effect: Effect


@dataclass(frozen=True)
class State:
    """Immutable set of true fluents."""
    fluents: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "fluents", _frozen(self.fluents))

    def satisfies(self, condition: Condition) -> bool:
        """Check a precondition or goal against this state."""
        return (condition.positive <= self.fluents
                and self.fluents.isdisjoint(condition.negative))

    def holds(self, fluent: str) -> bool:
        return fluent in self.fluents

    def __contains__(self, fluent: str) -> bool:
        return fluent in self.fluents

    def __len__(self) -> int:
        return len(self.fluents)

    def __repr__(self) -> str:
        return f"State({len(self.fluents)} fluents)"
