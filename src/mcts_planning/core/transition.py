"""State transition functions.

Pure functions over immutable states. No error handling: applying an
inapplicable action is the caller's problem, filter with ``applicable`` first.
"""

from typing import List, Sequence

from .action import Action
from .state import Condition, State


def applicable(state: State, actions: Sequence[Action]) -> List[Action]:
    """Actions whose precondition holds in ``state``, in input order."""
    return [a for a in actions if state.satisfies(a.precondition)]


def apply_action(state: State, action: Action) -> State:
    """Copy ``state`` and apply ``action`` to the copy.

    The unconditional effect goes first. Each conditional effect is then
    tested and applied in order against the copy being built, so a later
    effect sees (and may overwrite) the result of earlier ones.
    """
    fluents = set(state.fluents)
    action.effect.apply_to(fluents)
    for ce in action.conditional_effects:
        if ce.condition.positive <= fluents and fluents.isdisjoint(ce.condition.negative):
            ce.effect.apply_to(fluents)
    return State(frozenset(fluents))


def is_goal(state: State, goal: Condition) -> bool:
    """Check goal satisfaction."""
    return state.satisfies(goal)
