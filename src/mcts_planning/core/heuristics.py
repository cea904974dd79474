"""Heuristic evaluators.

The search layer treats these as opaque ``h(state) -> int`` callables. Three
reference evaluators are provided: goal counting and the additive / max
relaxed-reachability estimates (delete lists and negative conditions ignored).
"""

from typing import Callable, Dict, List, Sequence, Tuple

from .action import Action
from .state import Condition, State

Heuristic = Callable[[State], int]

# Returned when the relaxed problem cannot reach the goal
DEAD_END_VALUE = 2 ** 31 - 1


class GoalCountHeuristic:
    """Number of goal literals not yet satisfied."""

    def __init__(self, goal: Condition):
        self.goal = goal

    def __call__(self, state: State) -> int:
        missing = len(self.goal.positive - state.fluents)
        violated = len(self.goal.negative & state.fluents)
        return missing + violated


class RelaxedHeuristic:
    """h_add / h_max over the delete relaxation.

    Fluent costs are propagated to a fixpoint from the evaluated state; a
    conditional effect is treated as an extra relaxed operator whose
    precondition joins the action's and the effect's positive conditions.

    Args:
        actions: Ground actions of the problem
        goal: Goal condition
        combine: ``sum`` for h_add, ``max`` for h_max
    """

    def __init__(self, actions: Sequence[Action], goal: Condition,
                 combine: Callable[[List[int]], int] = sum):
        self.goal = goal
        self.combine = combine
        self._operators: List[Tuple[Tuple[str, ...], Tuple[str, ...], int]] = []
        for action in actions:
            pre = action.precondition.positive
            if action.effect.add:
                self._operators.append((tuple(sorted(pre)), tuple(sorted(action.effect.add)), action.cost))
            for ce in action.conditional_effects:
                if ce.effect.add:
                    joined = pre | ce.condition.positive
                    self._operators.append((tuple(sorted(joined)), tuple(sorted(ce.effect.add)), action.cost))

    def _aggregate(self, values: List[int]) -> int:
        return self.combine(values) if values else 0

    def __call__(self, state: State) -> int:
        cost: Dict[str, int] = {f: 0 for f in state.fluents}
        changed = True
        while changed:
            changed = False
            for pre, add, op_cost in self._operators:
                if not all(p in cost for p in pre):
                    continue
                value = self._aggregate([cost[p] for p in pre]) + op_cost
                for f in add:
                    if value < cost.get(f, DEAD_END_VALUE):
                        cost[f] = value
                        changed = True

        goal_costs = []
        for f in self.goal.positive:
            if f not in cost:
                return DEAD_END_VALUE
            goal_costs.append(cost[f])
        return self._aggregate(goal_costs)


def make_heuristic(kind: str, actions: Sequence[Action], goal: Condition) -> Heuristic:
    """Build a heuristic by name (``goal_count``, ``h_add`` or ``h_max``)."""
    if kind == "goal_count":
        return GoalCountHeuristic(goal)
    if kind == "h_add":
        return RelaxedHeuristic(actions, goal, combine=sum)
    if kind == "h_max":
        return RelaxedHeuristic(actions, goal, combine=max)
    raise ValueError(f"Unknown heuristic: {kind}")
