"""Sequential plan and plan validation."""

from typing import Iterable, Iterator, List, Tuple

from .action import Action
from .problem import Problem
from .transition import apply_action


class Plan:
    """Ordered ``(step_index, action)`` pairs with dense zero-based indices."""

    def __init__(self, actions: Iterable[Action] = ()):
        self._steps: List[Tuple[int, Action]] = []
        self.extend(actions)

    def add(self, index: int, action: Action) -> None:
        """Append ``action`` at ``index``; the index must be the next free one."""
        if index != len(self._steps):
            raise IndexError(f"Plan index {index} is not the next step ({len(self._steps)})")
        self._steps.append((index, action))

    def extend(self, actions: Iterable[Action]) -> None:
        for action in actions:
            self.add(len(self._steps), action)

    def clear(self) -> None:
        self._steps.clear()

    def actions(self) -> List[Action]:
        return [a for _, a in self._steps]

    def copy(self) -> "Plan":
        return Plan(self.actions())

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Tuple[int, Action]]:
        return iter(self._steps)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plan):
            return NotImplemented
        return self._steps == other._steps

    def __str__(self) -> str:
        return "\n".join(f"{i:>4}: {a}" for i, a in self._steps)

    def __repr__(self) -> str:
        return f"Plan(length={len(self)})"


def validate_plan(problem: Problem, plan: Plan) -> bool:
    """Replay ``plan`` from the initial state.

    Returns True iff every step is applicable when reached and the final
    state satisfies the goal.
    """
    state = problem.initial_state
    for _, action in plan:
        if not state.satisfies(action.precondition):
            return False
        state = apply_action(state, action)
    return problem.is_goal(state)


def replay(problem: Problem, plan: Plan):
    """States visited by ``plan``, initial state included."""
    states = [problem.initial_state]
    for _, action in plan:
        if not states[-1].satisfies(action.precondition):
            raise ValueError(f"Action {action} not applicable at step {len(states) - 1}")
        states.append(apply_action(states[-1], action))
    return states
