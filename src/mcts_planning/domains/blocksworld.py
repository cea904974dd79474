"""Ground 4-operator blocksworld problems.

Stacks are given bottom to top, e.g. ``[["a", "b"], ["c"]]`` puts ``b``
on ``a`` and ``c`` on the table.
"""

from itertools import permutations
from typing import List, Sequence

from ..core.action import Action
from ..core.problem import Problem
from ..core.state import Condition, Effect, State


def _stack_fluents(stacks: Sequence[Sequence[str]]) -> List[str]:
    fluents = []
    for stack in stacks:
        if not stack:
            continue
        fluents.append(f"ontable {stack[0]}")
        for below, above in zip(stack, stack[1:]):
            fluents.append(f"on {above} {below}")
        fluents.append(f"clear {stack[-1]}")
    return fluents


def blocksworld_actions(blocks: Sequence[str]) -> List[Action]:
    """pick-up, put-down, stack and unstack for every (pair of) block(s)."""
    actions = []
    for x in blocks:
        actions.append(Action(
            name=f"pick-up {x}",
            precondition=Condition(positive=frozenset({f"clear {x}", f"ontable {x}", "handempty"})),
            effect=Effect(add=frozenset({f"holding {x}"}),
                          delete=frozenset({f"clear {x}", f"ontable {x}", "handempty"})),
        ))
        actions.append(Action(
            name=f"put-down {x}",
            precondition=Condition(positive=frozenset({f"holding {x}"})),
            effect=Effect(add=frozenset({f"clear {x}", f"ontable {x}", "handempty"}),
                          delete=frozenset({f"holding {x}"})),
        ))
    for x, y in permutations(blocks, 2):
        actions.append(Action(
            name=f"stack {x} {y}",
            precondition=Condition(positive=frozenset({f"holding {x}", f"clear {y}"})),
            effect=Effect(add=frozenset({f"on {x} {y}", f"clear {x}", "handempty"}),
                          delete=frozenset({f"holding {x}", f"clear {y}"})),
        ))
        actions.append(Action(
            name=f"unstack {x} {y}",
            precondition=Condition(positive=frozenset({f"on {x} {y}", f"clear {x}", "handempty"})),
            effect=Effect(add=frozenset({f"holding {x}", f"clear {y}"}),
                          delete=frozenset({f"on {x} {y}", f"clear {x}", "handempty"})),
        ))
    return actions


def blocksworld_problem(
    initial_stacks: Sequence[Sequence[str]],
    goal_stacks: Sequence[Sequence[str]],
    name: str = "blocks"
) -> Problem:
    """Build a blocksworld problem.

    The goal fixes every ``on`` relation of ``goal_stacks`` and puts the
    bottom block of each goal stack on the table.
    """
    blocks = sorted({b for stack in initial_stacks for b in stack})
    goal_blocks = {b for stack in goal_stacks for b in stack}
    if not goal_blocks <= set(blocks):
        raise ValueError(f"Goal mentions unknown blocks: {sorted(goal_blocks - set(blocks))}")

    goal = set()
    for stack in goal_stacks:
        if not stack:
            continue
        goal.add(f"ontable {stack[0]}")
        for below, above in zip(stack, stack[1:]):
            goal.add(f"on {above} {below}")

    return Problem(
        name=name,
        domain="blocks",
        initial_state=State(frozenset(_stack_fluents(initial_stacks) + ["handempty"])),
        goal=Condition(positive=frozenset(goal)),
        actions=tuple(blocksworld_actions(blocks)),
    )
