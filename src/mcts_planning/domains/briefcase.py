"""Ground briefcase-world problems (conditional effects).

Moving the briefcase moves every object that is inside it; that part of
the move is a conditional effect per object.
"""

from itertools import permutations
from typing import Dict, Sequence

from ..core.action import Action
from ..core.problem import Problem
from ..core.state import Condition, ConditionalEffect, Effect, State


def briefcase_problem(
    locations: Sequence[str],
    objects: Dict[str, str],
    goal: Dict[str, str],
    briefcase_at: str,
    name: str = "briefcase"
) -> Problem:
    """Build a briefcase problem.

    Args:
        locations: Location names
        objects: Initial location of each object
        goal: Goal location of each object (subset of ``objects``)
        briefcase_at: Initial briefcase location
    """
    actions = []
    for src, dst in permutations(locations, 2):
        actions.append(Action(
            name=f"move {src} {dst}",
            precondition=Condition(positive=frozenset({f"briefcase-at {src}"})),
            effect=Effect(add=frozenset({f"briefcase-at {dst}"}),
                          delete=frozenset({f"briefcase-at {src}"})),
            conditional_effects=tuple(
                ConditionalEffect(
                    condition=Condition(positive=frozenset({f"in {o}"})),
                    effect=Effect(add=frozenset({f"at {o} {dst}"}),
                                  delete=frozenset({f"at {o} {src}"})),
                )
                for o in sorted(objects)
            ),
        ))
    for o in sorted(objects):
        for loc in locations:
            actions.append(Action(
                name=f"put-in {o} {loc}",
                precondition=Condition(positive=frozenset({f"at {o} {loc}", f"briefcase-at {loc}"}),
                                       negative=frozenset({f"in {o}"})),
                effect=Effect(add=frozenset({f"in {o}"})),
            ))
        actions.append(Action(
            name=f"take-out {o}",
            precondition=Condition(positive=frozenset({f"in {o}"})),
            effect=Effect(delete=frozenset({f"in {o}"})),
        ))

    init = {f"briefcase-at {briefcase_at}"} | {f"at {o} {loc}" for o, loc in objects.items()}
    return Problem(
        name=name,
        domain="briefcase",
        initial_state=State(frozenset(init)),
        goal=Condition(positive=frozenset(f"at {o} {loc}" for o, loc in goal.items())),
        actions=tuple(actions),
    )
