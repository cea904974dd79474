"""Ground gripper problems: move balls from room A to room B with two grippers."""

from typing import List

from ..core.action import Action
from ..core.problem import Problem
from ..core.state import Condition, Effect, State

ROOMS = ("rooma", "roomb")
GRIPPERS = ("left", "right")


def gripper_actions(balls: List[str]) -> List[Action]:
    actions = []
    for src in ROOMS:
        for dst in ROOMS:
            if src == dst:
                continue
            actions.append(Action(
                name=f"move {src} {dst}",
                precondition=Condition(positive=frozenset({f"at-robby {src}"})),
                effect=Effect(add=frozenset({f"at-robby {dst}"}),
                              delete=frozenset({f"at-robby {src}"})),
            ))
    for ball in balls:
        for room in ROOMS:
            for g in GRIPPERS:
                actions.append(Action(
                    name=f"pick {ball} {room} {g}",
                    precondition=Condition(positive=frozenset(
                        {f"at {ball} {room}", f"at-robby {room}", f"free {g}"})),
                    effect=Effect(add=frozenset({f"carry {ball} {g}"}),
                                  delete=frozenset({f"at {ball} {room}", f"free {g}"})),
                ))
                actions.append(Action(
                    name=f"drop {ball} {room} {g}",
                    precondition=Condition(positive=frozenset(
                        {f"carry {ball} {g}", f"at-robby {room}"})),
                    effect=Effect(add=frozenset({f"at {ball} {room}", f"free {g}"}),
                                  delete=frozenset({f"carry {ball} {g}"})),
                ))
    return actions


def gripper_problem(num_balls: int, name: str = "") -> Problem:
    """All balls start in room A with the robot; the goal has them in room B."""
    if num_balls < 0:
        raise ValueError(f"num_balls must be >= 0, got {num_balls}")
    balls = [f"ball{i + 1}" for i in range(num_balls)]

    init = {"at-robby rooma"} | {f"free {g}" for g in GRIPPERS}
    init |= {f"at {b} rooma" for b in balls}

    return Problem(
        name=name or f"gripper-{num_balls}",
        domain="gripper",
        initial_state=State(frozenset(init)),
        goal=Condition(positive=frozenset(f"at {b} roomb" for b in balls)),
        actions=tuple(gripper_actions(balls)),
    )
