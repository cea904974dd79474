"""Ground example domains for tests, demos and benchmarks."""

from .blocksworld import blocksworld_problem, blocksworld_actions
from .gripper import gripper_problem, gripper_actions
from .briefcase import briefcase_problem

__all__ = [
    "blocksworld_problem",
    "blocksworld_actions",
    "gripper_problem",
    "gripper_actions",
    "briefcase_problem",
]
