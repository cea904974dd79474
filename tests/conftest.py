"""Pytest fixtures for testing."""

from pathlib import Path

import pytest

from mcts_planning.config import PlannerConfig
from mcts_planning.core import Action, Condition, Effect, Problem, State
from mcts_planning.core.loader import load_problem
from mcts_planning.domains import briefcase_problem, gripper_problem
from mcts_planning.utils.seed import make_rng

PROJECT_ROOT = Path(__file__).parent.parent


def _pos(*fluents):
    return frozenset(fluents)


@pytest.fixture
def seed():
    """Fixed seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    return make_rng(seed)


@pytest.fixture
def fast_config():
    """Small search budgets so planner tests stay quick."""
    return PlannerConfig(
        iterations=50,
        rollout_depth=20,
        max_plan_length=100,
        walk_length=8,
        num_walks=20,
        max_steps_no_improve=5,
        timeout_ms=30_000,
        seed=7,
    )


@pytest.fixture
def example_problem_path():
    return PROJECT_ROOT / "problems" / "briefcase" / "p01.yaml"


@pytest.fixture
def briefcase_p01(example_problem_path):
    """Carry the paycheck from home to the office (conditional move effect)."""
    return load_problem(example_problem_path)


@pytest.fixture
def chain_problem():
    """Linear chain at0 -> at1 -> ... -> at4 with a single applicable action per state."""
    actions = tuple(
        Action(
            name=f"step {i}",
            precondition=Condition(positive=_pos(f"at{i}")),
            effect=Effect(add=_pos(f"at{i + 1}"), delete=_pos(f"at{i}")),
        )
        for i in range(4)
    )
    return Problem(
        name="chain-4",
        initial_state=State(_pos("at0")),
        goal=Condition(positive=_pos("at4")),
        actions=actions,
    )


@pytest.fixture
def toggle_problem():
    """A light switch that never runs out of moves; the goal is unreachable."""
    actions = (
        Action(
            name="switch-on",
            precondition=Condition(negative=_pos("lit")),
            effect=Effect(add=_pos("lit")),
        ),
        Action(
            name="switch-off",
            precondition=Condition(positive=_pos("lit")),
            effect=Effect(delete=_pos("lit")),
        ),
    )
    return Problem(
        name="toggle",
        initial_state=State(),
        goal=Condition(positive=_pos("unreachable")),
        actions=actions,
    )


@pytest.fixture
def dead_end_problem():
    """One action leads into a state with nothing applicable."""
    actions = (
        Action(
            name="use-up",
            precondition=Condition(positive=_pos("fuel")),
            effect=Effect(add=_pos("stranded"), delete=_pos("fuel")),
        ),
    )
    return Problem(
        name="dead-end",
        initial_state=State(_pos("fuel")),
        goal=Condition(positive=_pos("home")),
        actions=actions,
    )


@pytest.fixture
def solved_problem(chain_problem):
    """Initial state already satisfies the goal."""
    return Problem(
        name="solved",
        initial_state=State(frozenset({"at0", "at4"})),
        goal=chain_problem.goal,
        actions=chain_problem.actions,
    )


@pytest.fixture
def gripper2():
    return gripper_problem(2)


@pytest.fixture
def briefcase_two_objects():
    return briefcase_problem(
        locations=["home", "office"],
        objects={"paycheck": "home", "dictionary": "office"},
        goal={"paycheck": "office", "dictionary": "home"},
        briefcase_at="home",
    )
