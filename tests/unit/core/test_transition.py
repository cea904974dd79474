"""Test applicability, action application and goal checks."""

import pytest

from mcts_planning.core import (
    Action,
    Condition,
    ConditionalEffect,
    Effect,
    State,
    applicable,
    apply_action,
    is_goal,
)
from mcts_planning.utils.seed import make_rng


def test_applicable_keeps_input_order(gripper2):
    """Only actions with satisfied preconditions, in the order given."""
    result = applicable(gripper2.initial_state, gripper2.actions)
    names = [a.name for a in result]

    assert names == [a.name for a in gripper2.actions
                     if gripper2.initial_state.satisfies(a.precondition)]
    assert "move rooma roomb" in names
    assert "move roomb rooma" not in names
    assert len(names) == 5


def test_apply_does_not_mutate_input(chain_problem):
    state = chain_problem.initial_state
    before = state.fluents

    nxt = apply_action(state, chain_problem.actions[0])

    assert state.fluents == before
    assert nxt.fluents == frozenset({"at1"})
    assert nxt is not state


def test_conditional_effects_apply_in_order():
    """A later conditional effect sees and overwrites earlier ones."""
    action = Action(
        name="cascade",
        effect=Effect(add=frozenset({"x"})),
        conditional_effects=(
            ConditionalEffect(Condition(positive=frozenset({"x"})), Effect(add=frozenset({"y"}))),
            ConditionalEffect(Condition(positive=frozenset({"y"})), Effect(delete=frozenset({"x"}))),
            ConditionalEffect(Condition(negative=frozenset({"x"})), Effect(add=frozenset({"z"}))),
        ),
    )

    result = apply_action(State(), action)

    assert result.fluents == frozenset({"y", "z"})


def test_conditional_effect_skipped_when_condition_fails():
    action = Action(
        name="maybe",
        conditional_effects=(
            ConditionalEffect(Condition(positive=frozenset({"armed"})), Effect(add=frozenset({"boom"}))),
        ),
    )
    assert apply_action(State(), action).fluents == frozenset()
    assert apply_action(State({"armed"}), action).fluents == frozenset({"armed", "boom"})


def test_briefcase_move_carries_contents(briefcase_p01):
    by_name = {a.name: a for a in briefcase_p01.actions}
    state = apply_action(briefcase_p01.initial_state, by_name["put-in paycheck home"])
    state = apply_action(state, by_name["move home office"])

    assert "at paycheck office" in state
    assert "at paycheck home" not in state
    assert is_goal(state, briefcase_p01.goal)


def test_goal_consistency_on_random_trajectories(briefcase_two_objects):
    """is_goal after apply matches a direct re-evaluation of the goal."""
    problem = briefcase_two_objects
    rng = make_rng(3)
    goal = problem.goal

    for _ in range(20):
        state = problem.initial_state
        for _ in range(15):
            options = applicable(state, problem.actions)
            if not options:
                break
            state = apply_action(state, options[int(rng.integers(len(options)))])
            direct = (goal.positive <= state.fluents
                      and not (goal.negative & state.fluents))
            assert is_goal(state, goal) == direct
