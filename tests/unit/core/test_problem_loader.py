"""Test reading and writing YAML problems."""

import pytest

from mcts_planning.core import (
    ProblemFormatError,
    dump_problem,
    load_problem,
    problem_from_dict,
    problem_to_dict,
)
from mcts_planning.domains import blocksworld_problem


def test_load_example_file(briefcase_p01):
    """The shipped briefcase problem has its conditional effects and negative preconditions."""
    by_name = {a.name: a for a in briefcase_p01.actions}

    assert briefcase_p01.name == "briefcase-p01"
    assert briefcase_p01.domain == "briefcase"
    assert len(briefcase_p01.actions) == 5
    assert len(by_name["move home office"].conditional_effects) == 1
    assert by_name["put-in paycheck home"].precondition.negative == frozenset({"in paycheck"})
    assert briefcase_p01.goal.positive == frozenset({"at paycheck office"})


def test_dump_and_load_preserve_problem(tmp_path, briefcase_two_objects):
    path = tmp_path / "nested" / "p.yaml"
    dump_problem(briefcase_two_objects, path)
    loaded = load_problem(path)

    assert loaded.initial_state == briefcase_two_objects.initial_state
    assert loaded.goal == briefcase_two_objects.goal
    assert loaded.actions == briefcase_two_objects.actions


def test_goal_as_list():
    problem = problem_from_dict({"init": ["a"], "goal": ["b"], "actions": []})
    assert problem.goal.positive == frozenset({"b"})
    assert problem.goal.negative == frozenset()


def test_action_cost_survives_round_trip():
    data = {
        "name": "costly",
        "init": [],
        "goal": ["done"],
        "actions": [{"name": "finish", "add": ["done"], "cost": 3}],
    }
    problem = problem_from_dict(data)
    assert problem.actions[0].cost == 3
    assert problem_to_dict(problem)["actions"][0]["cost"] == 3


@pytest.mark.parametrize("data", [
    [],
    {"init": [], "actions": []},
    {"init": [], "goal": "b"},
    {"init": "a", "goal": ["b"]},
    {"init": [], "goal": ["b"], "actions": [{"pre": ["a"]}]},
    {"init": [], "goal": ["b"], "actions": [{"name": "x", "add": [1]}]},
    {"init": [], "goal": ["b"], "actions": [{"name": "x", "when": {"add": ["b"]}}]},
    {"init": [], "goal": ["b"], "actions": [{"name": "x", "cost": -1}]},
])
def test_malformed_problems_rejected(data):
    with pytest.raises(ProblemFormatError):
        problem_from_dict(data)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_problem(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("init: [a\n")
    with pytest.raises(ProblemFormatError):
        load_problem(path)


def test_blocksworld_generator():
    problem = blocksworld_problem([["a", "b"], ["c"]], [["c", "b", "a"]])

    assert problem.initial_state.fluents == frozenset({
        "ontable a", "on b a", "clear b", "ontable c", "clear c", "handempty"})
    assert problem.goal.positive == frozenset({"ontable c", "on b c", "on a b"})
    # 2 single-block actions per block, 2 per ordered pair
    assert len(problem.actions) == 2 * 3 + 2 * 6

    with pytest.raises(ValueError):
        blocksworld_problem([["a"]], [["z"]])
