"""Reading and writing grounded problems as YAML.

Format::

    name: gripper-2
    domain: gripper
    init: [at-robby rooma, free left, ...]
    goal:
      positive: [at ball1 roomb]
      negative: []
    actions:
      - name: move rooma roomb
        pre: [at-robby rooma]
        not_pre: []
        add: [at-robby roomb]
        del: [at-robby rooma]
        when:
          - pre: [...]
            not_pre: [...]
            add: [...]
            del: [...]
        cost: 1

A goal given as a plain list is read as its positive part.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .action import Action
from .problem import Problem
from .state import Condition, ConditionalEffect, Effect, State


class ProblemFormatError(ValueError):
    """Raised for malformed problem files."""


def _fluent_list(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ProblemFormatError(f"{where} must be a list of fluents, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, str):
            raise ProblemFormatError(f"{where} contains a non-string fluent: {item!r}")
    return list(value)


def _condition(data: Dict[str, Any], pos_key: str, neg_key: str, where: str) -> Condition:
    return Condition(
        positive=frozenset(_fluent_list(data.get(pos_key), f"{where}.{pos_key}")),
        negative=frozenset(_fluent_list(data.get(neg_key), f"{where}.{neg_key}")),
    )


def _effect(data: Dict[str, Any], where: str) -> Effect:
    return Effect(
        add=frozenset(_fluent_list(data.get("add"), f"{where}.add")),
        delete=frozenset(_fluent_list(data.get("del"), f"{where}.del")),
    )


def _action(data: Any, index: int) -> Action:
    where = f"actions[{index}]"
    if not isinstance(data, dict):
        raise ProblemFormatError(f"{where} must be a mapping")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ProblemFormatError(f"{where} needs a non-empty name")

    conditional = []
    when = data.get("when") or []
    if not isinstance(when, list):
        raise ProblemFormatError(f"{where}.when must be a list")
    for j, ce in enumerate(when):
        ce_where = f"{where}.when[{j}]"
        if not isinstance(ce, dict):
            raise ProblemFormatError(f"{ce_where} must be a mapping")
        conditional.append(ConditionalEffect(
            condition=_condition(ce, "pre", "not_pre", ce_where),
            effect=_effect(ce, ce_where),
        ))

    cost = data.get("cost", 1)
    if isinstance(cost, bool) or not isinstance(cost, int) or cost < 0:
        raise ProblemFormatError(f"{where}.cost must be a non-negative integer")

    return Action(
        name=name,
        precondition=_condition(data, "pre", "not_pre", where),
        effect=_effect(data, where),
        conditional_effects=tuple(conditional),
        cost=cost,
    )


def problem_from_dict(data: Dict[str, Any]) -> Problem:
    """Build a Problem from its dict form."""
    if not isinstance(data, dict):
        raise ProblemFormatError(f"Problem root must be a mapping, got {type(data).__name__}")

    goal_data = data.get("goal")
    if goal_data is None:
        raise ProblemFormatError("Problem has no goal")
    if isinstance(goal_data, list):
        goal = Condition(positive=frozenset(_fluent_list(goal_data, "goal")))
    elif isinstance(goal_data, dict):
        goal = _condition(goal_data, "positive", "negative", "goal")
    else:
        raise ProblemFormatError("goal must be a list or a mapping")

    actions_data = data.get("actions") or []
    if not isinstance(actions_data, list):
        raise ProblemFormatError("actions must be a list")

    return Problem(
        name=str(data.get("name", "problem")),
        domain=str(data.get("domain", "")),
        initial_state=State(frozenset(_fluent_list(data.get("init"), "init"))),
        goal=goal,
        actions=tuple(_action(a, i) for i, a in enumerate(actions_data)),
    )


def problem_to_dict(problem: Problem) -> Dict[str, Any]:
    """Inverse of ``problem_from_dict`` (heuristic not included)."""
    def effect_dict(cond: Optional[Condition], eff: Effect) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if cond is not None:
            out["pre"] = sorted(cond.positive)
            if cond.negative:
                out["not_pre"] = sorted(cond.negative)
        out["add"] = sorted(eff.add)
        out["del"] = sorted(eff.delete)
        return out

    actions = []
    for a in problem.actions:
        entry: Dict[str, Any] = {"name": a.name}
        entry.update(effect_dict(a.precondition, a.effect))
        if a.conditional_effects:
            entry["when"] = [effect_dict(ce.condition, ce.effect) for ce in a.conditional_effects]
        if a.cost != 1:
            entry["cost"] = a.cost
        actions.append(entry)

    return {
        "name": problem.name,
        "domain": problem.domain,
        "init": sorted(problem.initial_state.fluents),
        "goal": {
            "positive": sorted(problem.goal.positive),
            "negative": sorted(problem.goal.negative),
        },
        "actions": actions,
    }


def load_problem(path: Union[str, Path]) -> Problem:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Problem file not found: {p}")
    with open(p, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ProblemFormatError(f"Invalid YAML in {p}: {e}") from e
    return problem_from_dict(data)


def dump_problem(problem: Problem, path: Union[str, Path]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, 'w') as f:
        yaml.safe_dump(problem_to_dict(problem), f, sort_keys=False)
