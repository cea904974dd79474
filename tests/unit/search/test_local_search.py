"""Test randomized local search rounds and restarts."""

from mcts_planning.config import PlannerConfig
from mcts_planning.search import RandomWalkSearch, RoundOutcome, best_of_walks, random_walk
from mcts_planning.utils.seed import make_rng


def test_restart_after_round_without_improvement(toggle_problem):
    """max_steps_no_improve=0: the round after a non-improving one starts from scratch."""
    config = PlannerConfig(walk_length=3, num_walks=2, max_steps_no_improve=0)
    search = RandomWalkSearch(toggle_problem, config)
    rng = make_rng(0)

    assert search.step(rng) is RoundOutcome.NOT_IMPROVED
    assert len(search.plan) == 3
    assert search.counter == 1
    assert search.needs_restart

    search.step(rng)

    assert search.restarts == 1
    # Restarted from the initial state, then one fresh walk appended
    assert len(search.plan) == 3
    assert search.counter == 1


def test_restart_resets_progress(toggle_problem):
    search = RandomWalkSearch(toggle_problem, PlannerConfig(walk_length=3, num_walks=2))
    search.step(make_rng(0))
    search.restart()

    assert search.state == toggle_problem.initial_state
    assert len(search.plan) == 0
    assert search.counter == 0
    assert search.h_min == toggle_problem.h(toggle_problem.initial_state)


def test_counter_tolerates_stalls(toggle_problem):
    config = PlannerConfig(walk_length=2, num_walks=2, max_steps_no_improve=3)
    search = RandomWalkSearch(toggle_problem, config)
    rng = make_rng(0)

    for _ in range(4):
        search.step(rng)
    assert search.restarts == 0
    assert search.counter == 4

    search.step(rng)
    assert search.restarts == 1


def test_all_dead_ends_means_no_candidate(dead_end_problem):
    search = RandomWalkSearch(dead_end_problem, PlannerConfig(walk_length=5, num_walks=4))

    assert search.step(make_rng(0)) is RoundOutcome.NO_CANDIDATE
    assert search.restarts == 1
    assert search.state == dead_end_problem.initial_state
    assert len(search.plan) == 0


def test_goal_walk_adopted(chain_problem):
    search = RandomWalkSearch(chain_problem, PlannerConfig(walk_length=10, num_walks=3))

    assert search.step(make_rng(0)) is RoundOutcome.GOAL
    assert search.is_goal()
    assert [a.name for a in search.plan.actions()] == [f"step {i}" for i in range(4)]


def test_improvement_resets_counter(chain_problem):
    """h_add on a chain drops by one per step."""
    problem = chain_problem.with_heuristic("h_add")
    search = RandomWalkSearch(problem, PlannerConfig(walk_length=1, num_walks=1))
    rng = make_rng(0)

    assert search.step(rng) is RoundOutcome.IMPROVED
    assert search.h_min == 3
    assert search.counter == 0


def test_best_of_walks_picks_lowest_heuristic(gripper2):
    problem = gripper2.with_heuristic("h_add")
    rng = make_rng(4)
    walk = best_of_walks(problem, problem.initial_state, rng, num_walks=30, walk_length=4)

    assert walk is not None
    replay_rng = make_rng(4)
    values = []
    for _ in range(30):
        w = random_walk(problem.initial_state, problem.actions, problem.goal, 4, replay_rng)
        if w.reached_goal:
            break
        if not w.dead_end:
            values.append(problem.h(w.end_state))
    assert problem.h(walk.end_state) == min(values)
