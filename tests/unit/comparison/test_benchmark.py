"""Test the benchmark harness: record parsing, CSV and process runs."""

import os
import sys
from pathlib import Path

from mcts_planning.comparison.benchmark import (
    BenchmarkRow,
    ProblemInstance,
    collect_instances,
    SRC_ROOT,
    parse_result_lines,
    planner_command,
    planner_env,
    read_csv,
    run_benchmark,
    run_planner,
    to_row,
    write_csv,
)


def _row(planner="MCTS", success=True, runtime_ms=12, plan_length=3):
    return BenchmarkRow(
        domain="blocks", suite=".", problem="p01.yaml", planner=planner,
        success=success, runtime_ms=runtime_ms, plan_length=plan_length,
        exit_code=0, timeout_killed=False,
    )


def test_parse_success_record():
    parsed = parse_result_lines(
        "planner log\nRESULT: SUCCESS\nRESULT: PLAN_LENGTH=7\nRESULT: RUNTIME_MS=42\n"
    )
    assert parsed.success
    assert parsed.has_record
    assert parsed.plan_length == 7
    assert parsed.runtime_ms == 42


def test_parse_failure_record():
    parsed = parse_result_lines("RESULT: FAILURE\nRESULT: PLAN_LENGTH=0\nRESULT: RUNTIME_MS=5\n")
    assert not parsed.success
    assert parsed.has_record
    assert parsed.plan_length == 0


def test_parse_without_record():
    parsed = parse_result_lines("Goal reached! plan length=4\n")
    assert parsed.success
    assert parsed.runtime_ms is None

    parsed = parse_result_lines("crashed\n")
    assert not parsed.success
    assert not parsed.has_record
    assert parsed.plan_length == 0


def test_row_formatting():
    assert BenchmarkRow.header() == [
        "domain", "suite", "problem", "planner", "success",
        "runtime_ms", "plan_length", "exit_code", "timeout_killed",
    ]
    assert _row().as_row() == ["blocks", ".", "p01.yaml", "MCTS", "true", "12", "3", "0", "false"]


def test_csv_round_trip(tmp_path):
    rows = [_row(), _row(planner="RW", success=False, plan_length=0)]
    path = tmp_path / "out" / "results.csv"

    write_csv(path, rows)

    assert path.read_text().splitlines()[0].startswith("domain,suite,problem")
    assert read_csv(path) == rows


def test_collect_instances(tmp_path):
    for rel in ("blocks/p02.yaml", "blocks/p01.yaml", "gripper/easy/p01.yaml",
                "gripper/easy/p02.yaml", "gripper/easy/p03.yaml"):
        f = tmp_path / rel
        f.parent.mkdir(parents=True, exist_ok=True)
        f.write_text("name: x\n")

    instances = collect_instances(tmp_path, domains=("blocks", "briefcase", "gripper"),
                                  limit_per_suite=2)

    assert [(i.domain, i.suite, i.problem_file.name) for i in instances] == [
        ("blocks", ".", "p01.yaml"),
        ("blocks", ".", "p02.yaml"),
        ("gripper", "easy", "p01.yaml"),
        ("gripper", "easy", "p02.yaml"),
    ]


def test_planner_command_puts_problem_last():
    cmd = planner_command("MCTS", Path("p.yaml"), ["-I", "10"], python_cmd="py")
    assert cmd == ["py", "-m", "mcts_planning.cli", "mcts", "-I", "10", "p.yaml"]


def test_run_planner_parses_output():
    code = ("print('RESULT: SUCCESS'); print('RESULT: PLAN_LENGTH=3'); "
            "print('RESULT: RUNTIME_MS=17')")
    result = run_planner([sys.executable, "-c", code], timeout_ms=30_000)

    assert result.success
    assert result.plan_length == 3
    assert result.runtime_ms == 17
    assert result.exit_code == 0
    assert not result.killed_by_timeout


def test_run_planner_kills_on_timeout():
    result = run_planner([sys.executable, "-c", "import time; time.sleep(10)"], timeout_ms=200)

    assert result.killed_by_timeout
    assert result.exit_code == -1
    assert not result.success
    assert result.runtime_ms >= 200


def test_to_row():
    inst = ProblemInstance("gripper", "easy", Path("gripper/easy/p03.yaml"))
    result = run_planner([sys.executable, "-c", "print('RESULT: FAILURE')"], timeout_ms=30_000)

    row = to_row(inst, "RW", result)

    assert row.problem == "p03.yaml"
    assert row.planner == "RW"
    assert not row.success


def test_planner_env_puts_package_root_first():
    env = planner_env({"PYTHONPATH": "/elsewhere", "HOME": "/home/x"})

    assert env["PYTHONPATH"].split(os.pathsep) == [str(SRC_ROOT), "/elsewhere"]
    assert env["HOME"] == "/home/x"
    assert (SRC_ROOT / "mcts_planning" / "cli.py").exists()
    assert planner_env({})["PYTHONPATH"] == str(SRC_ROOT)


def test_real_planner_process(example_problem_path):
    cmd = planner_command("MCTS", example_problem_path, ["-I", "50", "-R", "10"])
    result = run_planner(cmd, timeout_ms=60_000, env=planner_env({}))

    assert result.exit_code == 0, result.output
    assert result.success
    assert result.plan_length >= 2


def test_run_benchmark_rows(example_problem_path):
    inst = ProblemInstance("briefcase", ".", example_problem_path)
    params = {"MCTS": ["-I", "50", "-R", "10"], "RW": ["-L", "5", "-N", "10"]}

    rows = run_benchmark([inst], params, timeout_ms=60_000)

    assert [r.planner for r in rows] == ["MCTS", "RW"]
    assert all(r.success and r.exit_code == 0 and not r.timeout_killed for r in rows)
    assert all(r.problem == "p01.yaml" for r in rows)
