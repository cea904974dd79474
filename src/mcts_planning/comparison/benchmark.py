"""Benchmark runner: each planner run is a separate process.

Planners are launched with ``subprocess.run`` and killed after an external
wall-clock limit that is independent of the planner's own timeout. The
three ``RESULT:`` lines of each run are parsed and collected into CSV rows.
"""

import csv
import logging
import os
import re
import subprocess
import sys
import time
from dataclasses import dataclass, astuple, fields
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from tqdm import tqdm

logger = logging.getLogger(__name__)

# External kill, in addition to the planner's own timeout
PROCESS_TIMEOUT_MS = 120_000

# Directory holding the mcts_planning package
SRC_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_DOMAINS = ("blocks", "briefcase", "gripper")
DEFAULT_PLANNER_PARAMS: Dict[str, List[str]] = {
    "MCTS": ["-I", "300", "-R", "40", "-P", "500", "-C", "1.4"],
    "RW": ["-L", "10", "-N", "100", "-S", "7"],
}

RE_SUCCESS = re.compile(r"^RESULT:\s*SUCCESS\s*$", re.MULTILINE)
RE_FAILURE = re.compile(r"^RESULT:\s*FAILURE\s*$", re.MULTILINE)
RE_LEN = re.compile(r"^RESULT:\s*PLAN_LENGTH=(\d+)\s*$", re.MULTILINE)
RE_RUNTIME = re.compile(r"^RESULT:\s*RUNTIME_MS=(\d+)\s*$", re.MULTILINE)


@dataclass
class ParsedResult:
    """Values read from a planner's output."""
    success: bool
    plan_length: int
    runtime_ms: Optional[int]
    has_record: bool


def parse_result_lines(output: str) -> ParsedResult:
    """Parse the RESULT record out of planner output.

    Without a SUCCESS/FAILURE line, success falls back to the presence of
    "Goal reached" or "found plan" in the text.
    """
    success = RE_SUCCESS.search(output) is not None
    failure = RE_FAILURE.search(output) is not None
    m_len = RE_LEN.search(output)
    m_rt = RE_RUNTIME.search(output)

    if not success and not failure:
        success = "Goal reached" in output or "found plan" in output.lower()

    return ParsedResult(
        success=success,
        plan_length=int(m_len.group(1)) if m_len else 0,
        runtime_ms=int(m_rt.group(1)) if m_rt else None,
        has_record=success or failure,
    )


@dataclass
class ProblemInstance:
    domain: str   # blocks/briefcase/gripper
    suite: str    # subdirectory under the domain, "." if none
    problem_file: Path


@dataclass
class BenchmarkRow:
    """One CSV row."""
    domain: str
    suite: str
    problem: str
    planner: str
    success: bool
    runtime_ms: int
    plan_length: int
    exit_code: int
    timeout_killed: bool

    @classmethod
    def header(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def as_row(self) -> List[str]:
        return [str(v).lower() if isinstance(v, bool) else str(v) for v in astuple(self)]


@dataclass
class RunResult:
    success: bool
    runtime_ms: int
    plan_length: int
    exit_code: int
    killed_by_timeout: bool
    output: str


def collect_instances(
    root: Union[str, Path],
    domains: Sequence[str] = DEFAULT_DOMAINS,
    limit_per_suite: int = 10
) -> List[ProblemInstance]:
    """Find YAML problems under ``root/<domain>/[<suite>/]``.

    Sorted by domain, suite and file name; at most ``limit_per_suite`` per
    directory.
    """
    root = Path(root)
    instances = []
    for domain in domains:
        domain_dir = root / domain
        if not domain_dir.exists():
            logger.info("[SKIP] missing domain folder: %s", domain_dir)
            continue

        suite_dirs = sorted({p.parent for p in domain_dir.rglob("*.yaml")})
        for suite_dir in suite_dirs:
            suite = suite_dir.relative_to(domain_dir).as_posix()
            problems = sorted(suite_dir.glob("*.yaml"))[:limit_per_suite]
            instances.extend(ProblemInstance(domain, suite, p) for p in problems)

    instances.sort(key=lambda x: (x.domain, x.suite, x.problem_file.name))
    return instances


def planner_command(
    planner: str,
    problem_file: Union[str, Path],
    extra_params: Sequence[str] = (),
    python_cmd: str = sys.executable
) -> List[str]:
    """Command line for one planner run; flags go before the positional problem."""
    return [python_cmd, "-m", "mcts_planning.cli", planner.lower(), *extra_params, str(problem_file)]


def planner_env(base: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Environment for planner processes with ``SRC_ROOT`` first on PYTHONPATH.

    Children import ``mcts_planning`` from the same tree as the caller, installed
    or not.
    """
    env = dict(os.environ if base is None else base)
    paths = [str(SRC_ROOT)]
    if env.get("PYTHONPATH"):
        paths.append(env["PYTHONPATH"])
    env["PYTHONPATH"] = os.pathsep.join(paths)
    return env


def run_planner(
    cmd: Sequence[str],
    timeout_ms: int = PROCESS_TIMEOUT_MS,
    env: Optional[Dict[str, str]] = None
) -> RunResult:
    """Run one planner process and parse its result record.

    ``env`` defaults to ``planner_env()``.
    """
    start_time = time.time()
    killed = False
    try:
        proc = subprocess.run(
            list(cmd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout_ms / 1000.0,
            env=env if env is not None else planner_env()
        )
        output = proc.stdout or ""
        exit_code = proc.returncode
    except subprocess.TimeoutExpired as e:
        killed = True
        exit_code = -1
        output = e.stdout or ""
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")

    runtime_ms = int((time.time() - start_time) * 1000)
    parsed = parse_result_lines(output)

    return RunResult(
        success=parsed.success,
        runtime_ms=parsed.runtime_ms if parsed.runtime_ms is not None else runtime_ms,
        plan_length=parsed.plan_length,
        exit_code=exit_code,
        killed_by_timeout=killed,
        output=output,
    )


def to_row(inst: ProblemInstance, planner: str, result: RunResult) -> BenchmarkRow:
    return BenchmarkRow(
        domain=inst.domain,
        suite=inst.suite,
        problem=inst.problem_file.name,
        planner=planner,
        success=result.success,
        runtime_ms=result.runtime_ms,
        plan_length=result.plan_length,
        exit_code=result.exit_code,
        timeout_killed=result.killed_by_timeout,
    )


def write_csv(path: Union[str, Path], rows: Sequence[BenchmarkRow]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(BenchmarkRow.header())
        for row in rows:
            writer.writerow(row.as_row())


def read_csv(path: Union[str, Path]) -> List[BenchmarkRow]:
    rows = []
    with open(path, newline='', encoding='utf-8') as f:
        for rec in csv.DictReader(f):
            rows.append(BenchmarkRow(
                domain=rec["domain"],
                suite=rec["suite"],
                problem=rec["problem"],
                planner=rec["planner"],
                success=rec["success"] == "true",
                runtime_ms=int(rec["runtime_ms"]),
                plan_length=int(rec["plan_length"]),
                exit_code=int(rec["exit_code"]),
                timeout_killed=rec["timeout_killed"] == "true",
            ))
    return rows


def run_benchmark(
    instances: Sequence[ProblemInstance],
    planner_params: Optional[Dict[str, List[str]]] = None,
    timeout_ms: int = PROCESS_TIMEOUT_MS,
    python_cmd: str = sys.executable,
    progress: bool = False
) -> List[BenchmarkRow]:
    """Run every planner on every instance, in instance order.

    With ``progress`` a tqdm bar tracks the instances.
    """
    planner_params = planner_params if planner_params is not None else DEFAULT_PLANNER_PARAMS
    env = planner_env()
    rows = []
    for inst in tqdm(instances, desc="Benchmarking", disable=not progress):
        logger.info("[%s / %s] %s", inst.domain, inst.suite, inst.problem_file.name)
        for planner, params in planner_params.items():
            cmd = planner_command(planner, inst.problem_file, params, python_cmd)
            result = run_planner(cmd, timeout_ms, env)
            rows.append(to_row(inst, planner, result))
            logger.info("  %s: ok=%s runtime=%dms len=%d exit=%d timeoutKilled=%s",
                        planner, result.success, result.runtime_ms, result.plan_length,
                        result.exit_code, result.killed_by_timeout)
    return rows
