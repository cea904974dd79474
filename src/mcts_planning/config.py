"""Planner configuration.

A single validated value replaces per-planner option plumbing. Every
numeric bound is checked once, at construction, so that no search ever
starts with a bad setting.
"""

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


HEURISTIC_KINDS = ("goal_count", "h_add", "h_max")


class ConfigError(ValueError):
    """Raised for invalid planner configuration."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PlannerConfig:
    """Configuration shared by the MCTS and random-walk planners."""
    # MCTS
    iterations: int = 300
    rollout_depth: int = 40
    max_plan_length: int = 500
    exploration_constant: float = 1.4
    # Randomized local search
    walk_length: int = 10
    num_walks: int = 100
    max_steps_no_improve: int = 7
    heuristic_kind: str = "goal_count"
    # Driver
    timeout_ms: Optional[int] = 600_000
    seed: int = 0

    def __post_init__(self):
        for name in ("iterations", "rollout_depth", "max_plan_length",
                     "walk_length", "num_walks"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        c = self.exploration_constant
        if isinstance(c, bool) or not isinstance(c, (int, float)) or c < 0.0:
            raise ConfigError(f"exploration_constant must be a number >= 0, got {c!r}")
        if not _is_int(self.max_steps_no_improve) or self.max_steps_no_improve < 0:
            raise ConfigError(
                f"max_steps_no_improve must be an integer >= 0, got {self.max_steps_no_improve!r}"
            )
        if self.timeout_ms is not None and (not _is_int(self.timeout_ms) or self.timeout_ms <= 0):
            raise ConfigError(f"timeout_ms must be a positive integer or None, got {self.timeout_ms!r}")
        if not _is_int(self.seed):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.heuristic_kind not in HEURISTIC_KINDS:
            raise ConfigError(
                f"Unknown heuristic {self.heuristic_kind!r}, "
                f"expected one of {', '.join(HEURISTIC_KINDS)}"
            )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PlannerConfig":
        """Build a config from a plain dict, rejecting unknown keys."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "PlannerConfig":
        """Load config from YAML.

        The file may hold the options at top level or under a ``planner:``
        section.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Config not found: {p}")
        with open(p, 'r') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {p}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")
        if "planner" in data:
            data = data["planner"] or {}
            if not isinstance(data, dict):
                raise ConfigError("Config section 'planner' must be a mapping")
        return cls.from_dict(data)

    def merged(self, **overrides: Any) -> "PlannerConfig":
        """Return a copy with the non-None overrides applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return PlannerConfig.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
