"""
Configuration management for Tic-Tac-Toe matches.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional
import yaml

from ..game import ConfigError, Marker


DEFAULT_COMPUTER_NAMES = ["R2D2", "C3PO", "Awesome-O", "BeepBopRobot", "Sonny"]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class MatchConfig:
    """Match configuration."""

    rounds_to_win: int = 5
    first_marker: str = "X"  # Marker that opens every round
    human_marker: str = "X"
    computer_names: list[str] = field(default_factory=lambda: list(DEFAULT_COMPUTER_NAMES))
    think_delay: float = 0.2  # Seconds the computer "thinks" in the console


@dataclass
class Config:
    """Full application configuration."""

    match: MatchConfig = field(default_factory=MatchConfig)

    # Global settings
    seed: Optional[int] = None
    log_dir: Optional[str] = None  # JSONL round log, disabled if None
    verbose: bool = True

    def validate(self) -> None:
        """Raise ConfigError if any value is out of range."""
        m = self.match
        if not _is_int(m.rounds_to_win) or m.rounds_to_win < 1:
            raise ConfigError(f"rounds_to_win must be an integer >= 1, got {m.rounds_to_win!r}")
        for key in ("first_marker", "human_marker"):
            value = getattr(m, key)
            if not isinstance(value, str):
                raise ConfigError(f"match.{key} must be X or O, got {value!r}")
            try:
                Marker.parse(value)
            except ValueError as exc:
                raise ConfigError(f"match.{key}: {exc}") from None
        if not isinstance(m.computer_names, list) or not m.computer_names:
            raise ConfigError("computer_names must be a non-empty list")
        if not all(isinstance(n, str) and n.strip() for n in m.computer_names):
            raise ConfigError(f"computer_names must be non-blank strings, got {m.computer_names!r}")
        if not (_is_int(m.think_delay) or isinstance(m.think_delay, float)) or m.think_delay < 0:
            raise ConfigError(f"think_delay must be a number >= 0, got {m.think_delay!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.log_dir is not None and not isinstance(self.log_dir, str):
            raise ConfigError(f"log_dir must be a path, got {self.log_dir!r}")

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config file {path}: expected a mapping at the top level")
        match = data.get("match") or {}
        if not isinstance(match, dict):
            raise ConfigError(f"Invalid config file {path}: 'match' must be a mapping")

        try:
            config = cls(
                match=MatchConfig(**match),
                seed=data.get("seed"),
                log_dir=data.get("log_dir"),
                verbose=data.get("verbose", True),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from None
        config.validate()
        return config

    def ensure_dirs(self) -> None:
        """Create output directories if they don't exist."""
        if self.log_dir:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
