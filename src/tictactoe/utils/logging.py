"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Any

from rich.console import Console
from rich.table import Table
from rich.panel import Panel


console = Console()


@dataclass
class RoundRecord:
    """Summary of one finished round."""

    round_number: int
    winner: Optional[str]  # Player name, None for a draw
    board: str
    moves: list[int]
    scores: dict[str, int]
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


class Logger:
    """
    Match logger with rich output and optional JSON logging.

    Args:
        log_dir: Directory for log files (no file is written if None)
        verbose: Whether to print to console
    """

    def __init__(self, log_dir: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.log_file: Optional[Path] = None

        if log_dir:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = path / f"match_{timestamp}.jsonl"

        self.rounds: list[RoundRecord] = []

    def log_round(self, record: RoundRecord) -> None:
        """Record one finished round."""
        self.rounds.append(record)

        if self.log_file is not None:
            with open(self.log_file, "a") as f:
                f.write(json.dumps(asdict(record)) + "\n")

    def log_message(self, message: str, style: str = "white") -> None:
        """Log a message."""
        if self.verbose:
            console.print(f"[{style}]{message}[/]")

    def log_info(self, message: str) -> None:
        """Log info message."""
        self.log_message(message, "blue")

    def log_success(self, message: str) -> None:
        """Log success message."""
        self.log_message(message, "green")

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.log_message(message, "yellow")

    def log_error(self, message: str) -> None:
        """Log error message."""
        self.log_message(message, "red")


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    def add_dict(d: dict, prefix: str = "") -> None:
        for k, v in d.items():
            key = f"{prefix}{k}" if prefix else k
            if isinstance(v, dict):
                add_dict(v, f"{key}.")
            else:
                table.add_row(key, str(v))

    add_dict(asdict(config))
    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(board_str, title=title, border_style="blue", expand=False))


def print_scores(scores: dict[str, int], markers: Optional[dict[str, str]] = None) -> None:
    """Print the match scoreboard."""
    table = Table(title="Score", show_header=False, box=None)
    table.add_column("Player", style="cyan")
    table.add_column("Points", style="white")

    for name, points in scores.items():
        label = f"{name} ({markers[name]})" if markers and name in markers else name
        table.add_row(label, str(points))

    console.print(table)


def print_move_scores(scores: list[Any], chosen: Optional[int] = None) -> None:
    """Print candidate moves and their game values."""
    outcome = {1: "[green]win[/]", 0: "[yellow]draw[/]", -1: "[red]loss[/]"}

    table = Table(title="Move values", show_header=True)
    table.add_column("Square", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Outcome")

    for s in scores:
        square = f"{s.position} *" if s.position == chosen else str(s.position)
        table.add_row(square, f"{s.value:+d}", outcome.get(s.value, "?"))

    console.print(table)
