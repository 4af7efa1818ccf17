"""Utilities module."""

from .config import (
    Config,
    MatchConfig,
    DEFAULT_COMPUTER_NAMES,
    get_default_config,
)
from .seed import set_seed
from .logging import (
    Logger,
    RoundRecord,
    console,
    print_config,
    print_board,
    print_scores,
    print_move_scores,
)

__all__ = [
    "Config",
    "MatchConfig",
    "DEFAULT_COMPUTER_NAMES",
    "get_default_config",
    "set_seed",
    "Logger",
    "RoundRecord",
    "console",
    "print_config",
    "print_board",
    "print_scores",
    "print_move_scores",
]
