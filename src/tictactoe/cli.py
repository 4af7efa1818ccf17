"""
Command-line interface for Tic-Tac-Toe.

Commands:
- play: Play a match against the unbeatable computer
- best: Show the value of every move on a board and the chosen one
- analyze: Describe a board (winner, terminal, threats)
- compare: Search a board with and without alpha-beta pruning
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Sequence
import typer
from rich.console import Console

app = typer.Typer(
    name="ttt",
    help="Tic-Tac-Toe with an unbeatable alpha-beta minimax player",
    no_args_is_help=True,
)

console = Console()


def joinor(items: Sequence[object], delimiter: str = ", ", conjunction: str = "or") -> str:
    """Join items for a prompt: 'a', 'a or b', 'a, b or c'."""
    words = [str(i) for i in items]
    if len(words) <= 2:
        return f" {conjunction} ".join(words)
    return delimiter.join(words[:-1]) + f" {conjunction} {words[-1]}"


def _parse_board(text: str):
    from .game import Board, InvalidMove

    try:
        return Board.from_string(text)
    except InvalidMove as exc:
        console.print(f"[red]Invalid board: {exc}[/]")
        raise typer.Exit(code=1)


def _parse_marker(text: str):
    from .game import Marker

    try:
        return Marker.parse(text)
    except ValueError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=1)


def _prompt_move(board) -> int:
    """Ask the human for a square until a legal one is given."""
    open_squares = board.unmarked_positions()
    while True:
        answer = typer.prompt(f"Choose a square ({joinor(open_squares)})")
        try:
            square = int(answer.strip())
        except ValueError:
            square = None
        if square in open_squares:
            return square
        console.print("[red]Sorry, that's not a valid choice[/]")


def _prompt_name(name: Optional[str] = None) -> str:
    """Ask for a name until it contains at least one word character."""
    while name is None or not re.search(r"\w", name):
        if name is not None:
            console.print("[red]Sorry, you must enter a name[/]")
        name = typer.prompt("What is your name?")
    return name.strip()


def _prompt_marker(default: str = "X"):
    from .game import Marker

    while True:
        answer = typer.prompt("Choose your marker (X or O)", default=default)
        try:
            return Marker.parse(answer)
        except ValueError:
            console.print("[red]Sorry, that's not a valid choice[/]")


@app.command()
def play(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    marker: Optional[str] = typer.Option(
        None, "--marker", "-m", help="Your marker (X moves first)"
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Your name"),
    rounds: Optional[int] = typer.Option(
        None, "--rounds", "-n", help="Points needed to win the match"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Play a match against the computer."""
    import random
    import time
    from .game import Board, Marker, ConfigError
    from .play import HumanPlayer, ComputerPlayer, Match, pick_computer_name
    from .utils import (
        Config, Logger, RoundRecord, set_seed, print_board, print_config, print_scores,
    )

    try:
        config = Config.load(str(config_path)) if config_path and config_path.exists() else Config()
        if marker is not None:
            config.match.human_marker = marker
        if rounds is not None:
            config.match.rounds_to_win = rounds
        if seed is not None:
            config.seed = seed
        config.validate()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=1)

    config.ensure_dirs()
    if config.seed is not None:
        set_seed(config.seed)
    logger = Logger(log_dir=config.log_dir, verbose=config.verbose)
    if config.verbose:
        print_config(config)

    console.print("[bold]Welcome to Tic Tac Toe![/]\n")
    name = _prompt_name(name)
    if marker is None:
        human_marker = _prompt_marker(config.match.human_marker)
    else:
        human_marker = Marker.parse(config.match.human_marker)
    computer_name = pick_computer_name(config.match.computer_names, random, exclude=[name])
    human = HumanPlayer(name, human_marker, _prompt_move)
    computer = ComputerPlayer(computer_name, human_marker.opponent())
    markers = {human.name: human.marker.symbol, computer.name: computer.marker.symbol}

    def on_move(player, move, board):
        if player is computer:
            logger.log_info(f"{computer.name} marked square {move}")
            if config.match.think_delay:
                time.sleep(config.match.think_delay)
        print_board(board.render(), title="Board")

    def on_round_end(result):
        winner = match.player_for(result.winner).name if result.winner is not None else None
        logger.log_round(RoundRecord(
            round_number=len(match.rounds),
            winner=winner,
            board=result.board.to_string(),
            moves=result.moves,
            scores=dict(match.scores),
        ))
        if winner is None:
            logger.log_warning("It's a tie!")
        elif winner == human.name:
            logger.log_success("You won the round!")
        else:
            logger.log_error(f"{winner} won the round!")
        print_scores(match.scores, markers)
        if not match.finished:
            logger.log_info("Next round!")
            print_board(Board.empty().render(), title="Board")

    match = Match(
        human,
        computer,
        rounds_to_win=config.match.rounds_to_win,
        first_marker=Marker.parse(config.match.first_marker),
        on_move=on_move,
        on_round_end=on_round_end,
    )

    console.print(f"{human.name} ({human.marker.symbol}) vs {computer.name} ({computer.marker.symbol})")
    console.print(f"First to {match.rounds_to_win} points wins the match.\n")

    while True:
        print_board(Board.empty().render(), title="Board")
        result = match.play()
        if result.champion == human.name:
            console.print("[bold green]You won the game![/]")
        else:
            console.print(f"[bold red]{result.champion} won the game![/]")

        if not typer.confirm("Would you like to play again?", default=False):
            break
        match.reset()

    console.print("Thanks for playing Tic Tac Toe! Goodbye!")


@app.command()
def best(
    board_str: str = typer.Argument(..., metavar="BOARD", help="9 cells, e.g. 'XO..X....'"),
    marker: Optional[str] = typer.Option(
        None, "--marker", "-m", help="Side to move (inferred if omitted)"
    ),
) -> None:
    """Show the value of every move and the optimal choice."""
    from .search import MinimaxPlayer, is_terminal
    from .utils import print_board, print_move_scores

    board = _parse_board(board_str)
    side = _parse_marker(marker) if marker else board.side_to_move()

    print_board(board.render(), title=f"{side.symbol} to move")
    if is_terminal(board):
        console.print("[yellow]The game is over, there is no move to make.[/]")
        raise typer.Exit(code=1)

    player = MinimaxPlayer(side)
    move = player.choose_move(board)
    print_move_scores(player.last_scores, chosen=move)
    console.print(f"[green]Best move for {side.symbol}: {move}[/] ({player.last_stats.nodes} nodes)")


@app.command()
def analyze(
    board_str: str = typer.Argument(..., metavar="BOARD", help="9 cells, e.g. 'XO..X....'"),
) -> None:
    """Describe a board: winner, terminal status and open threats."""
    from .game import Marker
    from .search import is_terminal
    from .utils import print_board

    board = _parse_board(board_str)
    print_board(board.render(), title=board.to_string())

    winner = board.winner()
    console.print(f"Terminal:  {is_terminal(board)}")
    console.print(f"Full:      {board.is_full()}")
    console.print(f"Winner:    {winner.symbol if winner is not None else '-'}")
    console.print(f"Open:      {joinor(board.unmarked_positions(), conjunction='and') or '-'}")
    for m in (Marker.X, Marker.O):
        threat = board.potential_win(m)
        console.print(f"{m.symbol} threat:  {threat if threat is not None else '-'}")


@app.command()
def compare(
    board_str: str = typer.Argument(
        ".........", metavar="BOARD", help="9 cells, e.g. 'XO..X....'"
    ),
    marker: Optional[str] = typer.Option(
        None, "--marker", "-m", help="Side to move (inferred if omitted)"
    ),
) -> None:
    """Search a board with and without alpha-beta pruning."""
    import time
    from rich.table import Table
    from .search import SearchStats, score_moves, is_terminal

    board = _parse_board(board_str)
    side = _parse_marker(marker) if marker else board.side_to_move()
    if is_terminal(board):
        console.print("[yellow]The game is over, there is nothing to search.[/]")
        raise typer.Exit(code=1)

    table = Table(title=f"{side.symbol} to move on {board.to_string()}", show_header=True)
    table.add_column("Search", style="cyan")
    table.add_column("Values", style="white")
    table.add_column("Nodes", justify="right")
    table.add_column("Cutoffs", justify="right")
    table.add_column("Time", justify="right")

    results = {}
    for label, prune in (("alpha-beta", True), ("minimax", False)):
        stats = SearchStats()
        start = time.time()
        scores = score_moves(board, side, prune=prune, stats=stats)
        elapsed = time.time() - start
        results[label] = [s.value for s in scores]
        values = " ".join(f"{s.position}:{s.value:+d}" for s in scores)
        table.add_row(label, values, str(stats.nodes), str(stats.cutoffs), f"{elapsed:.2f}s")

    console.print(table)
    if results["alpha-beta"] == results["minimax"]:
        console.print("[green]Values agree.[/]")
    else:
        console.print("[red]Values differ![/]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
