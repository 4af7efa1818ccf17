"""
Tic-Tac-Toe board.

Board representation: read-only numpy array of length 9, dtype int8
  - 0: empty
  - +1: X
  - -1: O

Positions are 1-based and row-major:
 1 | 2 | 3
 ---------
 4 | 5 | 6
 ---------
 7 | 8 | 9

Boards are values. Marking a cell returns a new board; the receiver is
never modified, so sibling branches of a search can never alias each other.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional

import numpy as np

from .errors import InvalidMove


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
POSITIONS = tuple(range(1, NUM_CELLS + 1))

# Rows, then columns, then diagonals. winner() relies on this order.
WINNING_LINES = (
    # Rows
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    # Columns
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    # Diagonals
    (1, 5, 9),
    (3, 5, 7),
)

# Same lines as 0-based indices into the cell array, shape (8, 3)
_LINE_INDEX = np.array(WINNING_LINES, dtype=np.intp) - 1


class Marker(IntEnum):
    """Cell contents. X moves first."""

    EMPTY = 0
    X = 1
    O = -1

    @property
    def symbol(self) -> str:
        return {0: " ", 1: "X", -1: "O"}[self.value]

    def opponent(self) -> Marker:
        if self == Marker.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Marker(-self.value)

    @classmethod
    def parse(cls, text: str) -> Marker:
        """Parse 'X' or 'O' (case-insensitive)."""
        key = text.strip().upper()
        if key not in ("X", "O"):
            raise ValueError(f"Unknown marker {text!r}, must be X or O")
        return cls[key]


_CHAR_TO_MARKER = {
    "X": Marker.X,
    "O": Marker.O,
    ".": Marker.EMPTY,
    "-": Marker.EMPTY,
    " ": Marker.EMPTY,
}


def _check_position(position: int) -> int:
    """Return the 0-based index of a 1-based position."""
    if (
        isinstance(position, bool)
        or not isinstance(position, (int, np.integer))
        or position not in POSITIONS
    ):
        raise InvalidMove(f"Invalid position {position!r}, must be 1-{NUM_CELLS}")
    return int(position) - 1


class Board:
    """Immutable 3x3 board."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Iterable[int]] = None):
        if cells is None:
            arr = np.zeros(NUM_CELLS, dtype=np.int8)
        else:
            if not isinstance(cells, np.ndarray):
                cells = list(cells)
            arr = np.array(cells, dtype=np.int8).reshape(-1)
        if arr.shape != (NUM_CELLS,):
            raise ValueError(f"Board must have {NUM_CELLS} cells")
        if not np.isin(arr, (-1, 0, 1)).all():
            raise ValueError("Cells must be 0 (empty), 1 (X) or -1 (O)")
        arr.flags.writeable = False
        self._cells = arr

    # ---------- Construction ----------

    @classmethod
    def empty(cls) -> Board:
        """Return a board with every cell empty."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> Board:
        """
        Parse the compact form, e.g. "XO..X...O".

        Accepts X/O (any case) for markers and '.', '-' or ' ' for empty
        cells. Row separators '/' and '|' are ignored.
        """
        chars = [c for c in text.upper() if c not in "/|"]
        if len(chars) != NUM_CELLS:
            raise InvalidMove(f"Board string must describe {NUM_CELLS} cells, got {len(chars)}")
        try:
            return cls([int(_CHAR_TO_MARKER[c]) for c in chars])
        except KeyError as exc:
            raise InvalidMove(f"Unexpected character {exc.args[0]!r} in board string") from None

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array (index = position - 1)."""
        return self._cells

    # ---------- Queries ----------

    def __getitem__(self, position: int) -> Marker:
        return Marker(int(self._cells[_check_position(position)]))

    def unmarked_positions(self) -> list[int]:
        """Empty positions in ascending order."""
        return [int(i) + 1 for i in np.flatnonzero(self._cells == Marker.EMPTY)]

    def unmarked_positions_in(self, line: Iterable[int]) -> list[int]:
        """Empty positions among `line`, in the order given."""
        return [p for p in line if self._cells[_check_position(p)] == Marker.EMPTY]

    def is_full(self) -> bool:
        return not self.unmarked_positions()

    def played_markers(self) -> set[Marker]:
        """Distinct markers present on the board."""
        return {Marker(int(v)) for v in np.unique(self._cells) if v != Marker.EMPTY}

    def winner(self) -> Optional[Marker]:
        """
        Marker holding a complete line, or None.

        If both markers hold a line (not reachable by alternating play) the
        marker of the first completed line in WINNING_LINES order wins.
        """
        played = self.played_markers()
        if not played:
            return None
        for line in self._cells[_LINE_INDEX]:
            first = Marker(int(line[0]))
            if first in played and (line == first).all():
                return first
        return None

    def potential_win(self, marker: Marker) -> Optional[int]:
        """Open cell completing a line where `marker` already holds two cells."""
        for line, values in zip(WINNING_LINES, self._cells[_LINE_INDEX]):
            if (values == marker).sum() == 2 and (values == Marker.EMPTY).sum() == 1:
                return self.unmarked_positions_in(line)[0]
        return None

    def count(self, marker: Marker) -> int:
        return int((self._cells == marker).sum())

    def side_to_move(self) -> Marker:
        """Infer the side to move from marker counts (X plays first)."""
        return Marker.X if self.count(Marker.X) == self.count(Marker.O) else Marker.O

    # ---------- Moves ----------

    def copy_with(self, position: int, marker: Marker) -> Board:
        """Return a new board with `position` set to `marker`."""
        idx = _check_position(position)
        if marker == Marker.EMPTY:
            raise InvalidMove("Cannot place EMPTY")
        if self._cells[idx] != Marker.EMPTY:
            raise InvalidMove(f"Position {position} is already marked")

        new_cells = self._cells.copy()
        new_cells[idx] = int(marker)
        return Board(new_cells)

    # ---------- Value semantics ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()

    # ---------- Rendering ----------

    def to_string(self) -> str:
        """Compact 9-character form using '.' for empty cells."""
        return "".join(Marker(int(v)).symbol if v else "." for v in self._cells)

    def render(self) -> str:
        """Render board as ASCII art."""
        symbols = [Marker(int(v)).symbol for v in self._cells]
        lines = []
        for r in range(BOARD_SIZE):
            row = symbols[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
            lines.append("     |     |")
            lines.append("  " + "  |  ".join(row))
            lines.append("     |     |")
            if r < BOARD_SIZE - 1:
                lines.append("-----+-----+-----")
        return "\n".join(lines)
