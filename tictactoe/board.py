"""
Board state for TicTacToe.
Holds the 9 cells and evaluates terminal states.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import TerminalResult, WinChecker

logger = logging.getLogger(__name__)


class Marker(Enum):
    """The two markers in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Marker":
        """Get the opposite marker."""
        return Marker.O if self == Marker.X else Marker.X


# Spellings accepted for an empty cell when building a board from strings
_EMPTY_SPELLINGS = ("", " ", ".", "_")


def parse_cell(value: object) -> Optional[Marker]:
    """
    Convert a cell value to a Marker (or None for empty).

    Accepts Marker, None, or a string such as "X", "o", "", "." or "_".
    """
    if value is None or isinstance(value, Marker):
        return value
    if isinstance(value, str):
        if value in _EMPTY_SPELLINGS:
            return None
        try:
            return Marker(value.upper())
        except ValueError:
            pass
    raise ValueError(f"Invalid cell value: {value!r}")


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored row-major: index = row * 3 + col.
    None means empty, otherwise the Marker that was placed.
    A cell is never overwritten once set; `place` is the only way in.
    """

    def __init__(self):
        self._cells: List[Optional[Marker]] = [None] * GameConfig.NUM_CELLS
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @classmethod
    def from_cells(cls, cells: Iterable[object]) -> "Board":
        """
        Build a board from 9 cell values.

        Args:
            cells: Markers, None, or marker strings (see parse_cell).

        Returns:
            A new Board.
        """
        parsed = [parse_cell(cell) for cell in cells]
        if len(parsed) != GameConfig.NUM_CELLS:
            raise ValueError(
                f"A board needs {GameConfig.NUM_CELLS} cells, got {len(parsed)}"
            )
        board = cls()
        board._cells = parsed
        return board

    def cells(self) -> Tuple[Optional[Marker], ...]:
        """Read-only snapshot of the 9 cells."""
        return tuple(self._cells)

    def place(self, index: int, marker: Marker) -> bool:
        """
        Place a marker on an empty cell.

        Args:
            index: Cell index (0-8).
            marker: The marker to place (must be a Marker).

        Returns:
            True if the cell was set, False if the move is illegal
            (board left unchanged).
        """
        if not isinstance(marker, Marker):
            logger.debug("Rejected placement of %r: not a Marker", marker)
            return False

        result = self.validator.validate_placement(self._cells, index)
        if not result.is_valid:
            logger.debug("Rejected placement of %s: %s", marker.value, result.error_message)
            return False

        self._cells[index] = marker
        return True

    def reset(self) -> None:
        """Clear all cells."""
        self._cells = [None] * GameConfig.NUM_CELLS

    def evaluate(self) -> TerminalResult:
        """Classify the board as WinBy(marker), Tie, or InProgress."""
        return self.win_checker.evaluate(self._cells)

    def get_empty_cells(self) -> List[int]:
        """Indices of all empty cells, in increasing order."""
        return self.validator.get_valid_moves(self._cells)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board.from_cells(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({[cell.value if cell else '' for cell in self._cells]})"

    def __str__(self) -> str:
        size = GameConfig.BOARD_SIZE
        lines = []
        for row in range(size):
            row_cells = []
            for col in range(size):
                index = row * size + col
                cell = self._cells[index]
                # Empty cells show their 1-9 number
                row_cells.append(cell.value if cell else str(index + 1))
            lines.append(" " + " | ".join(row_cells))
        return "\n---+---+---\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self)
        print()
