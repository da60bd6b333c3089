"""
Win checker for TicTacToe.
Classifies any 9-cell board as in progress, won, or tied.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .board import Marker


# All possible winning lines (as index triples, row-major)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class GameStatus(Enum):
    """Terminal classification of a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True)
class TerminalResult:
    """
    Result of evaluating a board.

    `winner` is only set when `status` is WIN.
    """
    status: GameStatus
    winner: Optional["Marker"] = None

    @classmethod
    def in_progress(cls) -> "TerminalResult":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def tie(cls) -> "TerminalResult":
        return cls(GameStatus.TIE)

    @classmethod
    def win_by(cls, marker: "Marker") -> "TerminalResult":
        return cls(GameStatus.WIN, marker)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is GameStatus.WIN:
            return f"WinBy({self.winner.value})"
        if self.status is GameStatus.TIE:
            return "Tie"
        return "InProgress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Works on any sequence of 9 cells (None for empty), so the same rules
    apply to the live board and to the engine's hypothetical copies.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, cells: Sequence[Optional["Marker"]]) -> Optional["Marker"]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 board cells.

        Returns:
            The winning Marker, or None if no winner yet.
        """
        line = self.get_winning_line(cells)
        if line is None:
            return None
        return cells[line[0]]

    def get_winning_line(
        self,
        cells: Sequence[Optional["Marker"]]
    ) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            cells: The 9 board cells.

        Returns:
            The winning line as an index triple, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if cells[a] is not None and cells[a] == cells[b] == cells[c]:
                return line
        return None

    def check_draw(self, cells: Sequence[Optional["Marker"]]) -> bool:
        """
        Check if the board is a draw: every cell filled and no winner.

        A full board with a completed line is a win, not a draw.
        """
        if self.check_winner(cells) is not None:
            return False
        return all(cell is not None for cell in cells)

    def evaluate(self, cells: Sequence[Optional["Marker"]]) -> TerminalResult:
        """Classify the board as WinBy(marker), Tie, or InProgress."""
        winner = self.check_winner(cells)
        if winner is not None:
            return TerminalResult.win_by(winner)
        if all(cell is not None for cell in cells):
            return TerminalResult.tie()
        return TerminalResult.in_progress()
