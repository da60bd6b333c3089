"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from .config import GameConfig

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be an integer in 0-8
    2. Can only place on empty cells
    3. Game must not be over
    4. Board must not be full
    """

    def validate_placement(
        self,
        cells: Sequence[object],
        index: object
    ) -> ValidationResult:
        """
        Validate placing a marker on a board.

        Args:
            cells: The 9 board cells (None for empty).
            index: Cell index to place on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass, but True is not a cell
        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be an integer."
            )

        if not (0 <= index < GameConfig.NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        if cells[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {cells[index].value}"
            )

        return ValidationResult(is_valid=True)

    def validate_move(self, game_state: "GameState", index: object) -> ValidationResult:
        """
        Validate a move in a running game.

        Args:
            game_state: Current game state.
            index: Cell index to place on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.board.is_full():
            return ValidationResult(
                is_valid=False,
                error_message="Board is full!"
            )

        return self.validate_placement(game_state.board.cells(), index)

    def get_valid_moves(self, cells: Sequence[object]) -> List[int]:
        """
        Get all empty cell indices, in increasing order.

        Args:
            cells: The 9 board cells.

        Returns:
            List of valid move indices.
        """
        return [index for index, cell in enumerate(cells) if cell is None]
