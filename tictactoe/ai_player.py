"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move, and blends in
random moves to play at lower difficulty levels.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Union

import numpy as np

from .board import Board, Marker
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

Cells = Tuple[Optional[Marker], ...]


class Difficulty(Enum):
    """How often the computer plays the optimal move."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    IMPOSSIBLE = "impossible"

    @property
    def threshold(self) -> float:
        """Probability of choosing the optimal move over a random one."""
        return GameConfig.DIFFICULTY_THRESHOLDS[self.value]

    @classmethod
    def from_name(cls, name: Union[str, "Difficulty"]) -> "Difficulty":
        """
        Parse a difficulty name (case-insensitive).

        Raises:
            ValueError: if the name is not a known level.
        """
        if isinstance(name, Difficulty):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown difficulty {name!r}. Choose from: {choices}") from None


@dataclass
class SearchResult:
    index: Optional[int]
    score: int
    nodes: int


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive and has no depth discount: every win scores
    +10, every loss -10, every tie 0. Among equally scored moves the lowest
    cell index wins, so the AI does not prefer a faster win or a slower loss.

    The player holds no game state between calls. Its only state is the
    random generator used by `weighted_move`.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the AI player.

        Args:
            rng: Random generator for weighted moves (anything with
                `integers(n)` and `random()`).
            seed: Seed for a new numpy generator when rng is not given.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.win_checker = WinChecker()
        self.validator = MoveValidator()

    def _snapshot(self, board: Union[Board, Iterable[object]]) -> Cells:
        """Private immutable copy of the board's cells."""
        if isinstance(board, Board):
            return board.cells()
        return Board.from_cells(board).cells()

    def search(self, board: Union[Board, Iterable[object]], marker: Marker) -> SearchResult:
        """
        Run a full minimax search for `marker`.

        Args:
            board: Current board (never modified).
            marker: The marker the AI plays, and whose turn it is.

        Returns:
            SearchResult with the best index (None on a finished board),
            its score, and the number of positions evaluated.
        """
        cells = self._snapshot(board)

        # Positions seen during this search only; results are identical
        # to a plain search, the cache just skips repeated subtrees
        cache: Dict[Tuple[Cells, Marker], Tuple[Optional[int], int]] = {}
        index, score = self._minimax(cells, marker, marker, cache)

        logger.debug(
            "AI evaluated %d positions. Best move for %s: %s (score: %d)",
            len(cache), marker.value, index, score
        )
        return SearchResult(index=index, score=score, nodes=len(cache))

    def _minimax(
        self,
        cells: Cells,
        mover: Marker,
        me: Marker,
        cache: Dict[Tuple[Cells, Marker], Tuple[Optional[int], int]]
    ) -> Tuple[Optional[int], int]:
        """
        Minimax algorithm without pruning.

        Args:
            cells: Hypothetical board.
            mover: Marker to play next on this board.
            me: The marker we are searching for (maximizing side).
            cache: Per-search table of already scored positions.

        Returns:
            (best index, score) for this position; index is None at a
            terminal position.
        """
        key = (cells, mover)
        if key in cache:
            return cache[key]

        result = self.win_checker.evaluate(cells)

        if result.is_over:
            if result.winner == me:
                outcome = (None, GameConfig.WIN_SCORE)
            elif result.winner is not None:
                outcome = (None, GameConfig.LOSS_SCORE)
            else:
                outcome = (None, GameConfig.TIE_SCORE)
            cache[key] = outcome
            return outcome

        maximizing = mover == me
        best_index: Optional[int] = None
        best_score: Optional[int] = None

        for index, cell in enumerate(cells):
            if cell is not None:
                continue

            child = cells[:index] + (mover,) + cells[index + 1:]
            _, score = self._minimax(child, mover.opposite(), me, cache)

            # Strict comparison: the first move found keeps ties
            if best_score is None or (score > best_score if maximizing else score < best_score):
                best_index, best_score = index, score

        outcome = (best_index, best_score)
        cache[key] = outcome
        return outcome

    def best_move(self, board: Union[Board, Iterable[object]], marker: Marker) -> Optional[int]:
        """
        Get the optimal move for `marker`.

        Args:
            board: Current board (never modified).
            marker: The marker to move.

        Returns:
            Cell index 0-8, or None if the game is already over.
        """
        cells = self._snapshot(board)

        result = self.win_checker.evaluate(cells)
        if result.is_over:
            logger.warning("No move for %s: game is already over (%s)", marker.value, result)
            return None

        return self.search(cells, marker).index

    def weighted_move(
        self,
        board: Union[Board, Iterable[object]],
        marker: Marker,
        difficulty: Union[str, Difficulty],
        rng: Optional[np.random.Generator] = None
    ) -> Optional[int]:
        """
        Pick a move for the given difficulty.

        One random legal move and the optimal move are both computed, then a
        uniform draw in [0, 1) decides: random if the draw is at or above the
        difficulty threshold, optimal otherwise. IMPOSSIBLE always plays the
        optimal move.

        Args:
            board: Current board (never modified).
            marker: The marker to move.
            difficulty: Difficulty level or its name.
            rng: Random generator for this call (default: the player's own).

        Returns:
            Cell index 0-8, or None if there is no legal move.
        """
        difficulty = Difficulty.from_name(difficulty)
        if rng is None:
            rng = self.rng

        cells = self._snapshot(board)
        available = self.validator.get_valid_moves(cells)

        if not available or self.win_checker.evaluate(cells).is_over:
            logger.warning("No legal move for %s on a finished board", marker.value)
            return None

        random_index = available[int(rng.integers(len(available)))]
        optimal_index = self.best_move(cells, marker)
        selector = float(rng.random())

        if selector >= difficulty.threshold:
            move = random_index
        else:
            move = optimal_index

        logger.debug(
            "%s move for %s: selector=%.3f threshold=%.2f random=%d optimal=%d -> %d",
            difficulty.value, marker.value, selector, difficulty.threshold,
            random_index, optimal_index, move
        )
        return move

    def get_move_suggestion(self, board: Union[Board, Iterable[object]], marker: Marker) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.
            marker: The marker to move.

        Returns:
            A string describing the suggested move.
        """
        move = self.best_move(board, marker)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, GameConfig.BOARD_SIZE)
        return f"Place {marker.value} on cell {move + 1} (row {row}, col {col})"


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(seed=0)

    # Test 1: AI should take a winning move
    board = Board.from_cells(["X", "X", "", "O", "O", "", "", "", ""])
    board.print_board()
    move = ai.best_move(board, Marker.X)
    print(f"AI is X and can win with 2. AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"

    # Test 2: AI should block a winning move
    board = Board.from_cells(["O", "O", "", "X", "", "", "", "", ""])
    board.print_board()
    move = ai.best_move(board, Marker.X)
    print(f"AI is X and O is about to win with 2. AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"

    print("\nAIPlayer test done!")
