"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the difficulty, and the result.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Union

from .ai_player import Difficulty
from .board import Board, Marker
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import GameStatus

if TYPE_CHECKING:
    import numpy as np

    from .ai_player import AIPlayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Participant:
    """A player taking part in the game."""
    name: str
    marker: Marker


def _default_human() -> Participant:
    return Participant(GameConfig.HUMAN_NAME, Marker(GameConfig.HUMAN_MARKER))


def _default_cpu() -> Participant:
    return Participant(GameConfig.CPU_NAME, Marker(GameConfig.CPU_MARKER))


@dataclass
class Move:
    """
    A move in the game.
    """
    player: str             # Name of who made the move
    marker: Marker          # Marker that was placed
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of a human vs. computer game.

    Tracks:
    - The board
    - Current player
    - Difficulty of the computer opponent
    - Move history for the current game
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=Board)
    human: Participant = field(default_factory=_default_human)
    cpu: Participant = field(default_factory=_default_cpu)

    # Who moves first after a restart (default: the human)
    first_player: Optional[Participant] = None

    # Set to first_player in __post_init__ when not given
    current_player: Optional[Participant] = None

    difficulty: Difficulty = field(
        default_factory=lambda: Difficulty.from_name(GameConfig.DEFAULT_DIFFICULTY)
    )

    # Move history (current game only)
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Participant] = None
    is_draw: bool = False
    is_game_over: bool = False

    def __post_init__(self):
        if self.human.marker == self.cpu.marker:
            raise ValueError("Human and CPU must use different markers")
        if self.first_player is None:
            self.first_player = self.human
        if self.current_player is None:
            self.current_player = self.first_player
        self.validator = MoveValidator()

    @property
    def current_marker(self) -> Marker:
        return self.current_player.marker

    def is_cpu_turn(self) -> bool:
        return not self.is_game_over and self.current_player == self.cpu

    def switch_player(self):
        """Hand the turn to the other participant."""
        self.current_player = self.cpu if self.current_player == self.human else self.human

    def set_difficulty(self, level: Union[str, Difficulty]):
        """
        Set the difficulty level for the CPU.

        Raises:
            ValueError: if the level name is unknown.
        """
        self.difficulty = Difficulty.from_name(level)

    def play_round(self, index: int) -> bool:
        """
        Place the current player's marker and check for a win or tie.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was made, False if it was rejected
            (game over, bad index, or occupied cell).
        """
        result = self.validator.validate_move(self, index)
        if not result.is_valid:
            logger.debug("%s's move rejected: %s", self.current_player.name, result.error_message)
            return False

        if not self.board.place(index, self.current_marker):
            return False

        self.moves.append(Move(
            player=self.current_player.name,
            marker=self.current_marker,
            index=index,
            move_number=len(self.moves)
        ))

        outcome = self.board.evaluate()
        if outcome.status is GameStatus.WIN:
            self.winner = self.current_player
            self.is_game_over = True
            logger.info("%s wins with %s", self.winner.name, self.winner.marker.value)
            return True

        if outcome.status is GameStatus.TIE:
            self.is_draw = True
            self.is_game_over = True
            logger.info("Game ends in a tie")
            return True

        self.switch_player()
        return True

    def play_cpu_move(
        self,
        ai: "AIPlayer",
        rng: Optional["np.random.Generator"] = None
    ) -> Optional[int]:
        """
        Let the computer move, weighted by the current difficulty.

        Does nothing if the game is over or it is not the CPU's turn.

        Args:
            ai: The move engine.
            rng: Random generator for this move (default: the engine's).

        Returns:
            The index played, or None if no move was made.
        """
        if not self.is_cpu_turn():
            return None

        move = ai.weighted_move(self.board, self.cpu.marker, self.difficulty, rng=rng)
        if move is None or not self.play_round(move):
            return None
        return move

    def get_winner(self) -> Optional[Participant]:
        return self.winner

    def is_tie(self) -> bool:
        return self.is_draw

    def status_message(self) -> str:
        """Message describing the game for the player."""
        if self.winner is not None:
            return f"{self.winner.name} won!"
        if self.is_draw:
            return "It's a tie!"
        return f"{self.current_player.name}'s turn."

    def restart(self):
        """Reset the game for a new round. Difficulty is kept."""
        self.board.reset()
        self.current_player = self.first_player
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False
