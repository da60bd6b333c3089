"""
Console TicTacToe against the computer.

This script ties together:
- Board state and win checking
- The Minimax AI with its difficulty levels
- A simple text prompt for the human player

Run this script to play TicTacToe against the computer!
"""

import time
from typing import Callable, Optional

from tictactoe.ai_player import AIPlayer, Difficulty
from tictactoe.board import Marker
from tictactoe.config import GameConfig
from tictactoe.game_state import GameState, Participant
from tictactoe.logging_setup import LOG_LEVELS, setup_logging


def parse_cell_input(text: str) -> Optional[int]:
    """
    Parse a cell typed by the player.

    Accepts a cell number 1-9, or "row,col" with rows and columns 0-2.

    Returns:
        Cell index 0-8, or None if the text is not a cell.
    """
    text = text.strip()
    size = GameConfig.BOARD_SIZE

    if "," in text:
        parts = text.split(",")
        if len(parts) != 2:
            return None
        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            return None
        if not (0 <= row < size and 0 <= col < size):
            return None
        return row * size + col

    try:
        number = int(text)
    except ValueError:
        return None
    if not (1 <= number <= GameConfig.NUM_CELLS):
        return None
    return number - 1


class TicTacToeGame:
    """
    Console controller for a human vs. computer game.

    Game flow:
    1. Human types a cell
    2. Move is applied and checked for a win or tie
    3. After a short pause the computer replies at the chosen difficulty
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        cpu_first: bool = False,
        seed: Optional[int] = None,
        delay_s: float = GameConfig.CPU_MOVE_DELAY_S,
        input_fn: Callable[[str], str] = input
    ):
        """
        Initialize the game.

        Args:
            difficulty: Starting difficulty for the computer.
            cpu_first: If True, the computer plays X and moves first.
            seed: Seed for the computer's random choices.
            delay_s: Pause before the computer's move is shown.
            input_fn: Where player input comes from.
        """
        human_marker = Marker(GameConfig.HUMAN_MARKER)
        cpu_marker = Marker(GameConfig.CPU_MARKER)
        if cpu_first:
            human_marker, cpu_marker = cpu_marker, human_marker

        human = Participant(GameConfig.HUMAN_NAME, human_marker)
        cpu = Participant(GameConfig.CPU_NAME, cpu_marker)

        self.game_state = GameState(
            human=human,
            cpu=cpu,
            first_player=cpu if cpu_first else human,
            difficulty=difficulty
        )
        self.ai = AIPlayer(seed=seed)
        self.delay_s = delay_s
        self.input_fn = input_fn
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print("Enter a cell 1-9 (or row,col). 'r' restarts, 'd <level>' sets difficulty, 'q' quits.")
        print(f"Difficulty: {self.game_state.difficulty.value}\n")

        self.is_running = True
        self._cpu_move()
        self.game_state.board.print_board()
        print(self.game_state.status_message())

        while self.is_running:
            try:
                text = self.input_fn("> ")
            except EOFError:
                break
            self.handle_command(text)

    def handle_command(self, text: str) -> bool:
        """
        Handle one line of player input.

        Args:
            text: What the player typed.

        Returns:
            False if the player quit, True otherwise.
        """
        command = text.strip().lower()

        if command in ("q", "quit"):
            print("\nGame quit by user.")
            self.is_running = False
            return False

        if command in ("r", "restart"):
            self._reset_game()
            return True

        if command.startswith("d ") or command.startswith("difficulty "):
            level = command.split(maxsplit=1)[1]
            try:
                self.game_state.set_difficulty(level)
            except ValueError as e:
                print(e)
                return True
            print(f"Difficulty set to {self.game_state.difficulty.value}")
            return True

        if self.game_state.is_game_over:
            print("Game is over. Type 'r' to play again or 'q' to quit.")
            return True

        index = parse_cell_input(command)
        if index is None:
            print(f"Not a cell: {text.strip()!r}")
            return True

        self._process_human_move(index)
        return True

    def _process_human_move(self, index: int):
        """Apply the human's move, then let the computer reply."""
        if not self.game_state.play_round(index):
            print(f"Cell {index + 1} is not available!")
            return

        self.game_state.board.print_board()

        if not self.game_state.is_game_over:
            self._cpu_move()
            self.game_state.board.print_board()

        print(self.game_state.status_message())
        if self.game_state.is_game_over:
            self._show_game_result()

    def _cpu_move(self):
        """Execute the computer's move."""
        if not self.game_state.is_cpu_turn():
            return

        print("\n>>> CPU is thinking...")
        time.sleep(self.delay_s)

        move = self.game_state.play_cpu_move(self.ai)
        if move is not None:
            print(f">>> CPU plays {self.game_state.cpu.marker.value} on cell {move + 1}")

    def _show_game_result(self):
        """Show the final game result."""
        winner = self.game_state.get_winner()
        if winner is None:
            print("It's a draw! Good game!")
        elif winner == self.game_state.human:
            print("Congratulations! You won!")
        else:
            print("CPU wins! Better luck next time!")
        print("Type 'r' to play again or 'q' to quit.")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state.restart()
        self._cpu_move()
        self.game_state.board.print_board()
        print(self.game_state.status_message())


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        default=GameConfig.DEFAULT_DIFFICULTY,
        choices=[level.value for level in Difficulty],
        help="How strong the computer plays"
    )
    parser.add_argument(
        "--cpu-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.CPU_MOVE_DELAY_S,
        help="Seconds to wait before the computer moves"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: TICTACTOE_LOG_LEVEL or WARNING)"
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    game = TicTacToeGame(
        difficulty=Difficulty.from_name(args.difficulty),
        cpu_first=args.cpu_first,
        seed=args.seed,
        delay_s=args.delay
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
