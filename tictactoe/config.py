"""
Game configuration for TicTacToe.
Scores, difficulty thresholds, and player settings.
"""

import os


class GameConfig:
    """
    Configuration class for game and engine settings.
    Change these values to tune the computer opponent!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # ==================== PLAYERS ====================
    HUMAN_NAME = "Player"
    CPU_NAME = "CPU"

    # Markers as plain strings ("X" always moves first)
    HUMAN_MARKER = "X"
    CPU_MARKER = "O"

    # ==================== MINIMAX SCORES ====================
    # No depth discount: a slow win scores the same as a fast one
    WIN_SCORE = 10
    LOSS_SCORE = -10
    TIE_SCORE = 0

    # ==================== DIFFICULTY ====================
    # Probability of playing the optimal move instead of a random one
    DIFFICULTY_THRESHOLDS = {
        "easy": 0.25,
        "medium": 0.5,
        "hard": 0.75,
        "impossible": 1.0,
    }
    DEFAULT_DIFFICULTY = "easy"

    # ==================== CONSOLE ====================
    # Pause before the computer's move is shown (seconds)
    CPU_MOVE_DELAY_S = 0.3

    # ==================== LOGGING ====================
    LOG_LEVEL = (os.getenv("TICTACTOE_LOG_LEVEL", "WARNING") or "WARNING").upper()
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
