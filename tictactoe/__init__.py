"""
TicTacToe
=========
Human vs. computer TicTacToe on a 3x3 board.
The computer uses an exhaustive Minimax search, blended with random
moves at four difficulty levels: easy, medium, hard, impossible.
"""

from .config import GameConfig
from .win_checker import WinChecker, TerminalResult, GameStatus, WINNING_LINES
from .board import Board, Marker
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Difficulty, SearchResult
from .game_state import GameState, Participant, Move

__version__ = "1.0.0"
