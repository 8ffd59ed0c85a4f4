"""
Logic module for TicTacToe.
Handles game state, rules, and win/tie detection.
"""

from .game_state import GameState, GameStatus, Move, Player
from .move_validator import MoveError, MoveValidator, ValidationResult
from .win_checker import WinChecker
from .game_engine import GameEngine, MoveResult, apply_move, new_game, reset
