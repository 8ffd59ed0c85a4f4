"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, CELL_COUNT


class MoveError(Enum):
    """Why a move was rejected."""
    GAME_OVER = "game_over"
    INVALID_INDEX = "invalid_index"
    CELL_OCCUPIED = "cell_occupied"


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the current player's mark in (0-8).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        # bool is an int subclass, but True/False are not cells
        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_INDEX,
                error_message=f"Invalid position {index!r}. Must be 0-8."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of empty cell indices, or [] once the game is over.
        """
        if game_state.is_game_over:
            return []
        return list(game_state.get_empty_cells())


# Quick test
if __name__ == "__main__":
    from .game_engine import apply_move

    print("Testing MoveValidator...")

    game = GameState()
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(game, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    game = apply_move(game, 4).state

    # Test invalid move (same cell)
    result = validator.validate_move(game, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")
    assert result.error == MoveError.CELL_OCCUPIED

    # Test out of range
    result = validator.validate_move(game, 12)
    print(f"Move 12: valid={result.is_valid}, error={result.error_message}")
    assert result.error == MoveError.INVALID_INDEX

    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
