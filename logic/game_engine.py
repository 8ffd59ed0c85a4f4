"""
Game engine for TicTacToe.

Pure state transitions: apply_move() takes a GameState and a cell index
and returns the next state (or the same state plus an error). No I/O.

GameEngine holds the single current state for a UI and is what the UI
calls on every click/keypress.
"""

from dataclasses import dataclass, replace
from typing import Optional
from .game_state import GameState, GameStatus, Move
from .move_validator import MoveError, MoveValidator
from .win_checker import WinChecker


_validator = MoveValidator()
_win_checker = WinChecker()


@dataclass(frozen=True)
class MoveResult:
    """
    Result of applying a move.

    On failure, state is the unchanged input state.
    """
    state: GameState
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def new_game() -> GameState:
    """Fresh game: empty board, X to move."""
    return GameState()


# A reset just starts over
reset = new_game


def apply_move(state: GameState, index: int) -> MoveResult:
    """
    Place the current player's mark at index.

    Args:
        state: Current game state.
        index: Cell index (0-8, row-major).

    Returns:
        MoveResult with the new state, or the input state and a MoveError
        (GAME_OVER, INVALID_INDEX or CELL_OCCUPIED).
    """
    validation = _validator.validate_move(state, index)
    if not validation.is_valid:
        return MoveResult(
            state=state,
            error=validation.error,
            error_message=validation.error_message
        )

    player = state.current_player
    board = list(state.board)
    board[index] = player
    board = tuple(board)

    move = Move(player=player, index=index, move_number=len(state.moves))
    status, winner, line = _win_checker.evaluate(board)

    # Turn only passes while the game goes on
    next_player = player.opposite() if status is GameStatus.IN_PROGRESS else player

    return MoveResult(
        state=replace(
            state,
            board=board,
            current_player=next_player,
            status=status,
            winner=winner,
            winning_line=line,
            moves=state.moves + (move,)
        )
    )


class GameEngine:
    """
    Holds the current game for a UI.

    The UI translates input into a cell index, calls apply_move(), and
    renders whatever state comes back.
    """

    def __init__(self):
        self.state = new_game()

    def apply_move(self, index: int) -> MoveResult:
        """Apply a move to the current game. Rejected moves change nothing."""
        result = apply_move(self.state, index)
        if result.ok:
            self.state = result.state
        return result

    def reset(self) -> GameState:
        """Throw the current game away and start a new one."""
        self.state = reset()
        return self.state


# Quick test
if __name__ == "__main__":
    print("Testing GameEngine...")

    engine = GameEngine()
    for index in (0, 3, 1, 4, 2):
        result = engine.apply_move(index)
        print(f"\n{result.state.moves[-1].player.value} moves to {index}")
        print(result.state.render())

    assert engine.state.winner == engine.state.moves[0].player
    print(f"\nWinner: {engine.state.winner.value}, line {engine.state.winning_line}")

    result = engine.apply_move(8)
    print(f"Move after game over: {result.error_message}")
    assert result.error == MoveError.GAME_OVER

    engine.reset()
    assert engine.state == new_game()

    print("\nGameEngine test done!")
