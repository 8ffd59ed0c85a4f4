"""
Game state for TicTacToe.
Tracks the board, current player, game status and move history.

A GameState is an immutable value: every accepted move produces a new
state (see game_engine.apply_move), the old one is never touched.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass, field


# Board is 3x3, stored row-major as 9 cells
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(Enum):
    """Where the game is at. Exactly one holds at any time."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


# None means empty, otherwise the player whose mark is in the cell
Board = Tuple[Optional[Player], ...]
WinLine = Tuple[int, int, int]


def empty_board() -> Board:
    """A board with all 9 cells empty."""
    return (None,) * CELL_COUNT


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8, row-major)
    move_number: int        # Which move this is in the game (0-8)

    def __post_init__(self):
        if not 0 <= self.index < CELL_COUNT:
            raise ValueError(f"Invalid cell index {self.index}. Must be 0-8.")

    @property
    def row(self) -> int:
        return self.index // BOARD_SIZE

    @property
    def col(self) -> int:
        return self.index % BOARD_SIZE


@dataclass(frozen=True)
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which mark is in which cell)
    - Current player
    - Game status (in progress, won, tied), plus winner and winning line
    - Moves made since the last reset
    """

    board: Board = field(default_factory=empty_board)

    # Current player's turn. Once the game is over this stays the player
    # who made the last move.
    current_player: Player = Player.X

    status: GameStatus = GameStatus.IN_PROGRESS

    # Only set when status is WON
    winner: Optional[Player] = None
    winning_line: Optional[WinLine] = None

    moves: Tuple[Move, ...] = ()

    @property
    def is_game_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status is GameStatus.TIED

    def cell(self, row: int, col: int) -> Optional[Player]:
        """Get the mark at (row, col)."""
        return self.board[row * BOARD_SIZE + col]

    def get_empty_cells(self) -> Tuple[int, ...]:
        """
        Get all empty cells on the board.

        Returns:
            Tuple of cell indices, in board order.
        """
        return tuple(i for i, mark in enumerate(self.board) if mark is None)

    def is_full(self) -> bool:
        return all(mark is not None for mark in self.board)

    def render(self) -> str:
        """Render the board as text, empty cells shown by their number (1-9)."""
        lines = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                mark = self.board[index]
                cells.append(mark.value if mark else str(index + 1))
            lines.append(" " + " │ ".join(cells))
            if row < BOARD_SIZE - 1:
                lines.append("───┼───┼───")
        return "\n".join(lines)


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()
    print(game.render())
    print(f"\nCurrent turn: {game.current_player.value}")
    print(f"Empty cells: {game.get_empty_cells()}")

    assert game.get_empty_cells() == tuple(range(CELL_COUNT))
    assert not game.is_game_over

    move = Move(player=Player.X, index=5, move_number=0)
    print(f"Move at index 5 -> ({move.row}, {move.col})")
    assert (move.row, move.col) == (1, 2)

    print("\nGame state test done!")
