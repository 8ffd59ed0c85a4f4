"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from typing import Optional, Tuple
from .game_state import Board, GameStatus, Player, WinLine


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as row-major cell indices.
    # Checked in this order; the first complete line wins.
    WINNING_LINES: Tuple[WinLine, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The 9 board cells.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[WinLine]:
        """
        Get the winning line if there is one.

        Args:
            board: The 9 board cells.

        Returns:
            The first complete line, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def _check_line(self, board: Board, line: WinLine) -> Optional[Player]:
        """Return the player owning all 3 cells of the line, or None."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a tie.

        A tie occurs when all cells are filled AND there's no winner.
        """
        if any(mark is None for mark in board):
            return False
        return self.get_winning_line(board) is None

    def evaluate(
        self,
        board: Board
    ) -> Tuple[GameStatus, Optional[Player], Optional[WinLine]]:
        """
        Classify a board.

        Returns:
            (status, winner, winning_line). winner and winning_line are
            None unless status is WON.
        """
        line = self.get_winning_line(board)
        if line is not None:
            return GameStatus.WON, board[line[0]], line
        if self.check_draw(board):
            return GameStatus.TIED, None, None
        return GameStatus.IN_PROGRESS, None, None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    X, O = Player.X, Player.O

    # Test 1: Horizontal win
    board1 = (X, X, X,
              None, O, None,
              O, None, None)
    winner = checker.check_winner(board1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == X

    # Test 2: Vertical win
    board2 = (O, X, None,
              O, X, None,
              O, None, X)
    print(f"Test 2 (vertical): line = {checker.get_winning_line(board2)}")
    assert checker.get_winning_line(board2) == (0, 3, 6)

    # Test 3: Tie (full board, no winner)
    board3 = (X, O, X,
              X, O, O,
              O, X, X)
    print(f"Test 3 (tie): {checker.evaluate(board3)}")
    assert checker.evaluate(board3) == (GameStatus.TIED, None, None)

    print("\nWinChecker test done!")
