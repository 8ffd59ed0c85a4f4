"""Status-line text for a game state."""

from logic.game_state import GameState, GameStatus


def turn_message(state: GameState) -> str:
    """Whose turn it is, e.g. "Player X's turn"."""
    return f"Player {state.current_player.value}'s turn"


def status_message(state: GameState) -> str:
    """The line shown under the board."""
    if state.status is GameStatus.WON:
        return f"Player {state.winner.value} wins! 🎉"
    if state.status is GameStatus.TIED:
        return "It's a tie! 🤝"
    return turn_message(state)
