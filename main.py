"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default. With --no-ui the game is played in
the terminal: type a cell number (1-9, laid out like a phone keypad
read top-left to bottom-right), 'r' to reset or 'q' to quit.
"""

from typing import Callable, Optional

from logic.game_engine import GameEngine
from logic.game_state import GameState, GameStatus

from feedback.messages import status_message


class ConsoleGame:
    """
    Two players sharing one terminal.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a cell number from the current player
    3. Apply it; rejected moves print why and ask again
    4. Repeat until someone wins or it's a tie, then offer a reset
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        self.engine = GameEngine()
        self.input = input_fn
        self.output = output_fn
        self.is_running = False

    def start(self):
        """Start the game loop."""
        self.output("\n" + "="*60)
        self.output("   TicTacToe")
        self.output("="*60)
        self.output("Enter 1-9 to place a mark, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self._show(self.engine.state)

        while self.is_running:
            try:
                line = self.input("> ")
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str) -> Optional[GameState]:
        """
        Process one line of input.

        Returns:
            The new state if the board changed, None otherwise.
        """
        command = line.strip().lower()

        if command in ("q", "quit"):
            self.output("Game quit by user.")
            self.is_running = False
            return None

        if command in ("r", "reset"):
            self.output("\nResetting game...")
            state = self.engine.reset()
            self._show(state)
            return state

        # isdigit() also passes things like '²' that int() rejects
        try:
            number = int(command)
        except ValueError:
            self.output("Please enter a cell number 1-9, 'r' or 'q'.")
            return None

        # Players count cells from 1
        result = self.engine.apply_move(number - 1)
        if not result.ok:
            self.output(result.error_message)
            return None

        self._show(result.state)
        if result.state.is_game_over:
            self.output("Press 'r' to play again or 'q' to quit.")
        return result.state

    def _show(self, state: GameState):
        """Print board and status."""
        self.output("")
        self.output(state.render())
        self.output("")
        if state.status is GameStatus.WON:
            line = ", ".join(str(i + 1) for i in state.winning_line)
            self.output(f"{status_message(state)}  (cells {line})")
        else:
            self.output(status_message(state))


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--sound",
        action="store_true",
        help="Play sound effects"
    )
    parser.add_argument(
        "--no-haptics",
        action="store_true",
        help="Disable the haptic pulses (bell)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(sound=args.sound, haptics=not args.no_haptics)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame()
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
