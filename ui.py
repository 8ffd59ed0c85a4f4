"""
TicTacToe UI
A graphical interface for two-player TicTacToe using Tkinter.

Shows:
- The 3x3 board (click, or focus a cell and press Enter/Space)
- Game status and winner banner
- Reset button (or press R anywhere)

All game rules live in logic.GameEngine. This class only turns input
into cell indices and renders whatever state comes back.
"""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from logic.game_engine import GameEngine, MoveResult
from logic.game_state import BOARD_SIZE, GameState, GameStatus, Player

from feedback.config import FeedbackConfig
from feedback.haptics import Haptics
from feedback.messages import status_message
from feedback.sound import SoundManager


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        config: Optional[FeedbackConfig] = None,
        sound: Optional[bool] = None,
        haptics: Optional[bool] = None
    ):
        """
        Initialize the UI.

        Args:
            config: Feedback settings (uses defaults if None).
            sound: Override config.SOUND_ENABLED.
            haptics: Override config.HAPTICS_ENABLED.
        """
        self.config = config or FeedbackConfig()
        self.engine = GameEngine()

        self.board_cells: List[tk.Label] = []

        # Create UI
        self._create_ui()

        self.sounds = SoundManager(self.config, enabled=sound, fallback=self.root.bell)
        self.haptics = Haptics(
            pulse=self.root.bell,
            schedule=self.root.after,
            config=self.config,
            enabled=haptics
        )

        self._render(self.engine.state)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=self.config.BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.BG_COLOR)
        style.configure('TLabel', background=self.config.BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 18, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 13), foreground='#ffd700')
        style.configure('Winner.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00ff88')

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Board
        self.board_frame = tk.Frame(main_frame, bg=self.config.BG_COLOR, padx=4, pady=4)
        self.board_frame.pack(pady=10)

        for index in range(BOARD_SIZE * BOARD_SIZE):
            cell = tk.Label(
                self.board_frame,
                text="",
                font=('Segoe UI', 28, 'bold'),
                width=3,
                height=1,
                bg=self.config.CELL_COLOR,
                fg='white',
                relief='raised',
                borderwidth=2,
                takefocus=1,
                highlightthickness=2,
                highlightcolor='#00d4ff'
            )
            cell.grid(row=index // BOARD_SIZE, column=index % BOARD_SIZE, padx=3, pady=3, ipadx=8, ipady=8)

            cell.bind("<Button-1>", lambda e, i=index: self._handle_cell(i))
            cell.bind("<Return>", lambda e, i=index: self._handle_cell(i))
            cell.bind("<space>", lambda e, i=index: self._handle_cell(i))
            self.board_cells.append(cell)

        # Status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Winner banner, only packed while someone has won
        self.winner_frame = ttk.Frame(main_frame)
        self.winner_label = ttk.Label(self.winner_frame, text="", style='Winner.TLabel')
        self.winner_label.pack()

        self.reset_btn = tk.Button(
            main_frame,
            text="🔄 Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        )
        self.reset_btn.pack(side=tk.BOTTOM, pady=10)

        # R resets from anywhere
        self.root.bind("<KeyPress-r>", lambda e: self._reset_game())
        self.root.bind("<KeyPress-R>", lambda e: self._reset_game())

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _handle_cell(self, index: int):
        """Handle a click/keypress on a cell."""
        result: MoveResult = self.engine.apply_move(index)

        # Rejected moves are ignored, same as clicking nothing
        if not result.ok:
            if self.config.DEBUG_MODE:
                print(f"Ignored move at {index}: {result.error_message}")
            return

        state = result.state
        if self.config.DEBUG_MODE:
            move = state.moves[-1]
            print(f"{move.player.value} placed at ({move.row}, {move.col})")

        self.haptics.after_move(state)
        self._animate_press(index)
        self._render(state)

        if state.status is GameStatus.WON:
            self.sounds.play("win")
            self._animate_game_over()
        elif state.status is GameStatus.TIED:
            self.sounds.play("tie")
            self._animate_game_over()
        else:
            self.sounds.play("move")

    def _render(self, state: GameState):
        """Draw the whole state: cells, status, winner banner."""
        for index, cell in enumerate(self.board_cells):
            mark = state.board[index]
            if mark is None:
                cell.configure(text="", fg='white', bg=self.config.CELL_COLOR)
            else:
                color = self.config.X_COLOR if mark is Player.X else self.config.O_COLOR
                cell.configure(text=mark.value, fg=color, bg=self.config.CELL_COLOR)

            # No more input once the game is over
            cell.configure(
                cursor='' if state.is_game_over or mark is not None else 'hand2',
                relief='sunken' if state.is_game_over else 'raised'
            )

        if state.winning_line:
            for index in state.winning_line:
                self.board_cells[index].configure(bg=self.config.WINNER_CELL_COLOR)

        self.status_label.configure(text=status_message(state))

        if state.status is GameStatus.WON:
            self.winner_label.configure(text=f"🏆 {state.winner.value} wins!")
            self.winner_frame.pack(pady=5, before=self.reset_btn)
        else:
            self.winner_frame.pack_forget()

    def _animate_press(self, index: int):
        """Briefly show the cell as pressed."""
        cell = self.board_cells[index]
        cell.configure(relief='sunken', bg=self.config.CELL_PRESSED_COLOR)

        def release():
            state = self.engine.state
            # Only undo the press if nothing re-rendered the cell since
            if state.winning_line and index in state.winning_line:
                return
            cell.configure(
                relief='sunken' if state.is_game_over else 'raised',
                bg=self.config.CELL_COLOR
            )

        self.root.after(self.config.CELL_PRESS_MS, release)

    def _animate_game_over(self):
        """Flash the board border."""
        self.board_frame.configure(bg=self.config.GAME_OVER_FLASH_COLOR)
        self.root.after(
            self.config.GAME_OVER_FLASH_MS,
            lambda: self.board_frame.configure(bg=self.config.BG_COLOR)
        )

    def _reset_game(self):
        """Reset the game."""
        if self.config.DEBUG_MODE:
            print("Resetting game...")

        state = self.engine.reset()
        self._render(state)
        self.haptics.reset()

        # Dim the board for a moment
        self.board_frame.configure(bg=self.config.RESET_DIM_COLOR)
        self.root.after(
            self.config.RESET_FADE_MS,
            lambda: self.board_frame.configure(bg=self.config.BG_COLOR)
        )

        if self.board_cells:
            self.board_cells[0].focus_set()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--sound",
        action="store_true",
        help="Play sound effects"
    )

    args = parser.parse_args()

    ui = TicTacToeUI(sound=args.sound)
    ui.run()


if __name__ == "__main__":
    main()
