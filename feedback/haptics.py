"""
Haptic feedback for TicTacToe.

Desktops can't vibrate, so a pattern is played as one bell per vibrate
segment, scheduled with the same timing a phone would use.
"""

from typing import Callable, List, Optional, Tuple

from logic.game_state import GameState, GameStatus

from .config import FeedbackConfig


class Haptics:
    """
    Plays vibration patterns.

    Args:
        pulse: Called once per vibrate segment (e.g. Tk's bell).
        schedule: schedule(delay_ms, callback), e.g. Tk's after().
                  If None, only the first pulse fires.
    """

    def __init__(
        self,
        pulse: Callable[[], None],
        schedule: Optional[Callable[[int, Callable[[], None]], object]] = None,
        config: Optional[FeedbackConfig] = None,
        enabled: Optional[bool] = None
    ):
        self.pulse = pulse
        self.schedule = schedule
        self.config = config or FeedbackConfig()
        self.enabled = self.config.HAPTICS_ENABLED if enabled is None else enabled

    @staticmethod
    def pulse_offsets(pattern: List[int]) -> List[Tuple[int, int]]:
        """
        Split a vibrate/pause pattern into (start_ms, duration_ms) pulses.

        [100, 50, 100, 50, 200] -> [(0, 100), (150, 100), (300, 200)]
        """
        pulses = []
        t = 0
        for i, length in enumerate(pattern):
            if i % 2 == 0:
                pulses.append((t, length))
            t += length
        return pulses

    def vibrate(self, pattern: List[int]) -> int:
        """
        Play a pattern.

        Returns:
            Number of pulses fired or scheduled.
        """
        if not self.enabled:
            return 0

        count = 0
        for start, _ in self.pulse_offsets(pattern):
            if start == 0:
                self.pulse()
            elif self.schedule is not None:
                self.schedule(start, self.pulse)
            else:
                continue
            count += 1
        return count

    def after_move(self, state: GameState) -> int:
        """
        Pulse for an accepted move. A winning move gets the win pattern
        instead of the plain move pulse, never both.
        """
        if state.status is GameStatus.WON:
            return self.win()
        return self.move()

    def move(self) -> int:
        return self.vibrate(self.config.MOVE_PATTERN)

    def win(self) -> int:
        return self.vibrate(self.config.WIN_PATTERN)

    def reset(self) -> int:
        return self.vibrate(self.config.RESET_PATTERN)
