"""Tests for status messages, sound synthesis, haptics and the console game."""

import io
import wave

import numpy as np
import pytest

import feedback.sound
from feedback.config import FeedbackConfig
from feedback.haptics import Haptics
from feedback.messages import status_message
from feedback.sound import SoundManager
from logic.game_engine import apply_move, new_game
from main import ConsoleGame


def play(*indices):
    state = new_game()
    for index in indices:
        state = apply_move(state, index).state
    return state


class TestMessages:

    def test_turn(self):
        assert status_message(new_game()) == "Player X's turn"
        assert status_message(play(4)) == "Player O's turn"

    def test_win(self):
        assert status_message(play(0, 3, 1, 4, 2)) == "Player X wins! 🎉"

    def test_tie(self):
        assert status_message(play(0, 1, 2, 4, 3, 5, 7, 6, 8)) == "It's a tie! 🤝"


class TestSound:

    @pytest.fixture
    def sounds(self):
        return SoundManager(enabled=False)

    def test_beep_length(self, sounds):
        samples = sounds.create_beep(800, 100)
        assert samples.dtype == np.float32
        assert len(samples) == FeedbackConfig.SAMPLE_RATE // 10

    def test_beep_envelope(self, sounds):
        samples = sounds.create_beep(800, 100)
        # One 800 Hz period is ~55 samples
        assert np.abs(samples[:60]).max() == pytest.approx(0.1, rel=0.05)
        assert np.abs(samples[-60:]).max() == pytest.approx(0.01, rel=0.1)
        assert np.abs(samples).max() <= 0.1 + 1e-6

    def test_wav_encoding(self, sounds):
        with wave.open(io.BytesIO(sounds.sounds["win"]), 'rb') as wav:
            assert wav.getnchannels() == 1
            assert wav.getsampwidth() == 2
            assert wav.getframerate() == FeedbackConfig.SAMPLE_RATE
            assert wav.getnframes() == int(FeedbackConfig.SAMPLE_RATE * 0.3)

    def test_disabled_plays_nothing(self):
        calls = []
        sounds = SoundManager(enabled=False, fallback=lambda: calls.append(1))
        assert sounds.play("move") is False
        assert calls == []

    def test_unknown_sound_ignored(self):
        sounds = SoundManager(enabled=True, fallback=lambda: None)
        assert sounds.play("fanfare") is False

    def test_fallback_off_windows(self, monkeypatch):
        monkeypatch.setattr(feedback.sound.sys, "platform", "linux")
        calls = []
        sounds = SoundManager(enabled=True, fallback=lambda: calls.append(1))
        assert sounds.play("tie") is True
        assert calls == [1]

    def test_no_fallback_off_windows(self, monkeypatch):
        monkeypatch.setattr(feedback.sound.sys, "platform", "linux")
        assert SoundManager(enabled=True).play("move") is False


class TestHaptics:

    def test_pulse_offsets(self):
        assert Haptics.pulse_offsets([100, 50, 100, 50, 200]) == [(0, 100), (150, 100), (300, 200)]
        assert Haptics.pulse_offsets([50]) == [(0, 50)]

    def test_win_pattern_is_scheduled(self):
        pulses = []
        scheduled = []
        haptics = Haptics(
            pulse=lambda: pulses.append(1),
            schedule=lambda delay, callback: scheduled.append(delay),
            enabled=True
        )
        assert haptics.win() == 3
        assert pulses == [1]
        assert scheduled == [150, 300]

    def test_without_scheduler_only_first_pulse(self):
        pulses = []
        haptics = Haptics(pulse=lambda: pulses.append(1), enabled=True)
        assert haptics.win() == 1
        assert haptics.move() == 1
        assert haptics.reset() == 1
        assert len(pulses) == 3

    def test_winning_move_gets_only_win_pattern(self):
        pulses = []
        scheduled = []
        haptics = Haptics(
            pulse=lambda: pulses.append(1),
            schedule=lambda delay, callback: scheduled.append(delay),
            enabled=True
        )
        assert haptics.after_move(play(0, 3, 1, 4, 2)) == 3
        assert pulses == [1]
        assert scheduled == [150, 300]

    def test_ordinary_and_tying_moves_get_move_pulse(self):
        pulses = []
        haptics = Haptics(pulse=lambda: pulses.append(1), enabled=True)
        assert haptics.after_move(play(4)) == 1
        assert haptics.after_move(play(0, 1, 2, 4, 3, 5, 7, 6, 8)) == 1
        assert pulses == [1, 1]

    def test_disabled(self):
        pulses = []
        haptics = Haptics(pulse=lambda: pulses.append(1), enabled=False)
        assert haptics.win() == 0
        assert pulses == []


class TestConsoleGame:

    def run(self, *lines):
        it = iter(lines)
        out = []
        game = ConsoleGame(input_fn=lambda prompt: next(it), output_fn=out.append)
        game.start()
        return game, out

    def test_cells_are_one_based(self):
        game, _ = self.run("1", "q")
        assert game.engine.state.board[0] is not None

    def test_win_is_reported(self):
        game, out = self.run("1", "4", "2", "5", "3", "q")
        assert game.engine.state.winner is not None
        assert "Player X wins! 🎉  (cells 1, 2, 3)" in out
        assert "Press 'r' to play again or 'q' to quit." in out

    def test_rejected_move_prints_reason(self):
        game, out = self.run("5", "5", "q")
        assert "Cell 4 is already occupied by X" in out
        assert len(game.engine.state.moves) == 1

    def test_out_of_range_and_garbage(self):
        game, out = self.run("0", "x", "q")
        assert "Invalid position -1. Must be 0-8." in out
        assert "Please enter a cell number 1-9, 'r' or 'q'." in out
        assert game.engine.state.moves == ()

    @pytest.mark.parametrize("text", ["²", "٣x", "9" * 5000])
    def test_non_numeric_digits_are_rejected(self, text):
        game, out = self.run(text, "q")
        assert "Please enter a cell number 1-9, 'r' or 'q'." in out or \
            "Invalid position" in " ".join(out)
        assert game.engine.state.moves == ()
        assert out[-1] == "Game quit by user."

    def test_superscript_digit_prints_prompt(self):
        game, out = self.run("²", "q")
        assert "Please enter a cell number 1-9, 'r' or 'q'." in out
        assert game.engine.state.moves == ()

    def test_reset(self):
        game, _ = self.run("5", "r", "q")
        assert game.engine.state == new_game()

    def test_eof_ends_game(self):
        def no_input(prompt):
            raise EOFError
        game = ConsoleGame(input_fn=no_input, output_fn=lambda s: None)
        game.start()
        assert game.engine.state == new_game()
