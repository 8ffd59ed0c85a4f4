"""
Sound effects for TicTacToe.

Beeps are synthesized with numpy (a sine wave with an exponentially
decaying gain) and played on a background thread so the UI never waits
on audio. On Windows they go through winsound; elsewhere we fall back to
whatever `fallback` does (the UI passes the Tk window bell).
"""

import io
import sys
import threading
import wave
from typing import Callable, Dict, Optional

import numpy as np

from .config import FeedbackConfig


class SoundManager:
    """
    Plays the move/win/tie sounds.

    Usage:
        sounds = SoundManager(enabled=True)
        sounds.play("move")
    """

    def __init__(
        self,
        config: Optional[FeedbackConfig] = None,
        enabled: Optional[bool] = None,
        fallback: Optional[Callable[[], None]] = None
    ):
        """
        Initialize the sound manager.

        Args:
            config: Feedback settings (uses defaults if None).
            enabled: Overrides config.SOUND_ENABLED when given.
            fallback: Called instead of audio playback where winsound
                      isn't available.
        """
        self.config = config or FeedbackConfig()
        self.enabled = self.config.SOUND_ENABLED if enabled is None else enabled
        self.fallback = fallback

        # Pre-render every sound once
        self.sounds: Dict[str, bytes] = {
            name: self._to_wav(self.create_beep(freq, duration))
            for name, (freq, duration) in self.config.SOUNDS.items()
        }

    def create_beep(self, frequency: float, duration_ms: float) -> np.ndarray:
        """
        Synthesize a beep.

        Args:
            frequency: Tone frequency in Hz.
            duration_ms: Length in milliseconds.

        Returns:
            float32 samples in [-1, 1] at config.SAMPLE_RATE.
        """
        rate = self.config.SAMPLE_RATE
        n_samples = int(rate * duration_ms / 1000)
        t = np.arange(n_samples) / rate

        start = self.config.BEEP_GAIN_START
        end = self.config.BEEP_GAIN_END
        duration_s = duration_ms / 1000
        gain = start * (end / start) ** (t / duration_s)

        return (gain * np.sin(2 * np.pi * frequency * t)).astype(np.float32)

    def _to_wav(self, samples: np.ndarray) -> bytes:
        """Encode samples as a mono 16-bit WAV file in memory."""
        pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype('<i2')
        buffer = io.BytesIO()
        with wave.open(buffer, 'wb') as wav:
            wav.setnchannels(1)
            wav.setsampwidth(2)
            wav.setframerate(self.config.SAMPLE_RATE)
            wav.writeframes(pcm.tobytes())
        return buffer.getvalue()

    def play(self, sound_name: str) -> bool:
        """
        Play a sound by name.

        Returns:
            True if playback was started. Unknown names and disabled
            sound do nothing.
        """
        if not self.enabled or sound_name not in self.sounds:
            return False

        if sys.platform == "win32":
            threading.Thread(
                target=self._play_wav,
                args=(self.sounds[sound_name],),
                daemon=True
            ).start()
            return True

        if self.fallback is not None:
            self.fallback()
            return True

        return False

    def _play_wav(self, data: bytes):
        """Blocking playback (runs in background thread)."""
        import winsound
        try:
            winsound.PlaySound(data, winsound.SND_MEMORY)
        except RuntimeError as e:
            print(f"Sound error: {e}")
