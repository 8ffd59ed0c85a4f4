"""
Feedback module for TicTacToe.
Handles status text, sound effects and haptic pulses.
"""

from .config import FeedbackConfig
from .messages import status_message, turn_message
from .sound import SoundManager
from .haptics import Haptics
