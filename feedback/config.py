"""
Feedback configuration for TicTacToe.
All the settings for sound, haptics, animation and colours.
"""


class FeedbackConfig:
    """
    Configuration class for feedback settings.
    Change these values to taste!
    """

    # ==================== SOUND SETTINGS ====================
    # Off by default, turn on with --sound
    SOUND_ENABLED = False
    SAMPLE_RATE = 44100

    # name -> (frequency Hz, duration ms)
    SOUNDS = {
        "move": (800, 100),
        "win": (1000, 300),
        "tie": (400, 200),
    }

    # Gain ramps exponentially from START to END over the beep
    BEEP_GAIN_START = 0.1
    BEEP_GAIN_END = 0.01

    # ==================== HAPTIC SETTINGS ====================
    # Patterns alternate vibrate/pause, in milliseconds
    HAPTICS_ENABLED = True
    MOVE_PATTERN = [50]
    WIN_PATTERN = [100, 50, 100, 50, 200]
    RESET_PATTERN = [100]

    # ==================== ANIMATION SETTINGS (ms) ====================
    CELL_PRESS_MS = 150
    GAME_OVER_FLASH_MS = 500
    RESET_FADE_MS = 200

    # ==================== COLOURS ====================
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    CELL_PRESSED_COLOR = '#0f0f1a'
    X_COLOR = '#f87171'
    O_COLOR = '#00d4ff'
    WINNER_CELL_COLOR = '#065f46'
    GAME_OVER_FLASH_COLOR = '#ffd700'
    RESET_DIM_COLOR = '#2d3748'

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
