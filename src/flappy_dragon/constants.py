"""
constants.py: Centralized configuration for the game world, physics and display.
"""

# -------- Window Config --------
WINDOW_TITLE = "Flappy Dragon"
SCREEN_WIDTH = 80               # Character cells
SCREEN_HEIGHT = 50
CELL_WIDTH_PX = 10              # Pixel size of one character cell
CELL_HEIGHT_PX = 14
DEFAULT_FPS = 60                # Render rate, independent of the physics cadence

# -------- Time Config --------
FRAME_DURATION = 75.0           # Milliseconds between physics ticks

# -------- Physics Config (cells / tick) --------
# +ve velocity points down the screen (towards larger row numbers)
TERMINAL_VELOCITY = 2.0
GRAVITY = 0.2
FLAP_STRENGTH = 1.0

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25
PLAYER_GLYPH = "@"

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Inclusive
GAP_Y_MAX = 40                  # Exclusive
MAX_GAP_SIZE = 20               # Gap height at score 0
MIN_GAP_SIZE = 2
WALL_GLYPH = "|"

# -------- Palette (RGB) --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)
