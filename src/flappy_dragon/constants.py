"""
constants.py: Centralized configuration for the game and the console.
"""

# -------- Console Config --------
SCREEN_WIDTH = 80               # Console width in cells
SCREEN_HEIGHT = 50              # Console height in cells; falling below this ends the run
CELL_SIZE = 12                  # Pixels per cell edge
FPS = 30                        # Render frame-rate cap
WINDOW_TITLE = "Flappy Dragon"

# Time synchronization
FRAME_DURATION = 75.0           # Milliseconds between physics updates

# -------- Player Config --------
PLAYER_START = (5, 20)
PLAYER_SCREEN_X = 5             # Fixed column the dragon is drawn in
ANIMATION_FRAMES = 4            # frame_number cycles 1..ANIMATION_FRAMES

# -------- Physics Config (cells / tick) --------
GRAVITY = 0.2                   # Velocity gained per update tick
TERMINAL_VELOCITY = 2.0         # Gravity stops adding past this
FLAP_VELOCITY = -2.0            # Velocity set by a flap

# -------- Obstacle Config --------
GAP_Y_RANGE = (10, 40)          # Gap centre, half-open range
BASE_GAP_SIZE = 20              # Gap size at score 0
MIN_GAP_SIZE = 2
WALLS_DIFFICULTY = 10           # Fixed score used for obstacles in the walls edition
MAX_WALLS = 2

# -------- Colours (RGB) --------
NAVY = (0, 0, 128)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
WINDOW_BG = NAVY

DRAGON_GLYPH = "@"
DRAGON_FRAME_GLYPHS = ("^", "-", "v", "-")
WALL_GLYPH = "|"
