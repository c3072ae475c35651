"""
constants.py: Centralized configuration for game tuning and rendering.
"""

# -------- Loop Config --------
TICK_INTERVAL = 0.017           # Fixed sleep between iterations (~60 Hz)
RENDER_FPS = 60                 # Main-thread draw rate of the pygame shell

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.8                   # Added to velocity every tick
JUMP_IMPULSE = -15.0            # Velocity after a jump (negative = upward)
GAME_SPEED = 10                 # Horizontal pipe speed

# -------- Bird Geometry (fractions of the viewport) --------
BIRD_X_DIVISOR = 4              # x = width // 4
BIRD_RADIUS_DIVISOR = 15        # radius = width // 15

# -------- Pipe Config --------
PIPE_COUNT = 3
PIPE_WIDTH_DIVISOR = 6          # pipe width = width // 6
PIPE_GAP_DIVISOR = 4            # gap height = height // 4
GAP_TOP_MIN_DIVISOR = 6         # gap top >= height // 6
GAP_TOP_RANGE_DIVISOR = 2       # gap top < height // 6 + height // 2

# -------- Window Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 800
WINDOW_TITLE = "Flappy Bird"

# -------- Colors & Text --------
SKY_COLOR = (0x87, 0xCE, 0xEB)
PIPE_COLOR = (0, 255, 0)
BIRD_COLOR = (255, 255, 0)
EYE_COLOR = (0, 0, 0)
BEAK_COLOR = (255, 165, 0)
TEXT_COLOR = (255, 255, 255)
TEXT_SIZE_DIVISOR = 15          # font size = height / 15
