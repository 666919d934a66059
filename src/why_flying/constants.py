"""
constants.py: Centralized configuration for game and display settings.
"""

# -------- Display Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 640
RENDER_FPS = 60                 # One simulation tick per rendered frame

# -------- Player Config (pixels / tick) --------
BIRD_X = 50                     # Fixed bird X position
BIRD_START_Y = 150
BIRD_SIZE = 40                  # Sprite width and height
BIRD_RADIUS = 15                # Placeholder circle when the sprite is missing
GRAVITY = 0.15                  # Added to velocity every tick
JUMP_IMPULSE = 3.5              # Velocity becomes -JUMP_IMPULSE on a flap
HITBOX_MARGIN = 5               # Forgiveness inset on every side

# Squash and stretch
FLAP_SCALE_X = 1.3
FLAP_SCALE_Y = 0.7
SCALE_RECOVERY = 0.1            # Fraction of the distance back to 1.0 per tick

# -------- Pipe Config --------
PIPE_WIDTH = 53
PIPE_GAP = 150
PIPE_MIN_SEGMENT = 80           # Shortest allowed top/bottom segment
PIPE_BASE_SPEED = 2.0           # Pixels per tick at difficulty 1.0
PIPE_BASE_INTERVAL = 110        # Ticks between spawns at difficulty 1.0

# -------- Difficulty Config --------
DIFFICULTY_PER_POINT = 0.02
DIFFICULTY_CAP = 2.5
POINTS_PER_LEVEL = 10

# -------- Persistence --------
DB_FILE = "why_am_i_flying.db"
HIGH_SCORE_KEY = "why_am_i_flying_highscore"
