"""
Tunable constants for the snake game.

Everything here is plain data so the game logic can be imported and
tested without a display. Command-line flags in ``snake_game.main``
override the few values that make sense to change per run.
"""

# ----------------------------- Grid / Window ------------------------------ #
TILE_SIZE = 25
GRID_WIDTH, GRID_HEIGHT = 20, 20              # 20x20 tiles -> 500x500 window
WINDOW_W, WINDOW_H = GRID_WIDTH * TILE_SIZE, GRID_HEIGHT * TILE_SIZE

START_CELL = (GRID_WIDTH // 2, GRID_HEIGHT // 2)

# ------------------------------ Gameplay ---------------------------------- #
BASE_SPEED_MS = 120                           # delay between ticks at score 0
MIN_SPEED_MS = 50                             # fastest the snake ever gets
SPEEDUP_STEP_MS = 2                           # shaved off per speed-up step
SPEEDUP_EVERY = 10                            # points per speed-up step
FOOD_SCORE = 10

# ------------------------------ Animation --------------------------------- #
FPS = 60                                      # render cap
ANIMATION_MS = 150                            # title screen animation clock

MENU_SNAKE_LENGTH = 6
MENU_SNAKE_ROW = GRID_HEIGHT - 2

PULSE_START = 0.0
PULSE_MIN = 0.3
PULSE_MAX = 1.0
PULSE_STEP = 0.05

# ------------------------------- Menus ------------------------------------ #
TITLE = "SNAKE GAME"
MAIN_MENU_OPTIONS = ("Start Game", "View High Score", "Exit")
PAUSE_MENU_OPTIONS = ("Resume", "Restart", "Exit")

HIGHSCORE_FILE = "highscore.txt"

# Colors (R, G, B)
BG          = (0, 0, 0)
SNAKE       = (0, 200, 0)
MENU_SNAKE  = (0, 255, 0)
FOOD        = (255, 0, 0)
TEXT        = (255, 255, 255)
HIGHLIGHT   = (255, 255, 0)
IDLE        = (192, 192, 192)
HINT        = (128, 128, 128)
GAME_OVER   = (255, 0, 0)
OVERLAY     = (0, 0, 0, 180)                  # translucent pause overlay

FONT_NAME = None                              # default pygame font
