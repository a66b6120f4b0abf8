GRID_WIDTH = 30
GRID_HEIGHT = 20
CELL_SIZE = 20

GAME_WIDTH = GRID_WIDTH * CELL_SIZE
GAME_HEIGHT = GRID_HEIGHT * CELL_SIZE
INFO_PANEL_WIDTH = 220
FPS = 60

START_BODY = [(10, 10), (9, 10), (8, 10)]
START_HEADING = "right"
MIN_LENGTH = 3
GROW_AMOUNT = 2
SHRINK_AMOUNT = 2

# Tick intervals are in seconds; 0 means no automatic tick (endless mode)
DIFFICULTY_LEVELS = {
    "easy": 0.200,
    "medium": 0.150,
    "hard": 0.100,
    "extreme": 0.050,
    "endless": 0.0,
}
DEFAULT_DIFFICULTY = "easy"

POINTS_PER_LEVEL = 10
MAX_LEVEL = 10
SPEED_INCREASE_RATE = 0.95
SPEED_BOOST_FACTOR = 0.7

COUNTDOWN_INTERVAL = 1.0
PULSE_INTERVAL = 0.05
PULSE_FRAMES = 30
LEVEL_UP_BANNER_TIME = 1.0
ACHIEVEMENT_TOAST_TIME = 3.0

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 50, 50)
YELLOW = (255, 255, 0)
GOLD = (255, 215, 0)
PURPLE = (128, 0, 128)
GREEN = (0, 255, 0)
DARK_GREY = (50, 50, 50)
ORANGE = (255, 165, 0)

BOARD_COLOR = (20, 107, 58)
GRID_LINE_COLOR = (52, 128, 85)
INFO_PANEL_COLOR = (10, 10, 10)

# Persistence
DATA_DIR_ENV = "GRIDSNAKE_DATA_DIR"
HIGHSCORE_FILE = "highscore.json"
ACHIEVEMENTS_FILE = "achievements.json"
