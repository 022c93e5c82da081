import os

# --- GLOBAL CONFIGURATION ---
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
FPS = 60
# Time scaling for development/testing. Set SHAPOU_TIME_SCALE env var to accelerate time.
TIME_SCALE_FACTOR = float(os.getenv("SHAPOU_TIME_SCALE", "1.0"))
LOG_LEVEL = os.getenv("SHAPOU_LOG_LEVEL", "INFO")
ASSET_DIR = os.getenv("SHAPOU_ASSET_DIR", os.path.join(os.path.dirname(__file__), "assets"))
MUSIC_TRACK = "music-game"
MUSIC_VOLUME = float(os.getenv("SHAPOU_VOLUME", "0.5"))

# --- TICKING (seconds) ---
AMBIENT_TICK_SECONDS = 1.0
MINIGAME_TICK_SECONDS = 0.016
MAX_CATCHUP_TICKS = 120  # per timer, per advance()

# --- STATS (0.0 - 1.0) ---
STAT_NAMES = ("emotion", "hunger", "cleanliness")
STAT_START = 1.0
DECAY_PER_SECOND = 0.01  # 1.0 -> 0.0 in 100 seconds
SAD_THRESHOLD = 0.5
OUTSIDE_EMOTION_BONUS = 0.2

# Room action gates
NOT_HUNGRY_THRESHOLD = 0.5
ALREADY_CLEAN_THRESHOLD = 0.5
DIALOG_TIMEOUT_SECONDS = float(os.getenv("SHAPOU_DIALOG_TIMEOUT", "3.0"))

# --- FEEDING MINIGAME (normalized coordinates) ---
PADDLE_START = 0.5
PADDLE_MIN = 0.1
PADDLE_MAX = 0.9
PADDLE_SPEED = 0.02
PLAYER_Y = 0.92
COLLISION_RADIUS = 0.08
FOOD_FALL_STEP = 0.005
FOOD_SPEED_MULTIPLIER = float(os.getenv("SHAPOU_FOOD_SPEED", "1.0"))
FOOD_SPAWN_CHANCE = 1 / 60
FOOD_GOOD_CHANCE = 0.7
FOOD_SPAWN_MIN_X = 0.1
FOOD_SPAWN_MAX_X = 0.9
FOOD_HUNGER_GAIN = 0.1
HAZARD_EMOTION_LOSS = 0.1
HAZARD_KIND = "bomb"
GOOD_FOODS = [
    # fruit
    "apple", "banana", "grapes", "orange", "strawberry", "peach", "kiwi", "watermelon",
    # vegetables
    "carrot", "cucumber", "broccoli", "corn", "tomato", "potato", "lettuce", "pepper",
    # sweets
    "cake", "cookie", "donut", "lollipop", "candy", "cupcake", "chocolate", "honey",
]

# --- WASHING MINIGAME ---
CHARACTER_POS = (0.5, 0.5)
MAX_BUBBLES = 10
BUBBLE_SPAWN_CHANCE = 0.3
BUBBLE_MIN_DISTANCE = 0.1
BUBBLE_MAX_DISTANCE = 0.2
BUBBLE_BOUNDS_X = (0.1, 0.9)
BUBBLE_BOUNDS_Y = (0.2, 0.9)
BUBBLE_MIN_SIZE = 30.0
BUBBLE_MAX_START_SIZE = 50.0
BUBBLE_RISE_STEP = 0.002
BUBBLE_GROW_STEP = 0.5
BUBBLE_TOP_LIMIT = -0.1
BUBBLE_SIZE_LIMIT = 100.0
BUBBLE_MAX_AGE = 5.0
BUBBLE_SOIL_PER_TICK = 0.0001
BUBBLE_POP_GAIN = 0.05

# --- ROOMS ---
ROOM_BACKGROUNDS = {
    "MAIN": "background-game",
    "KITCHEN": "kitchen-game",
    "BATHROOM": "bathroom-game",
}
OUTSIDE_BACKGROUND = "outside-game"

# --- RETRO UI PALETTE ---
COLOR_BG = (40, 44, 52)
COLOR_TEXT = (171, 178, 191)
COLOR_UI_BAR_BG = (62, 68, 81)
COLOR_EMOTION = (255, 153, 51)
COLOR_HUNGER = (204, 77, 51)
COLOR_CLEANLINESS = (51, 153, 230)
COLOR_PET_BODY = (171, 220, 255)
COLOR_PET_EYES = (33, 37, 43)
COLOR_MESSAGE_BOX_BG = (0, 0, 0, 128)  # Semi-transparent black
COLOR_DIALOG = (255, 204, 153)
COLOR_DIALOG_BORDER = (139, 69, 19)

# Fallback backgrounds when a room image is missing
COLOR_ROOM_FALLBACK = (77, 102, 153)
COLOR_OUTSIDE_FALLBACK = (77, 153, 77)

RETRO_DARK = (102, 64, 38)
RETRO_SHADOW = (30, 30, 30)
RETRO_LIGHT = (250, 240, 220)
RETRO_ORANGE = (255, 165, 0)
RETRO_PINK = (255, 182, 193)
BUTTON_WIDTH = 140
BUTTON_HEIGHT = 60
BUTTON_SHADOW_OFFSET = 4
BUTTON_BORDER_RADIUS = 12
BUTTON_BORDER_WIDTH = 3
BUTTON_GLASS_ALPHA = 60
BUTTON_Y = SCREEN_HEIGHT - BUTTON_HEIGHT - 40

STAT_BAR_WIDTH = 120
STAT_BAR_HEIGHT = 18
STAT_BAR_BORDER_RADIUS = 6

# --- COMMON COLORS ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
