"""Game configuration constants."""

# Game settings
FPS = 60
WINDOW_WIDTH = 500
WINDOW_HEIGHT = 700
WINDOW_TITLE = "Top View Car Game"

# Assets (loaded once at startup; any failure aborts the game)
ASSET_PATHS = {
    "background": "assets/road.bmp",
    "player": "assets/car.png",
    "enemy": "assets/police.png",
}
# The road image is drawn opaque, both car sprites keep their alpha channel
OPAQUE_ASSETS = {"background"}

# Colors
COLOR_BG = (0, 0, 0)
COLOR_TEXT = (255, 255, 255)

# Fonts
FONT_SIZE = 24

# World coordinates run from -1 to 1 on both axes, y grows upward.
# Car sprites are anchored at their horizontal center and bottom edge.

# Road settings
LANES = (-0.6, 0.0, 0.6)  # left, center, right
START_LANE = 1  # center

# Player settings
PLAYER_Y = -0.9
SPRITE_HEIGHT = 0.3  # Shared by player and enemy cars

# Speed / difficulty
BASE_SPEED = 0.01
SPEED_INCREMENT = 0.002
MAX_SPEED = 0.05
SPEED_UP_EVERY = 5  # points

# Enemy spawning
SPAWN_Y = 1.2  # Just above the top edge
SPAWN_STAGGER = 0.3  # Each later car in a batch starts this much further back
SPAWN_COUNTS = (1, 2)

# Scoring / cleanup thresholds
PASSED_Y = -1.2
DESPAWN_Y = -1.2

# Collision
COLLISION_ROW_Y = PLAYER_Y - SPRITE_HEIGHT / 2
COLLISION_Y_TOLERANCE = 0.15
COLLISION_X_TOLERANCE = 0.2

# HUD text positions (world coordinates of the text's top-left corner)
SCORE_TEXT_POS = (-0.95, 0.95)
GAME_OVER_TEXT_POS = (-0.45, 0.25)
