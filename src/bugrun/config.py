WIDTH = 505
HEIGHT = 606
TITLE = "Bug Run"
FPS = 60
VSYNC = False
BACKGROUND = (255, 255, 255)

# Board geometry
TILE_WIDTH = 101
TILE_HEIGHT = 83
NUM_ROWS = 6
NUM_COLS = 5

# Player
PLAYER_SPAWN = (203, 391)
PLAYER_SIZE = (70, 80)
# Clamp range for the player's top-left corner (one tile step = 101 x 83)
PLAYER_MIN_X = 1
PLAYER_MAX_X = 405
PLAYER_MIN_Y = -24
PLAYER_MAX_Y = 474

# Enemies
ENEMY_COUNT = 5
ENEMY_SIZE = (80, 70)
ENEMY_MIN_SPEED = 80.0
ENEMY_MAX_SPEED = 240.0
# Once x passes this edge the enemy is sent back to a respawn lane
ENEMY_RESPAWN_EDGE = 500
ENEMY_X_LANES = (-100, -200, -300, -400, -500)
ENEMY_Y_LANES = (60, 143, 226)

# Hearts (life tokens)
MAX_LIVES = 3
HEART_SIZE = (30, 50)
HEART_ORIGIN = (400, 0)
HEART_SPACING = 34

# Gem
GEM_SIZE = (60, 70)
GEM_X_LANES = (20, 121, 222, 323, 424)
GEM_Y_LANES = (70, 153, 236)
GEM_POINTS = {"blue": 10, "green": 20, "orange": 30}

# Reaching the water row
CROSSING_POINTS = 5
STAR_SECONDS = 0.75
