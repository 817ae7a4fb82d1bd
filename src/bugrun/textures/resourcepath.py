ASSETS_PATH: str = "images/"

# Board tiles
WATER_BLOCK_PATH: str = ASSETS_PATH + "water-block.png"
STONE_BLOCK_PATH: str = ASSETS_PATH + "stone-block.png"
GRASS_BLOCK_PATH: str = ASSETS_PATH + "grass-block.png"

# Entities
ENEMY_BUG_PATH: str = ASSETS_PATH + "enemy-bug.png"
HEART_PATH: str = ASSETS_PATH + "Heart.png"
STAR_PATH: str = ASSETS_PATH + "Star.png"

# Gems
GEM_BLUE_PATH: str = ASSETS_PATH + "gem-blue.png"
GEM_GREEN_PATH: str = ASSETS_PATH + "gem-green.png"
GEM_ORANGE_PATH: str = ASSETS_PATH + "gem-orange.png"

# Avatars
CHAR_BOY_PATH: str = ASSETS_PATH + "char-boy.png"
CHAR_CAT_GIRL_PATH: str = ASSETS_PATH + "char-cat-girl.png"
CHAR_PRINCESS_GIRL_PATH: str = ASSETS_PATH + "char-princess-girl.png"

GEM_PATHS: dict[str, str] = {
    "blue": GEM_BLUE_PATH,
    "green": GEM_GREEN_PATH,
    "orange": GEM_ORANGE_PATH,
}

AVATAR_PATHS: tuple[str, ...] = (
    CHAR_BOY_PATH,
    CHAR_CAT_GIRL_PATH,
    CHAR_PRINCESS_GIRL_PATH,
)

GAME_IMAGE_PATHS: tuple[str, ...] = (
    STONE_BLOCK_PATH,
    WATER_BLOCK_PATH,
    GRASS_BLOCK_PATH,
    ENEMY_BUG_PATH,
    HEART_PATH,
    STAR_PATH,
    GEM_ORANGE_PATH,
    GEM_BLUE_PATH,
    GEM_GREEN_PATH,
    *AVATAR_PATHS,
)
