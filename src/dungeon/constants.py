ROOM_COLS = 16
ROOM_ROWS = 11

# Sprites are authored at 16px and drawn at 3x.
BASE_TILE_SIZE = 16
SCALE_FACTOR = 3
TILE_SIZE = BASE_TILE_SIZE * SCALE_FACTOR

# Room-space pixel offset applied to every placed box.
ROOM_ORIGIN = (0, 0)

FIELD_SEPARATOR = ","
ITEM_SEPARATOR = ";"

# Doors are listed clockwise starting from the left wall.
DOOR_COUNT = 4
# Player spawn tiles after entering through each door; vertical doors sit on a tile seam.
DEFAULT_DOOR_SPAWNS = "2;5,7.5;8,13;5,7.5;2"

# Seconds an enemy stays hidden inside its spawn cloud.
SPAWN_CLOUD_DURATION = 0.5

RUPEE_PICKUP_VALUE = 10

# Tile where deferred spawn commands drop their entity.
ITEM_SPAWN_TILE = (7.5, 5.0)

TELEPORT_ANIMATION = "WalkingOnStairs"
DEFAULT_FONT = "zelda"

# Viewer window
WINDOW_WIDTH = ROOM_COLS * TILE_SIZE
WINDOW_HEIGHT = ROOM_ROWS * TILE_SIZE
