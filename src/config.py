WIDTH = 1920
HEIGHT = 1080
FULLSCREEN = False
TITLE = "Plane Animation"
FPS = 60
VSYNC = False
# Fixed post-frame sleep used for pacing only; dt is always measured
FRAME_SLEEP_MS = 16
# Upper bound on a single simulation step (seconds), e.g. after a stall
MAX_FRAME_DT = 0.1
VERBOSE = True

# Colors (RGB 0..1)
SKY_COLOR = (0.529, 0.808, 0.922, 1.0)
SKY_BOTTOM = (0.53, 0.81, 0.98)
GROUND_COLOR = (0.18, 0.55, 0.34)
BUILDING_COLOR = (0.7, 0.7, 0.7)
BLAST_COLOR = (1.0, 0.5, 0.0)

# Flight
PLANE_SPEED = 0.3
PLANE_SCALE = 0.4
# Drawn length of the aircraft in scene units (nose position relative to x)
NOSE_OFFSET = 0.4
# (start_x, lane_y, building_x) for every aircraft/building pair
FLIGHT_PAIRS = (
    (-1.2, 0.0, 0.0),
    (-1.2, -0.2, 0.5),
)

# Buildings
COLLAPSE_SPEED = 0.3
BUILDING_WIDTH = 0.15
BUILDING_HEIGHT = 1.0
BUILDING_MIN_HEIGHT = 0.1
BUILDING_BASE_Y = -0.5
BUILDING_WINDOW_COLS = 5
BUILDING_WINDOW_ROWS = 10
# Indices into FLIGHT_PAIRS whose building carries a roof antenna
ANTENNA_PAIRS = (1,)
ANTENNA_HEIGHT = 0.2

# Scenery
CLOUD_SIZE = 0.1
NUM_CLOUDS = 5
CLOUD_X_RANGE = (-1.0, 1.0)
CLOUD_Y_RANGE = (0.5, 0.9)
TREE_WIDTH = 0.05
TREE_HEIGHT = 0.15
NUM_TREES = 6
TREE_X_RANGE = (-1.0, 1.0)
TREE_Y = -0.7

# Blast / reset
RESET_DELAY = 3.0
BLAST_DURATION = 0.5
BLAST_PARTICLES = 50
BLAST_SPEED_MIN = 0.2
BLAST_SPEED_MAX = 0.7
BLAST_POINT_SIZE = 3.0
