WINDOW_WIDTH = 720
WINDOW_HEIGHT = 480

# Frames per second requested from arcade. Life runs slower so stepping
# every N frames stays readable without burning CPU.
LIFE_FPS = 24
OTHELLO_FPS = 60

# Board sizes (cells per side).
LIFE_DEFAULT_SIZE = 10
LIFE_MIN_SIZE = 5
OTHELLO_DEFAULT_SIZE = 8
OTHELLO_MIN_SIZE = 4

# Life generation throttle: one generation every `update_rate` frames.
LIFE_UPDATE_RATE = 30
LIFE_UPDATE_RATE_MIN = 10
LIFE_UPDATE_RATE_MAX = 60
LIFE_UPDATE_RATE_STEP = 5

# Othello move hints start blinking after a quiet period (seconds).
HIGHLIGHT_DELAY = 3.0
HIGHLIGHT_INTERVAL = 0.5

# Board footprint relative to the window. The board is centered on
# BOARD_CENTER_X_PCT of the window width to leave room for the side panel.
BOARD_MAX_WIDTH_PCT = 0.62
BOARD_MAX_HEIGHT_PCT = 0.90
BOARD_CENTER_X_PCT = 0.4
BOTTOM_MARGIN = 24
MIN_TILE_SIZE = 8
CELL_PADDING_PCT = 0.12

# Control buttons sit beside the board.
CONTROL_WIDTH = 88
CONTROL_NARROW_WIDTH = 48
CONTROL_HEIGHT = 48
CONTROL_GAP = 16
CONTROL_COLUMN_GAP = 16

# Snapshot files are written as <prefix><n>.json
SNAPSHOT_PREFIX = "file_"
SNAPSHOT_SUFFIX = ".json"
