"""Fixed engine settings."""

BOARD_SIZE = 8

# Search depth, in plies
DEFAULT_DEPTH = 4
MIN_DEPTH = 1
# More than 8 gets slow
MAX_DEPTH = 10
