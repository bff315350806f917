"""Game rules constants for Spanish draughts."""

# Board dimensions
BOARD_SIZE = 8

# Starting rows for each player
RED_ROWS = range(0, 3)    # Rows 0, 1, 2
WHITE_ROWS = range(5, 8)  # Rows 5, 6, 7

# Diagonal directions (row_delta, col_delta)
# White moves upward (decreasing row), Red moves downward (increasing row)
FORWARD_DIRECTIONS_WHITE = [(-1, -1), (-1, 1)]  # Up-left, Up-right
FORWARD_DIRECTIONS_RED = [(1, -1), (1, 1)]      # Down-left, Down-right
ALL_DIRECTIONS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]  # For kings

# Promotion
PROMOTION_ROW_WHITE = 0
PROMOTION_ROW_RED = BOARD_SIZE - 1

# Material values; a king is worth two men
MAN_VALUE = 3
KING_VALUE = 2 * MAN_VALUE

# Default search depth for the hard difficulty
DEFAULT_SEARCH_DEPTH = 4
