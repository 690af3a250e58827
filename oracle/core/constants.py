# oracle/core/constants.py

# --- Board Dimensions ---
WIDTH = 7
HEIGHT = 6
MAX_MOVES = WIDTH * HEIGHT

# --- Players ---
# Player A always moves first
PLAYER_A = 1
PLAYER_B = -1
EMPTY = 0

# --- Scoring System ---
# Logic: Score = (MAX_MOVES + 1 - moves_before_winning_stone) // 2
# Win with your 4th stone  = +18 (earliest possible)
# Win with your last stone = +1
# Draw                     = 0
MAX_SCORE = MAX_MOVES // 2
MIN_SCORE = -MAX_SCORE

# Widest search window, one past any reachable score
SCORE_BOUND = MAX_SCORE + 1

# Known value of the empty board under this scoring (first player wins with
# the last stone of their 21st move)
EMPTY_BOARD_SCORE = 1

# --- Optimization ---
# Search center columns first to maximize Alpha-Beta pruning efficiency
COLUMN_ORDER = [3, 2, 4, 1, 5, 0, 6]
