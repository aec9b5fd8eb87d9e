BOARD_SIZE = 9
COLORS_NUMBER = 7
STARTING_BALLS_NUMBER = 5
NEW_DROP_BALLS_NUMBER = 3
MIN_COLLAPSING_LINE = 5

# Seconds between two single-cell steps of a ball move animation.
MOVE_STEP_DELAY = 0.05

# Neighbor expansion order used by path search: up, right, down, left.
# Shortest-path ties are broken by this order, so keep it stable.
NEIGHBOR_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))
