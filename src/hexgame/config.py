"""
Configuration for the hexagonal four-not-three game and its search opponent.
"""

# Board Configuration
BOARD_CONFIG = {
    'radius': 4,                        # Hexagon radius: 3R(R+1)+1 = 61 cells
}

# Search Configuration
SEARCH_CONFIG = {
    'recursion_limit': 3,               # Plies searched by RankerAi (clamped to >= 1)
    'tie_probability': 0.5,             # Chance the first equal-scoring move replaces the current pick
    'seed': None,                       # None = fresh entropy, int = reproducible tie-breaks
}

# Evaluator Configuration
RANKER_CONFIG = {
    'win_score': 1000.0,                # Position won by the ranked player
    'loss_score': -1000.0,              # Position won by the opponent
    'draw_score': -100.0,               # Board filled without a winner
    'weight_epsilon': 1e-9,             # Weight totals below this cannot be normalized
}

# Default motif weights (normalized before use)
FEATURE_WEIGHTS = {
    'window_score': 2.0,                # x _ _ x
    'triad_score': 5.0,                 # three mutually adjacent stones
    'slot_score': 1.0,                  # x _ x
    'double_score': 1.0,                # x x _
}

# Self-play match Configuration
ARENA_CONFIG = {
    'num_games': 10,                    # Games per match
    'recursion_limit': 3,               # Depth for randomly weighted opponents
    'swap_sides': True,                 # Alternate who moves first
}
