# src/c4search/config.py

from __future__ import annotations

BOARD_SIZE = 8     # square N x N board
CONNECT_N = 4

# Search
SEARCH_DEPTH = 8

WIN_SCORE = 100_000_000
LOSS_SCORE = -WIN_SCORE
DRAW_SCORE = 0

# Leaf heuristic weights (WEIGHT_THREE must stay below WIN_SCORE / 10)
WEIGHT_THREE = 50_000
WEIGHT_TWO = 1_000
WEIGHT_CENTER = 100

# Returned instead of the weighted sum when someone can win next move
THREAT_BONUS = 90_000_000

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Headless matches
RESULTS_DIR = "data/results"
OPENING_RANDOM_PLIES = 2
