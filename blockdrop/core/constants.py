# blockdrop/core/constants.py

# ---------- tabuleiro ----------
ROWS = 20
COLS = 10
MIN_BOARD_SIDE = 4

# ---------- tempo ----------
TICK_INTERVAL_MS = 1000

# ---------- janela ----------
CELL_SIZE = 30
SIDEBAR_WIDTH = 200

EMPTY = 0

GAME_OVER_PROBE = "fresh"
LOG_LEVEL = "WARNING"
