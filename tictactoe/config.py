# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

GRID_SIZE = 3          # fixed 3x3 grid
RUN_LENGTH = 3         # same-mark cells in a line needed to win

# -----------------------------------------------------------------------------
# PLAYERS
# -----------------------------------------------------------------------------

PLAYER_LABELS = ("Player 1", "Player 2")   # ordered, index 0 always starts

# -----------------------------------------------------------------------------
# MESSAGES
# -----------------------------------------------------------------------------

WIN_MESSAGE = "WINNER WINNER, CHICKEN DINNER!"
DRAW_MESSAGE = "It's a draw!"
OCCUPIED_MESSAGE = "cell taken"

# -----------------------------------------------------------------------------
# COLORS (hex, used by the board widget and stylesheets)
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_LINE_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
