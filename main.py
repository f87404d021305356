import sys

from tictactoe.app import run

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(run())
