# Defaults for the command-line game

OPPONENTS = ("minimax", "random")
DEFAULT_OPPONENT = "minimax"

# X always moves first
DEFAULT_HUMAN_MARK = "X"

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Consecutive rejected moves tolerated from a computer player before giving up.
# Humans may retry forever.
MAX_AUTOMATED_ATTEMPTS = 3
