import logging
import os
from logging.handlers import RotatingFileHandler

from .game_logic import Mark, Mode

# -----------------------------------------------------------------------------
# GAME DEFAULTS
# -----------------------------------------------------------------------------

REPLY_DELAY_MS = 500             # computer "thinking" time
RESULT_POPUP_DELAY_MS = 500      # pause before the win/draw popup
STARTING_MARK = Mark.X
HUMAN_MARK = Mark.X              # human always plays X against the computer
OPPONENT_MARK = Mark.O
DEFAULT_MODE = Mode.HUMAN_VS_OPPONENT

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_LEVEL = "WARNING"
LOG_DIR = os.path.join(os.path.expanduser("~"), ".noughts", "logs")
LOG_MAX_BYTES = 200_000
LOG_BACKUP_COUNT = 3


def setup_logging(level=LOG_LEVEL, log_file=None):
    """
    configure the package logger: stderr always, rotating file if asked
    returns the configured logger
    """
    logger = logging.getLogger("noughts")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    # fresh handlers each call so repeated setup doesn't duplicate output
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handler = RotatingFileHandler(
            log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8", delay=True
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    logger.propagate = False
    return logger
