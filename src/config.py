import logging
import os

# Matching thresholds (fixed, not scaled by name length)
MIN_SUBSTRING_LENGTH = 3
MAX_EDIT_DISTANCE = 2

# rapidfuzz WRatio score above which a wrong guess counts as "close"
NEAR_MISS_SCORE = 70

# Points for a correct answer with no hints used
MAX_BONUS = 3

DEFAULT_DATA_PATH = os.path.join(os.path.dirname(__file__), '../data/players.json')


def data_path():
    """Dataset location, overridable with FOOTY_QUIZ_DATA."""
    return os.getenv("FOOTY_QUIZ_DATA") or DEFAULT_DATA_PATH


def configure_logging(level=None):
    level = level or os.getenv("FOOTY_QUIZ_LOG_LEVEL", "WARNING")
    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
