"""
Plain-text high score persistence.

The file holds nothing but the decimal score. A missing or unreadable
file counts as "no high score yet"; a failed write is logged and the
game carries on.
"""
import logging
from pathlib import Path

from .settings import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path=HIGHSCORE_FILE):
        self.path = Path(path)

    def load(self):
        try:
            with open(self.path, "r") as f:
                score = int(f.readline().strip())
        except FileNotFoundError:
            logger.info("No high score file at %s, starting from 0", self.path)
            return 0
        except (OSError, ValueError) as e:
            logger.info("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        if score < 0:
            logger.info("Ignoring negative high score %d in %s", score, self.path)
            return 0
        logger.debug("Loaded high score %d from %s", score, self.path)
        return score

    def save(self, score):
        try:
            with open(self.path, "w") as f:
                f.write(str(int(score)))
        except OSError as e:
            logger.warning("Failed to save high score to %s: %s", self.path, e)
            return False
        logger.debug("Saved high score %d to %s", score, self.path)
        return True
