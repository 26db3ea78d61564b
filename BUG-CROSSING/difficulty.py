"""
difficulty.py - level and the spawn gap range it implies
"""
import logging
import math

from config import DIFFS

logger = logging.getLogger(__name__)


class Difficulty:
    def __init__(self, level=1):
        self.level = 1
        self.min_gap, self.max_gap = DIFFS[1]
        self.change(level)

    def change(self, new_level):
        """Set the level; only the known levels move the gap range."""
        self.level = new_level
        gaps = DIFFS.get(new_level)
        if gaps is None:
            logger.warning("unknown difficulty level %r, gaps stay [%d, %d)",
                           new_level, self.min_gap, self.max_gap)
            return False
        self.min_gap, self.max_gap = gaps
        return True

    def sample_gap(self, rng):
        # integer in [min_gap, max_gap)
        return math.floor(rng.random() * (self.max_gap - self.min_gap) + self.min_gap)

    def __repr__(self):
        return f"Difficulty(level={self.level}, gap=[{self.min_gap}, {self.max_gap}))"
