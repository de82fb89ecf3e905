"""README post-processing helpers."""

from .badges import BadgeManager, build_badges
from .markers import KEEP_MARKER, MarkerManager, split_kept

__all__ = ["BadgeManager", "KEEP_MARKER", "MarkerManager", "build_badges", "split_kept"]
