#
# PROJECT: term3d
# MODULE: term3d/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import enum
import logging

logger = logging.getLogger(__name__)


class Color(enum.Enum):
    """Face colors. Values are the curses color constants."""
    BLACK = curses.COLOR_BLACK
    RED = curses.COLOR_RED
    GREEN = curses.COLOR_GREEN
    YELLOW = curses.COLOR_YELLOW
    BLUE = curses.COLOR_BLUE
    MAGENTA = curses.COLOR_MAGENTA
    CYAN = curses.COLOR_CYAN
    WHITE = curses.COLOR_WHITE


def init_colors(use_color: bool = True):
    """
    Initialize one curses color pair per Color, foreground on black.

    Returns a dict Color -> pair id. Every entry is 0 (the terminal default
    pair) when color is disabled or the terminal cannot do color, so callers
    never need to special-case monochrome.
    """
    mono = {c: 0 for c in Color}
    if not use_color:
        return mono

    try:
        if not curses.has_colors():
            logger.info("Terminal reports no color support, using monochrome")
            return mono
        curses.start_color()
    except curses.error as e:
        logger.warning("Color initialisation failed, using monochrome: %s", e)
        return mono

    pairs = {}
    for pair_id, c in enumerate(Color, start=1):
        try:
            curses.init_pair(pair_id, c.value, curses.COLOR_BLACK)
            pairs[c] = pair_id
        except curses.error:
            pairs[c] = 0
    return pairs
