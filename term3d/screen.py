#
# PROJECT: term3d
# MODULE: term3d/screen.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

from .canvas import Surface
from .color import init_colors
from .errors import DisplayInitError
from .events import InputSource, Key

logger = logging.getLogger(__name__)

ESCAPE_CODE = 27

KEY_MAP = {
    ord('q'): Key.MOVE_UP,
    ord('e'): Key.MOVE_DOWN,
    ord('w'): Key.FORWARD,
    ord('s'): Key.BACKWARD,
    ord('a'): Key.STRAFE_LEFT,
    ord('d'): Key.STRAFE_RIGHT,
    curses.KEY_UP: Key.LOOK_UP,
    curses.KEY_DOWN: Key.LOOK_DOWN,
    curses.KEY_LEFT: Key.LOOK_LEFT,
    curses.KEY_RIGHT: Key.LOOK_RIGHT,
    curses.KEY_RESIZE: Key.RESIZE,
    ESCAPE_CODE: Key.ESCAPE,
}


def translate_key(code):
    """curses getch() code -> Key. -1 (nothing pending) -> None."""
    if code == -1:
        return None
    return KEY_MAP.get(code, Key.OTHER)


class CursesScreen(Surface, InputSource):
    """Surface and non-blocking input source over a curses window."""

    def __init__(self, stdscr, use_color: bool = True):
        self.stdscr = stdscr
        try:
            stdscr.nodelay(True)
            stdscr.keypad(True)
            curses.noecho()
        except curses.error as e:
            raise DisplayInitError(f"could not configure terminal: {e}") from e
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        try:
            # Escape should arrive without the default ~1s delay.
            curses.set_escdelay(25)
        except (AttributeError, curses.error):
            pass
        self.pairs = init_colors(use_color)
        self._attr = curses.color_pair(0)

    def size(self):
        h, w = self.stdscr.getmaxyx()
        return max(0, h), max(0, w)

    def set_color(self, color):
        pair = self.pairs.get(color, 0) if color is not None else 0
        self._attr = curses.color_pair(pair)

    def put(self, row, col, glyph):
        h, w = self.size()
        if row < 0 or row >= h or col < 0 or col >= w:
            return
        try:
            self.stdscr.addch(row, col, glyph, self._attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass

    def refresh(self):
        self.stdscr.refresh()

    def resize(self):
        try:
            curses.update_lines_cols()
        except AttributeError:
            pass

    def poll(self):
        try:
            code = self.stdscr.getch()
        except curses.error:
            return None
        return translate_key(code)
