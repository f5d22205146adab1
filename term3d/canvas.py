#
# PROJECT: term3d
# MODULE: term3d/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import abc


class Surface(abc.ABC):
    """
    Character-cell display the renderer draws onto.

    Coordinates are (row, col). Writes outside the current size must be
    ignored, since triangle fills clip to [0, W] x [0, H] inclusive.
    """

    @abc.abstractmethod
    def size(self):
        """Current (rows, cols), both non-negative."""

    @abc.abstractmethod
    def set_color(self, color):
        """Select the color used by subsequent put() calls. None = default."""

    @abc.abstractmethod
    def put(self, row: int, col: int, glyph: str):
        """Write one glyph."""

    @abc.abstractmethod
    def refresh(self):
        """Present the buffer."""

    def resize(self):
        """Re-read the physical size after a resize event."""

    def write_text(self, row: int, col: int, text: str):
        for i, ch in enumerate(text):
            self.put(row, col + i, ch)


class Canvas(Surface):
    """In-memory surface. Keeps a glyph grid and a matching color grid."""
    __slots__ = ['h', 'w', 'grid', 'c_grid', 'color', 'refresh_count', 'writes']

    def __init__(self, w: int, h: int):
        self.color = None
        self.refresh_count = 0
        self.writes = 0
        self._allocate(w, h)

    def _allocate(self, w, h):
        self.w, self.h = max(0, w), max(0, h)
        self.grid = [[' '] * self.w for _ in range(self.h)]
        self.c_grid = [[None] * self.w for _ in range(self.h)]

    def size(self):
        return self.h, self.w

    def set_color(self, color):
        self.color = color

    def put(self, row, col, glyph):
        if row < 0 or row >= self.h or col < 0 or col >= self.w: return
        self.grid[row][col] = glyph
        self.c_grid[row][col] = self.color
        self.writes += 1

    def refresh(self):
        self.refresh_count += 1

    def resize_to(self, w: int, h: int):
        """Simulate a terminal resize. Contents are discarded."""
        self._allocate(w, h)

    def glyph_at(self, col, row):
        return self.grid[row][col]

    def color_at(self, col, row):
        return self.c_grid[row][col]

    def lines(self):
        return [''.join(row) for row in self.grid]

    def count(self, glyph):
        return sum(row.count(glyph) for row in self.grid)
