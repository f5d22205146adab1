#
# PROJECT: term3d
# MODULE: term3d/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass, field

from .errors import ConfigError

DELTA_MODES = ('render', 'frame')


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline and frame loop."""
    focal_length: float = 200.0
    move_speed: float = 10.0
    target_fps: int = 60
    fill_glyph: str = '#'
    line_glyph: str = '#'
    vertical_glyph: str = '|'
    horizontal_glyph: str = '-'
    clear_glyph: str = ' '
    use_color: bool = True
    outline: bool = False
    show_hud: bool = False
    # 'render': delta spans hook checkpoint -> refresh of the previous frame.
    # 'frame': delta spans start of the previous iteration -> its refresh.
    delta_mode: str = 'render'

    target_frame_time: float = field(init=False, repr=False, default=0.0)

    def __post_init__(self):
        if self.focal_length <= 0:
            raise ConfigError(f"focal_length must be positive, got {self.focal_length}")
        if self.target_fps <= 0:
            raise ConfigError(f"target_fps must be positive, got {self.target_fps}")
        if self.delta_mode not in DELTA_MODES:
            raise ConfigError(f"delta_mode must be one of {DELTA_MODES}, got {self.delta_mode!r}")
        for name in ('fill_glyph', 'line_glyph', 'vertical_glyph',
                     'horizontal_glyph', 'clear_glyph'):
            if len(getattr(self, name)) != 1:
                raise ConfigError(f"{name} must be a single character")
        self.target_frame_time = 1.0 / self.target_fps

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Guess terminal capabilities from TERM and return a config.
        Accurate color detection needs curses, so this is a pre-init guess;
        the curses screen falls back to monochrome if colors are missing.
        """
        term = os.environ.get('TERM', '').lower()
        is_dumb = term in ('dumb', 'unknown', '')
        overrides.setdefault('use_color', not is_dumb)
        return cls(**overrides)
