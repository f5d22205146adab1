#
# PROJECT: term3d
# MODULE: term3d/events.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import abc
import enum
from typing import Optional


class Key(enum.Enum):
    """Input events understood by the engine and camera."""
    MOVE_UP = 'move_up'
    MOVE_DOWN = 'move_down'
    FORWARD = 'forward'
    BACKWARD = 'backward'
    STRAFE_LEFT = 'strafe_left'
    STRAFE_RIGHT = 'strafe_right'
    LOOK_UP = 'look_up'
    LOOK_DOWN = 'look_down'
    LOOK_LEFT = 'look_left'
    LOOK_RIGHT = 'look_right'
    RESIZE = 'resize'
    ESCAPE = 'escape'
    OTHER = 'other'


class InputSource(abc.ABC):
    @abc.abstractmethod
    def poll(self) -> Optional[Key]:
        """Return the next pending event, or None right away if there is none."""
