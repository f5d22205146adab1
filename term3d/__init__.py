#
# PROJECT: term3d
# MODULE: term3d/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Vec3, ScreenPoint, rotate_2d
from .config import RenderConfig
from .errors import Term3DError, ConfigError, MeshError, DisplayInitError
from .color import Color
from .events import Key, InputSource
from .canvas import Surface, Canvas
from .mesh import Mesh, Face
from .camera import Camera
from .renderer import Renderer, FrameState
from .engine import Engine, EngineState, Game
