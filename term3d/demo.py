#
# PROJECT: term3d
# MODULE: term3d/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import curses
import logging
import sys

from .config import RenderConfig
from .engine import Engine, Game
from .errors import DisplayInitError
from .logging_config import setup_logging
from .math_utils import Vec3
from .mesh import Mesh
from .screen import CursesScreen

logger = logging.getLogger(__name__)


class CubeDemo(Game):
    """
    Places the camera in front of the demo cube and optionally turns it
    at a fixed rate (radians per second).
    """

    def __init__(self, distance: float = 20.0, turn_rate: float = 0.0):
        self.distance = distance
        self.turn_rate = turn_rate

    def start(self, engine):
        engine.camera.position = Vec3(0, 0, -self.distance)
        logger.info("Demo started, camera at %r", engine.camera.position)

    def update(self, engine, delta):
        if self.turn_rate:
            engine.camera.yaw += self.turn_rate * delta


def parse_args(argv=None):
    epilog = """\
controls:
  w/s a/d        move forward/back, strafe left/right
  q/e            move up/down
  arrow keys     look around
  Esc            quit
"""
    parser = argparse.ArgumentParser(
        description="Terminal 3D cube renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--outline", action="store_true",
                        help="Draw face edges on top of the fill")
    parser.add_argument("--hud", action="store_true",
                        help="Show the status line")
    parser.add_argument("--fps", type=int, default=60,
                        help="Target frame rate (default: 60)")
    parser.add_argument("--focal-length", type=float, default=200.0,
                        help="Perspective focal length in cells (default: 200)")
    parser.add_argument("--speed", type=float, default=10.0,
                        help="Camera speed per second (default: 10)")
    parser.add_argument("--distance", type=float, default=20.0,
                        help="Start distance from the cube (default: 20)")
    parser.add_argument("--turn-rate", type=float, default=0.0,
                        help="Automatic yaw rate in radians/second (default: 0)")
    parser.add_argument("--delta-mode", choices=("render", "frame"), default="render",
                        help="How frame delta time is measured (default: render)")
    parser.add_argument("--log-file", default=None,
                        help="Write log output to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Log at DEBUG level")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    config = RenderConfig.detect_terminal(
        focal_length=args.focal_length,
        move_speed=args.speed,
        target_fps=args.fps,
        outline=args.outline,
        show_hud=args.hud,
        delta_mode=args.delta_mode,
    )
    if args.no_color:
        config.use_color = False
    return config


def main(stdscr, args, config: RenderConfig):
    """Entry point called from curses.wrapper."""
    screen = CursesScreen(stdscr, use_color=config.use_color)
    engine = Engine(screen, screen, Mesh.cube(), config)
    engine.run(CubeDemo(distance=args.distance, turn_rate=args.turn_rate))


def cli(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        curses.wrapper(lambda s: main(s, args, config))
    except KeyboardInterrupt:
        pass
    except curses.error as e:
        logger.error("Terminal error: %s", e)
        print(f"Error: terminal error: {e}", file=sys.stderr)
        return 1
    except DisplayInitError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
