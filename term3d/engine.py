#
# PROJECT: term3d
# MODULE: term3d/engine.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import abc
import enum
import logging
import time

from .camera import Camera
from .canvas import Surface
from .config import RenderConfig
from .events import InputSource, Key
from .renderer import Renderer

logger = logging.getLogger(__name__)


class EngineState(enum.Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


class Game(abc.ABC):
    """
    Per-application behaviour plugged into the frame loop.

    start() runs once before the first frame, update() once per frame right
    after input handling. Both get the Engine and may change its camera or
    stop it.
    """

    @abc.abstractmethod
    def start(self, engine: 'Engine'):
        ...

    @abc.abstractmethod
    def update(self, engine: 'Engine', delta: float):
        ...


class Engine:
    """
    Fixed-rate frame loop. Owns the camera, the mesh and the clock.

    Each tick: poll input, move the camera, call the game hook, render,
    sleep off the rest of the frame budget, refresh. The clock and sleep
    callables are injectable so the loop can run against a fake clock.
    """

    def __init__(self, surface: Surface, input_source: InputSource, mesh,
                 config: RenderConfig = None, camera: Camera = None,
                 renderer: Renderer = None, clock=time.perf_counter,
                 sleep=time.sleep):
        self.config = config if config is not None else RenderConfig()
        self.surface = surface
        self.input = input_source
        self.mesh = mesh
        self.camera = camera if camera is not None else Camera(speed=self.config.move_speed)
        self.renderer = renderer if renderer is not None else Renderer()
        self.clock = clock
        self.sleep = sleep

        self.state = EngineState.RUNNING
        self.last_frame = None
        self.frame_count = 0
        self.fps = 0
        self._fps_frames = 0
        self._fps_since = None
        self._read_size()

    @property
    def running(self) -> bool:
        return self.state is EngineState.RUNNING

    def stop(self):
        self.state = EngineState.TERMINATED

    def _read_size(self):
        self.height, self.width = self.surface.size()
        self.center_x = self.width / 2.0
        self.center_y = self.height / 2.0

    def resize(self):
        self.surface.resize()
        self._read_size()
        logger.debug("Display resized to %dx%d", self.width, self.height)

    def run(self, game: Game, max_frames: int = None) -> int:
        """Run until escape, stop() or max_frames. Returns frames rendered."""
        logger.info("Starting frame loop on %dx%d surface, %d faces",
                    self.width, self.height, len(self.mesh.faces))
        game.start(self)
        self._fps_since = self.clock()

        delta = 0.0
        while self.running:
            delta = self.tick(game, delta)
            if max_frames is not None and self.frame_count >= max_frames:
                break
        logger.info("Frame loop finished after %d frames", self.frame_count)
        return self.frame_count

    def tick(self, game: Game, delta: float) -> float:
        """One iteration. Returns the delta to feed the next one."""
        top_of_loop = self.clock()

        key = self.input.poll()
        if key is Key.ESCAPE:
            self.stop()
            return delta
        elif key is Key.RESIZE:
            self.resize()
        else:
            self.camera.update(delta, key)

        game.update(self, delta)
        if not self.running:
            return delta

        after_updates = self.clock()

        self.last_frame = self.renderer.render(
            self.surface, self.mesh, self.camera, self.config)
        if self.config.show_hud:
            self._draw_hud(top_of_loop)

        elapsed = self.clock() - top_of_loop
        if elapsed < self.config.target_frame_time:
            self.sleep(self.config.target_frame_time - elapsed)

        self.surface.refresh()
        now = self.clock()
        self._count_frame(now)

        if self.config.delta_mode == 'frame':
            return now - top_of_loop
        return now - after_updates

    def _count_frame(self, now):
        self.frame_count += 1
        self._fps_frames += 1
        if self._fps_since is None:
            self._fps_since = now
        elif now - self._fps_since >= 1.0:
            self.fps = self._fps_frames
            self._fps_frames = 0
            self._fps_since = now

    def _draw_hud(self, top_of_loop):
        cam = self.camera
        ms = (self.clock() - top_of_loop) * 1000
        visible = len(self.last_frame.draw_order) if self.last_frame else 0
        hdr = (f" FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | POS {cam.position.x:.1f},{cam.position.y:.1f},{cam.position.z:.1f}"
               f" | P:{cam.pitch:.2f} Y:{cam.yaw:.2f}"
               f" | F:{visible}/{len(self.mesh.faces)} ")
        self.surface.set_color(None)
        self.surface.write_text(0, 0, hdr.center(max(0, self.width - 1), '='))
