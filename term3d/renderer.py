#
# PROJECT: term3d
# MODULE: term3d/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .canvas import Surface
from .config import RenderConfig
from .math_utils import Vec3, ScreenPoint
from .projector import project_vertices
from .rasterizer import draw_line, fill_quad
from .visibility import visible_faces


@dataclass
class FrameState:
    """Per-frame scratch data. Rebuilt by every render() call."""
    width: int
    height: int
    cam_space: List[Vec3] = field(default_factory=list)
    screen: List[Optional[ScreenPoint]] = field(default_factory=list)
    # (face index, depth key), farthest first
    draw_order: List[Tuple[int, float]] = field(default_factory=list)

    @property
    def visible(self):
        return [n for n, _ in self.draw_order]


def _within_guard(points, w, h):
    # Lines are walked cell by cell, so keep outlines to points near the screen.
    return all(-w <= p.x < 2 * w and -h <= p.y < 2 * h for p in points)


class Renderer:
    """
    Draws one frame of a mesh onto a Surface.

    render(surface, mesh, camera, config) clears the surface, projects the
    mesh, culls and sorts faces, then fills them back to front. It does not
    refresh; the frame loop presents after pacing.
    """

    def clear(self, surface: Surface, config: RenderConfig):
        h, w = surface.size()
        surface.set_color(None)
        glyph = config.clear_glyph
        for x in range(w):
            for y in range(h):
                surface.put(y, x, glyph)

    def render(self, surface: Surface, mesh, camera, config: RenderConfig) -> FrameState:
        self.clear(surface, config)

        h, w = surface.size()
        state = FrameState(width=w, height=h)
        state.cam_space, state.screen = project_vertices(
            mesh.vertices, camera, w, h, config.focal_length)
        state.draw_order = visible_faces(
            mesh.faces, state.cam_space, state.screen, w, h)

        for n, _key in state.draw_order:
            face = mesh.faces[n]
            pts = [state.screen[i] for i in face.indices]
            color = face.color if config.use_color else None
            fill_quad(surface, color, pts, config.fill_glyph)

            if config.outline and _within_guard(pts, w, h):
                surface.set_color(None)
                for i in range(len(pts)):
                    a, b = pts[i], pts[(i + 1) % len(pts)]
                    draw_line(surface, a.x, a.y, b.x, b.y,
                              glyph=config.line_glyph,
                              vertical=config.vertical_glyph,
                              horizontal=config.horizontal_glyph)
        return state
