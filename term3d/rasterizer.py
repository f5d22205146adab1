#
# PROJECT: term3d
# MODULE: term3d/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import Surface
from .math_utils import perp_dot


def _line_low(x0, y0, x1, y1):
    """Bresenham for |dy| < |dx|, walking x from x0 to x1 (x0 <= x1)."""
    dx = x1 - x0
    dy = y1 - y0
    yi = 1
    if dy < 0:
        yi = -1
        dy = -dy
    d = 2 * dy - dx
    y = y0
    for x in range(x0, x1 + 1):
        yield x, y
        if d > 0:
            y += yi
            d -= 2 * dx
        d += 2 * dy


def _line_high(x0, y0, x1, y1):
    """Bresenham for |dy| >= |dx|, walking y from y0 to y1 (y0 <= y1)."""
    dx = x1 - x0
    dy = y1 - y0
    xi = 1
    if dx < 0:
        xi = -1
        dx = -dx
    d = 2 * dx - dy
    x = x0
    for y in range(y0, y1 + 1):
        yield x, y
        if d > 0:
            x += xi
            d -= 2 * dy
        d += 2 * dx


def line_points(x0, y0, x1, y1):
    """Cells covered by the segment, endpoints included."""
    if abs(y1 - y0) < abs(x1 - x0):
        if x0 > x1:
            return list(_line_low(x1, y1, x0, y0))
        return list(_line_low(x0, y0, x1, y1))
    if y0 > y1:
        return list(_line_high(x1, y1, x0, y0))
    return list(_line_high(x0, y0, x1, y1))


def draw_line(surface: Surface, x0, y0, x1, y1, glyph='#',
              vertical='|', horizontal='-'):
    """
    Draw a line between two cells. Pure vertical and horizontal lines use
    their own glyphs; everything else goes through Bresenham.
    """
    if x0 == x1:
        for y in range(min(y0, y1), max(y0, y1) + 1):
            surface.put(y, x0, vertical)
    elif y0 == y1:
        for x in range(min(x0, x1), max(x0, x1) + 1):
            surface.put(y0, x, horizontal)
    else:
        for x, y in line_points(x0, y0, x1, y1):
            surface.put(y, x, glyph)


def tri_bounding_box(v1, v2, v3):
    """Returns (min_x, max_x, min_y, max_y)."""
    xs = (v1[0], v2[0], v3[0])
    ys = (v1[1], v2[1], v3[1])
    return min(xs), max(xs), min(ys), max(ys)


def clip_box(box, width, height):
    """Clamp a bounding box to [0, width] x [0, height]."""
    min_x, max_x, min_y, max_y = box
    return (min(width, max(0, min_x)), min(width, max(0, max_x)),
            min(height, max(0, min_y)), min(height, max(0, max_y)))


def inside_triangle(v1, v2, v3, p) -> bool:
    """
    Edge-function test, edges inclusive. With vs1 = v2 - v1, vs2 = v3 - v1,
    q = p - v1: s = q x vs2 / vs1 x vs2, t = vs1 x q / vs1 x vs2, inside iff
    s >= 0, t >= 0, s + t <= 1. Evaluated multiplied through by the
    denominator so integer input stays exact. Degenerate -> False.
    """
    vs1 = (v2[0] - v1[0], v2[1] - v1[1])
    vs2 = (v3[0] - v1[0], v3[1] - v1[1])
    den = perp_dot(vs1, vs2)
    if den == 0:
        return False
    q = (p[0] - v1[0], p[1] - v1[1])
    s_num = perp_dot(q, vs2)
    t_num = perp_dot(vs1, q)
    if den < 0:
        den, s_num, t_num = -den, -s_num, -t_num
    return s_num >= 0 and t_num >= 0 and s_num + t_num <= den


def fill_triangle(surface: Surface, color, v1, v2, v3, glyph='#') -> int:
    """
    Fill a triangle of screen points. Returns the number of cells written
    (0 for degenerate triangles, which are skipped).
    """
    vs1 = (v2[0] - v1[0], v2[1] - v1[1])
    vs2 = (v3[0] - v1[0], v3[1] - v1[1])
    den = perp_dot(vs1, vs2)
    if den == 0:
        return 0
    sign = 1 if den > 0 else -1
    den *= sign

    h, w = surface.size()
    min_x, max_x, min_y, max_y = clip_box(tri_bounding_box(v1, v2, v3), w, h)

    surface.set_color(color)
    drawn = 0
    x1, y1 = v1[0], v1[1]
    for x in range(min_x, max_x + 1):
        qx = x - x1
        for y in range(min_y, max_y + 1):
            qy = y - y1
            s_num = (qx * vs2[1] - qy * vs2[0]) * sign
            t_num = (vs1[0] * qy - vs1[1] * qx) * sign
            if s_num >= 0 and t_num >= 0 and s_num + t_num <= den:
                surface.put(y, x, glyph)
                drawn += 1
    return drawn


def fill_quad(surface: Surface, color, points, glyph='#') -> int:
    """Fill a quad as (p0, p1, p2) + (p0, p3, p2), split on the p0-p2 diagonal."""
    p0, p1, p2, p3 = points
    return (fill_triangle(surface, color, p0, p1, p2, glyph) +
            fill_triangle(surface, color, p0, p3, p2, glyph))
