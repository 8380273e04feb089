import math

import pygame

from graph_config import (
    BG_COLOR, EDGE_COLOR, EDGE_WIDTH, TEXT_COLOR,
    TOOLTIP_BG, TOOLTIP_BORDER, TOOLTIP_PAD,
)
from graph_state import category_color

POS_CLAMP = 1e6     # larger discs are drawn as a half-plane, not a pygame circle


# =========================
# Helpers
# =========================
def draw_text(surface, text, x, y, font):
    surface.blit(font.render(text, True, TEXT_COLOR), (x, y))


def clamp(x, lo, hi):
    return lo if x < lo else (hi if x > hi else x)


def screen_point(viewport, x, y):
    """World point -> float screen point, or None for non-finite input."""
    sx, sy = viewport.to_screen(float(x), float(y))
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return None
    return sx, sy


def clip_segment(a, b, w, h, margin=1.0):
    """Liang-Barsky clip of a-b to the surface rect grown by `margin`; None if nothing is left."""
    x0, y0 = a
    dx = b[0] - x0
    dy = b[1] - y0
    if not (math.isfinite(dx) and math.isfinite(dy)):
        return None
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 + margin), (dx, w + margin - x0),
                 (-dy, y0 + margin), (dy, h + margin - y0)):
        if p == 0.0:
            if q < 0.0:
                return None
            continue
        t = q / p
        if p < 0.0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x0 + t0 * dx, y0 + t0 * dy), (x0 + t1 * dx, y0 + t1 * dy)


def clip_half_plane(points, cx, cy, ux, uy, r):
    """Sutherland-Hodgman clip of a polygon to {p : (p - c) . u <= r}."""
    def side(p):
        return (p[0] - cx) * ux + (p[1] - cy) * uy - r

    out = []
    for k, p in enumerate(points):
        q = points[(k + 1) % len(points)]
        sp, sq = side(p), side(q)
        if sp <= 0.0:
            out.append(p)
        if (sp <= 0.0) != (sq <= 0.0):
            t = sp / (sp - sq)
            out.append((p[0] + t * (q[0] - p[0]), p[1] + t * (q[1] - p[1])))
    return out


def fill_disc(surface, color, cx, cy, r):
    """
    Filled circle clipped to the surface. Discs that miss the surface are culled;
    discs too large for pygame's int coordinates are drawn as the surface rect
    cut by the tangent line facing the screen (sub-pixel error at that size).
    """
    w, h = surface.get_size()
    nx, ny = clamp(cx, 0.0, w), clamp(cy, 0.0, h)
    if math.hypot(cx - nx, cy - ny) > r:
        return False
    corners = [(0.0, 0.0), (float(w), 0.0), (float(w), float(h)), (0.0, float(h))]
    if all(math.hypot(x - cx, y - cy) <= r for (x, y) in corners):
        surface.fill(color)
    elif max(abs(cx), abs(cy)) + r <= POS_CLAMP:
        pygame.draw.circle(surface, color, (int(round(cx)), int(round(cy))), max(1, int(round(r))))
    else:
        d = math.hypot(w * 0.5 - cx, h * 0.5 - cy)
        ux, uy = (w * 0.5 - cx) / d, (h * 0.5 - cy) / d
        poly = clip_half_plane(corners, cx, cy, ux, uy, r)
        if len(poly) >= 3:
            pygame.draw.polygon(surface, color, [(int(round(x)), int(round(y))) for (x, y) in poly])
    return True


def make_edge_layer(size):
    return pygame.Surface(size, pygame.SRCALPHA)


# =========================
# Graph
# =========================
def draw_edges(layer, state):
    vp = state.viewport
    pos = state.pos
    w, h = layer.get_size()
    for (i, j) in state.edges:
        a = screen_point(vp, pos[i, 0], pos[i, 1])
        b = screen_point(vp, pos[j, 0], pos[j, 1])
        if a is None or b is None:
            continue
        seg = clip_segment(a, b, w, h)
        if seg is None:
            continue
        (ax, ay), (bx, by) = seg
        pygame.draw.line(layer, EDGE_COLOR, (int(round(ax)), int(round(ay))),
                         (int(round(bx)), int(round(by))), EDGE_WIDTH)


def draw_nodes(surface, state):
    vp = state.viewport
    for node in state.nodes:
        c = screen_point(vp, state.pos[node.id, 0], state.pos[node.id, 1])
        if c is None:
            continue
        r = max(1.0, float(state.radii[node.id]) * vp.scale)
        fill_disc(surface, category_color(node.category), c[0], c[1], r)


def draw_graph(surface, state, edge_layer=None):
    """
    Clears `surface` and draws edges (translucent, on an alpha layer) then nodes,
    so nodes cover edge endpoints. Returns the edge layer for reuse next frame.
    """
    size = surface.get_size()
    if edge_layer is None or edge_layer.get_size() != size:
        edge_layer = make_edge_layer(size)

    surface.fill(BG_COLOR)

    edge_layer.fill((0, 0, 0, 0))
    draw_edges(edge_layer, state)
    surface.blit(edge_layer, (0, 0))

    draw_nodes(surface, state)
    return edge_layer


# =========================
# Overlays
# =========================
def draw_tooltip(surface, tooltip, font):
    if not tooltip.visible:
        return
    img = font.render(tooltip.text, True, TEXT_COLOR)
    box = pygame.Rect(int(tooltip.x), int(tooltip.y),
                      img.get_width() + TOOLTIP_PAD * 2, img.get_height() + TOOLTIP_PAD * 2)
    pygame.draw.rect(surface, TOOLTIP_BG, box)
    pygame.draw.rect(surface, TOOLTIP_BORDER, box, 1)
    surface.blit(img, (box.x + TOOLTIP_PAD, box.y + TOOLTIP_PAD))


def draw_hud(surface, state, font, fps, paused, show_debug=False):
    draw_text(
        surface,
        f"nodes={len(state)}  edges={len(state.edges)}  scale={state.viewport.scale:5.2f}  "
        f"{'PAUSED  ' if paused else ''}FPS~{fps:5.1f}",
        10, 10, font
    )
    draw_text(surface, "Space=pause  R=reset  D=debug  LMB=drag  Wheel=zoom  Esc=quit", 10, 30, font)
    if show_debug:
        vp = state.viewport
        dragged = "-" if state.dragged is None else state.nodes[state.dragged].title
        draw_text(
            surface,
            f"[DEBUG] offset=({vp.offset_x:7.1f}, {vp.offset_y:7.1f})  surface={state.width}x{state.height}  dragged={dragged}",
            10, 50, font
        )
