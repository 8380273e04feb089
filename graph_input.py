import numpy as np
import pygame

from graph_config import TOOLTIP_OFFSET, ZOOM_INTENSITY
from logging_config import get_logger

log = get_logger("input")


# =========================
# Hit testing
# =========================
def node_at(state, wx, wy):
    """
    First node (in array order) whose center is strictly closer than its radius
    to the world point (wx, wy), or None. First match wins, not the nearest.
    """
    if len(state) == 0:
        return None
    dx = state.pos[:, 0] - wx
    dy = state.pos[:, 1] - wy
    hits = np.flatnonzero(np.sqrt(dx*dx + dy*dy) < state.radii)
    return int(hits[0]) if hits.size else None


# =========================
# Pointer / wheel / resize
# =========================
def pointer_down(state, sx, sy):
    wx, wy = state.viewport.to_world(sx, sy)
    state.dragged = node_at(state, wx, wy)
    if state.dragged is not None:
        log.debug("Drag start: %r", state.nodes[state.dragged])
    return state.dragged


def pointer_move(state, sx, sy):
    wx, wy = state.viewport.to_world(sx, sy)

    if state.dragged is not None:
        i = state.dragged
        state.pos[i, 0] = wx
        state.pos[i, 1] = wy
        state.vel[i] = 0.0

    hovered = node_at(state, wx, wy)
    if hovered is not None:
        state.tooltip.show(sx + TOOLTIP_OFFSET, sy + TOOLTIP_OFFSET, state.nodes[hovered].describe())
    else:
        state.tooltip.hide()
    return hovered


def pointer_up(state):
    if state.dragged is not None:
        log.debug("Drag end: node %d", state.dragged)
    state.dragged = None


def wheel(state, direction, sx, sy, intensity=ZOOM_INTENSITY):
    """direction > 0 zooms in about (sx, sy), direction < 0 zooms out."""
    if direction == 0:
        return state.viewport.scale
    sign = 1 if direction > 0 else -1
    state.viewport.zoom_at(sign, sx, sy, intensity)
    log.debug("Zoom %+d at (%d, %d) -> scale %.3f", sign, sx, sy, state.viewport.scale)
    return state.viewport.scale


def resize(state, width, height):
    """Stores the new surface size; node positions are left untouched."""
    state.width = int(width)
    state.height = int(height)
    log.debug("Resized to %dx%d", state.width, state.height)


# =========================
# pygame dispatch
# =========================
def handle_event(state, event):
    """Routes one pygame event to the handlers above. Returns True if consumed."""
    if event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == 1:
            pointer_down(state, *event.pos)
            return True
    elif event.type == pygame.MOUSEBUTTONUP:
        if event.button == 1:
            pointer_up(state)
            return True
    elif event.type == pygame.MOUSEMOTION:
        pointer_move(state, *event.pos)
        return True
    elif event.type == pygame.MOUSEWHEEL:
        mx, my = pygame.mouse.get_pos()
        wheel(state, event.y, mx, my)
        return True
    elif event.type == pygame.VIDEORESIZE:
        resize(state, event.w, event.h)
        return True
    return False
