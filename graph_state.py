import math
from enum import Enum

import numpy as np

from graph_config import DEFAULT_NODE_COLOR, RADIUS_DIVISOR, ZOOM_INTENSITY


# =========================
# Categories & colors
# =========================
class Category(str, Enum):
    MUSIC = "Music"
    GAMING = "Gaming"
    TECH = "Tech"
    COOKING = "Cooking"
    TRAVEL = "Travel"


CATEGORIES = tuple(Category)

CATEGORY_COLORS = {
    Category.MUSIC: (255, 0, 0),
    Category.GAMING: (0, 255, 0),
    Category.TECH: (0, 0, 255),
    Category.COOKING: (255, 255, 0),
    Category.TRAVEL: (255, 0, 255),
}


def category_color(category):
    """Color for a category or its label; unknown values get DEFAULT_NODE_COLOR."""
    try:
        return CATEGORY_COLORS[Category(category)]
    except ValueError:
        return DEFAULT_NODE_COLOR


def node_radius(views, divisor=RADIUS_DIVISOR):
    return math.sqrt(views) / divisor


# =========================
# Nodes
# =========================
class Node:
    """Static metadata of a video; position/velocity live in GraphState arrays at row `id`."""
    __slots__ = ("id", "title", "views", "category")

    def __init__(self, node_id, title, views, category):
        if views < 0:
            raise ValueError(f"views must be non-negative, got {views}")
        self.id = int(node_id)
        self.title = str(title)
        self.views = int(views)
        self.category = Category(category)

    @property
    def radius(self):
        return node_radius(self.views)

    def describe(self):
        return f"{self.title} ({self.category.value}) - {self.views} views"

    def __repr__(self):
        return f"Node(id={self.id}, title={self.title!r}, views={self.views}, category={self.category.value})"


# =========================
# Viewport
# =========================
class Viewport:
    """screen = world * scale + offset (offset is in screen pixels)."""
    __slots__ = ("scale", "offset_x", "offset_y")

    def __init__(self, scale=1.0, offset_x=0.0, offset_y=0.0):
        self.scale = float(scale)
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)

    def to_world(self, sx, sy):
        return (sx - self.offset_x) / self.scale, (sy - self.offset_y) / self.scale

    def to_screen(self, x, y):
        return x * self.scale + self.offset_x, y * self.scale + self.offset_y

    def zoom_at(self, direction, sx, sy, intensity=ZOOM_INTENSITY):
        """Zoom by exp(direction * intensity) keeping the screen point (sx, sy) fixed."""
        zoom = math.exp(direction * intensity)
        mx = sx - self.offset_x
        my = sy - self.offset_y
        self.scale *= zoom
        self.offset_x -= mx * (zoom - 1.0)
        self.offset_y -= my * (zoom - 1.0)
        return zoom


# =========================
# Tooltip
# =========================
class Tooltip:
    __slots__ = ("visible", "x", "y", "text")

    def __init__(self):
        self.visible = False
        self.x = 0
        self.y = 0
        self.text = ""

    def show(self, x, y, text):
        self.visible = True
        self.x, self.y = x, y
        self.text = text

    def hide(self):
        self.visible = False


# =========================
# Simulation state
# =========================
class GraphState:
    """
    Everything the simulator, renderer and input handlers share:
      - nodes (metadata) and per-node rows in pos / vel / force / radii,
      - immutable edge list of (i, j) index pairs with i < j,
      - viewport, dragged node index (or None), hover tooltip,
      - current surface size.
    """

    def __init__(self, nodes, positions, edges, width, height):
        n = len(nodes)
        positions = np.asarray(positions, dtype=float)
        if positions.shape != (n, 2):
            raise ValueError(f"expected positions of shape ({n}, 2), got {positions.shape}")
        for idx, node in enumerate(nodes):
            if node.id != idx:
                raise ValueError(f"node id {node.id} does not match its index {idx}")

        checked = []
        for (a, b) in edges:
            a, b = int(a), int(b)
            if a == b:
                raise ValueError(f"edge ({a}, {b}) is a self-loop")
            if not (0 <= a < n and 0 <= b < n):
                raise ValueError(f"edge ({a}, {b}) references a missing node")
            checked.append((min(a, b), max(a, b)))

        self.nodes = list(nodes)
        self.edges = tuple(checked)
        self.pos = positions.copy()
        self.vel = np.zeros((n, 2), dtype=float)
        self.force = np.zeros((n, 2), dtype=float)
        self.radii = np.array([node.radius for node in self.nodes], dtype=float)

        self.width = int(width)
        self.height = int(height)
        self.viewport = Viewport()
        self.dragged = None
        self.tooltip = Tooltip()

    def __len__(self):
        return len(self.nodes)
