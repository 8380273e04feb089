import numpy as np

from graph_config import EDGE_PROBABILITY, HEIGHT, MAX_VIEWS, N_NODES, WIDTH
from graph_state import CATEGORIES, GraphState, Node
from logging_config import get_logger

log = get_logger("data")


# =========================
# Mock videos
# =========================
def generate_nodes(count, width, height, rng):
    """Random videos uniformly placed in [0, width) x [0, height); returns (nodes, pos)."""
    nodes = []
    pos = np.zeros((count, 2), dtype=float)
    for i in range(count):
        category = CATEGORIES[int(rng.integers(0, len(CATEGORIES)))]
        views = int(rng.integers(0, MAX_VIEWS))
        nodes.append(Node(i, f"Video {i + 1}", views, category))
        pos[i, 0] = rng.uniform(0, width)
        pos[i, 1] = rng.uniform(0, height)
    return nodes, pos


def generate_edges(nodes, probability, rng):
    """Link same-category pairs (i < j) with the given probability."""
    edges = []
    n = len(nodes)
    for i in range(n):
        for j in range(i + 1, n):
            if nodes[i].category == nodes[j].category and rng.random() < probability:
                edges.append((i, j))
    return edges


def build_graph(width=WIDTH, height=HEIGHT, count=N_NODES, probability=EDGE_PROBABILITY, seed=None):
    rng = np.random.default_rng(seed)
    nodes, pos = generate_nodes(count, width, height, rng)
    edges = generate_edges(nodes, probability, rng)
    log.info("Generated %d nodes and %d edges (seed=%s)", len(nodes), len(edges), seed)
    return GraphState(nodes, pos, edges, width, height)
