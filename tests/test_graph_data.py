from __future__ import annotations

import numpy as np

from graph_data import build_graph, generate_edges, generate_nodes
from graph_state import CATEGORIES, Category, Node


def test_generated_nodes_are_within_bounds_and_at_rest() -> None:
    state = build_graph(640, 480, count=50, seed=1)
    assert len(state) == 50
    assert [node.id for node in state.nodes] == list(range(50))
    assert all(node.title == f"Video {node.id + 1}" for node in state.nodes)
    assert all(0 <= node.views < 1_000_000 for node in state.nodes)
    assert all(node.category in CATEGORIES for node in state.nodes)
    assert np.all((state.pos[:, 0] >= 0) & (state.pos[:, 0] < 640))
    assert np.all((state.pos[:, 1] >= 0) & (state.pos[:, 1] < 480))
    np.testing.assert_array_equal(state.vel, 0.0)


def test_edges_only_link_distinct_same_category_nodes() -> None:
    state = build_graph(800, 600, count=40, seed=11)
    assert state.edges
    for (i, j) in state.edges:
        assert i < j
        assert state.nodes[i].category == state.nodes[j].category
    assert len(set(state.edges)) == len(state.edges)


def test_seed_makes_the_graph_reproducible() -> None:
    a = build_graph(800, 600, count=20, seed=42)
    b = build_graph(800, 600, count=20, seed=42)
    np.testing.assert_array_equal(a.pos, b.pos)
    assert a.edges == b.edges
    assert [n.views for n in a.nodes] == [n.views for n in b.nodes]


def test_edge_probability_bounds() -> None:
    rng = np.random.default_rng(0)
    nodes = [Node(i, f"Video {i + 1}", 100, Category.TECH if i % 2 else Category.MUSIC) for i in range(6)]
    assert generate_edges(nodes, 0.0, rng) == []
    # every same-category pair when p == 1
    assert generate_edges(nodes, 1.0, rng) == [(0, 2), (0, 4), (1, 3), (1, 5), (2, 4), (3, 5)]


def test_generate_nodes_handles_zero_count() -> None:
    nodes, pos = generate_nodes(0, 100, 100, np.random.default_rng(0))
    assert nodes == []
    assert pos.shape == (0, 2)
