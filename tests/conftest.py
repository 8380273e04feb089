from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
import pytest  # noqa: E402

from graph_state import Category, GraphState, Node  # noqa: E402


def make_state(positions, views=None, categories=None, edges=(), width=800, height=600) -> GraphState:
    n = len(positions)
    views = views if views is not None else [10_000] * n
    categories = categories if categories is not None else [Category.MUSIC] * n
    nodes = [Node(i, f"Video {i + 1}", views[i], categories[i]) for i in range(n)]
    return GraphState(nodes, positions, list(edges), width, height)


@pytest.fixture
def graph_factory():
    return make_state


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 14)
    pygame.font.quit()
