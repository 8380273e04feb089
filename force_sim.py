import math

import numpy as np

from graph_config import MIN_DISTANCE, REPULSION, REST_LENGTH, SPRING_K, VELOCITY_BLEND
from logging_config import get_logger

log = get_logger("sim")


# =========================
# Force laws
# =========================
def repulsion_force(distance, strength=REPULSION):
    """Inverse-square push between two nodes; distance floored at MIN_DISTANCE."""
    d = max(float(distance), MIN_DISTANCE)
    return strength / (d * d)


def spring_force(distance, k=SPRING_K, rest=REST_LENGTH):
    """Hooke force along an edge: > 0 when stretched, < 0 when compressed."""
    return k * (distance - rest)


# =========================
# Accumulation
# =========================
def apply_repulsion(pos, force, strength=REPULSION):
    """Adds the pairwise repulsion of every node pair into `force` (n, 2)."""
    n = pos.shape[0]
    if n < 2:
        return
    delta = pos[:, None, :] - pos[None, :, :]          # delta[i, j] = p_i - p_j
    dist = np.sqrt((delta * delta).sum(axis=2))
    dist = np.maximum(dist, MIN_DISTANCE)               # diagonal has delta == 0, so it adds nothing
    mag = strength / (dist * dist)
    force += ((mag / dist)[:, :, None] * delta).sum(axis=1)


def apply_springs(pos, force, edges, k=SPRING_K, rest=REST_LENGTH):
    """Pulls every edge toward its rest length. Coincident endpoints are skipped."""
    skipped = 0
    for (i, j) in edges:
        dx = float(pos[i, 0] - pos[j, 0])
        dy = float(pos[i, 1] - pos[j, 1])
        d2 = dx*dx + dy*dy
        if d2 <= 1e-12:
            skipped += 1
            continue
        dist = math.sqrt(d2)
        f = spring_force(dist, k, rest)
        fx = f * dx / dist
        fy = f * dy / dist
        force[i, 0] -= fx
        force[i, 1] -= fy
        force[j, 0] += fx
        force[j, 1] += fy
    if skipped:
        log.debug("Skipped %d edge(s) with coincident endpoints", skipped)


def integrate(pos, vel, force, dragged=None, blend=VELOCITY_BLEND):
    """vel = blend * (vel + force); pos += vel. The dragged row is frozen with zero velocity."""
    free = np.ones(pos.shape[0], dtype=bool)
    if dragged is not None:
        free[dragged] = False
        vel[dragged] = 0.0
    vel[free] = (vel[free] + force[free]) * blend
    pos[free] += vel[free]


# =========================
# Frame step
# =========================
def step(state):
    """One simulation frame over a GraphState."""
    state.force[:] = 0.0
    apply_repulsion(state.pos, state.force)
    apply_springs(state.pos, state.force, state.edges)
    integrate(state.pos, state.vel, state.force, state.dragged)
