import logging
import sys

import pygame

import force_sim
import graph_input
from graph_config import (
    EDGE_PROBABILITY, FONT_NAME, FONT_SIZE, FPS, HEIGHT, HUD_EMA_ALPHA,
    N_NODES, WIDTH, WINDOW_TITLE,
)
from graph_data import build_graph
from graph_render import draw_graph, draw_hud, draw_tooltip
from logging_config import get_logger, setup_logging

log = get_logger("viewer")

# =========================================================
# Video Graph (force-directed, pan/zoom, drag, hover)
# - one tick = simulate, then render; never overlapping
# - Space pauses the physics, rendering keeps running
# =========================================================


class AnimationDriver:
    """Frame scheduler: `tick` runs one simulate+render step, `run` loops until `stop`."""

    def __init__(self, state, screen, font, fps=FPS, seed=None,
                 count=N_NODES, probability=EDGE_PROBABILITY, resizable=False):
        self.state = state
        self.screen = screen
        self.font = font
        self.fps = fps
        self.seed = seed
        self.count = count
        self.probability = probability
        self.resizable = resizable

        self.running = False
        self.paused = False
        self.show_debug = False
        self.frames = 0
        self.fps_ema = 0.0
        self._edge_layer = None

    # ---------------------------
    # Control
    # ---------------------------
    def stop(self):
        if self.running:
            log.info("Stopping after %d frames", self.frames)
        self.running = False

    def toggle_pause(self):
        self.paused = not self.paused
        log.info("Simulation %s", "paused" if self.paused else "resumed")

    def reset(self):
        self.state = build_graph(self.state.width, self.state.height,
                                 self.count, self.probability, self.seed)
        log.info("Graph reset")

    def on_key(self, key):
        if key == pygame.K_SPACE:
            self.toggle_pause()
        elif key == pygame.K_r:
            self.reset()
        elif key == pygame.K_d:
            self.show_debug = not self.show_debug
        elif key == pygame.K_ESCAPE:
            self.stop()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            self.on_key(event.key)
        elif graph_input.handle_event(self.state, event):
            if event.type == pygame.VIDEORESIZE and self.resizable:
                self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)

    # ---------------------------
    # Frame
    # ---------------------------
    def tick(self, dt_ms=0):
        if not self.paused:
            force_sim.step(self.state)

        if dt_ms > 0:
            inst_fps = 1000.0 / dt_ms
            self.fps_ema = (1 - HUD_EMA_ALPHA) * self.fps_ema + HUD_EMA_ALPHA * inst_fps

        self._edge_layer = draw_graph(self.screen, self.state, self._edge_layer)
        draw_tooltip(self.screen, self.state.tooltip, self.font)
        draw_hud(self.screen, self.state, self.font, self.fps_ema, self.paused, self.show_debug)
        self.frames += 1

    def run(self):
        clock = pygame.time.Clock()
        self.running = True
        log.info("Animation started (%d nodes, %d edges)", len(self.state), len(self.state.edges))
        while self.running:
            dt_ms = clock.tick(self.fps)
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break
            self.tick(dt_ms)
            pygame.display.flip()
        return self.frames


# ---------------------------
# Main
# ---------------------------
def main(seed=None, level=logging.INFO):
    setup_logging(level)
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)
    font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

    w, h = screen.get_size()
    state = build_graph(w, h, seed=seed)
    driver = AnimationDriver(state, screen, font, seed=seed, resizable=True)
    try:
        driver.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
