# =========================
# Window
# =========================
WIDTH, HEIGHT = 1280, 800
FPS = 60
WINDOW_TITLE = "Video Graph – drag, hover, scroll to zoom"

# Colors
BG_COLOR = (18, 18, 24)
TEXT_COLOR = (220, 220, 220)
EDGE_COLOR = (200, 200, 200, 128)   # translucent, drawn on an alpha layer
EDGE_WIDTH = 1
DEFAULT_NODE_COLOR = (200, 200, 200)
TOOLTIP_BG = (40, 44, 56)
TOOLTIP_BORDER = (120, 130, 150)
TOOLTIP_PAD = 4
TOOLTIP_OFFSET = 10                 # px right/below the cursor

FONT_NAME = "consolas"
FONT_SIZE = 16

# =========================
# Mock data
# =========================
N_NODES = 50
EDGE_PROBABILITY = 0.3
MAX_VIEWS = 1_000_000               # views drawn from [0, MAX_VIEWS)

# =========================
# Physics
# =========================
REPULSION = 500.0
SPRING_K = 0.01
REST_LENGTH = 100.0
VELOCITY_BLEND = 0.5                # vel = 0.5 * (vel + force)
MIN_DISTANCE = 1.0                  # repulsion floor for coincident nodes
RADIUS_DIVISOR = 100.0              # radius = sqrt(views) / 100

# =========================
# Viewport
# =========================
ZOOM_INTENSITY = 0.1

# HUD
HUD_EMA_ALPHA = 0.12
