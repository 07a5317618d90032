"""Constants for the Sunflower animation."""

from __future__ import annotations

# Stage durations (milliseconds)
STEM_ANIMATION_DURATION: float = 2000.0
LEAF_ANIMATION_DURATION: float = 2000.0
PETAL_APPEAR_DURATION: float = 500.0  # each petal fades in one by one
TOTAL_PETALS: int = 16
PETAL_TOTAL_DURATION: float = PETAL_APPEAR_DURATION * TOTAL_PETALS
PHOTO_ANIMATION_DURATION: float = 2000.0

# Leaves grow from half size to full size
LEAF_START_SCALE: float = 0.5
# Leaf top sits this fraction of the intrinsic stem height below the stem top
LEAF_OFFSET_DIVISOR: float = 16.0

# Petal bases overlap the circle edge by this many pixels
PETAL_INSET: float = 10.0
PETAL_PAIRS: int = TOTAL_PETALS // 2
PETAL_ANGLE_STEP: float = 45.0
PETAL_BACK_OFFSET: float = 22.5

MAX_ALPHA: int = 255

# Restart button (top left, fixed size)
BUTTON_WIDTH: int = 350
BUTTON_HEIGHT: int = 100
BUTTON_MARGIN: int = 20
TEXT_SIZE: int = 40

# Colors (r, g, b)
BACKGROUND_COLOR = (255, 255, 255)
BUTTON_COLOR = (204, 204, 204)  # light gray
TEXT_COLOR = (0, 0, 0)

# Logical asset names; files are "<name>.png" inside the asset directory
ASSET_NAMES = (
    "circle",
    "front_petal",
    "back_petal",
    "stem",
    "left_leaf",
    "right_leaf",
    "photo",
)
ASSET_EXTENSION = ".png"

# Configuration
CONFIG_FILENAME = "sunflower_config.json"
DEFAULT_CAPTION = "Start again"
DEFAULT_GREETING = "Have a sunny day!"
DEFAULT_WINDOW_WIDTH: int = 540
DEFAULT_WINDOW_HEIGHT: int = 960
DEFAULT_FRAME_INTERVAL_MS: int = 16
DEFAULT_LOG_LEVEL = "INFO"
