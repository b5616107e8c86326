"""Game constants and configuration."""

# Window settings
# These are default/fallback values - actual size is calculated from screen
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 900
WINDOW_SCALE = 0.85  # Use 85% of screen height
FPS = 60

# Colors - Light theme
COLOR_BACKGROUND = (245, 245, 248)  # Almost white with hint of grey
COLOR_CANVAS = (255, 255, 255)
COLOR_CENTER_MARKER = (0, 122, 255)  # Blue dot at canvas center
COLOR_TEXT = (40, 40, 50)  # Dark text
COLOR_SLIDER_TRACK = (200, 200, 210)
COLOR_SLIDER_FILL = (100, 130, 180)
COLOR_SLIDER_KNOB = (255, 255, 255)

# Score colors
COLOR_SCORE_GREAT = (52, 199, 89)  # Green
COLOR_SCORE_GOOD = (255, 149, 0)  # Orange
COLOR_SCORE_BAD = (255, 59, 48)  # Red

# Canvas border gradient (top-left -> right)
BORDER_GRADIENT = [
    (255, 59, 48),   # Red
    (0, 122, 255),   # Blue
    (52, 199, 89),   # Green
    (255, 204, 0),   # Yellow
]
BORDER_WIDTH = 10
BORDER_RADIUS = 10

# Stroke color swatches (first one is the default)
STROKE_COLORS = [
    (255, 59, 48),   # Red
    (255, 149, 0),   # Orange
    (255, 204, 0),   # Yellow
    (52, 199, 89),   # Green
    (0, 122, 255),   # Blue
    (175, 82, 222),  # Purple
    (0, 0, 0),       # Black
]
DEFAULT_STROKE_COLOR = STROKE_COLORS[0]

# Line width slider
LINE_WIDTH_MIN = 1
LINE_WIDTH_MAX = 10
LINE_WIDTH_STEP = 1
DEFAULT_LINE_WIDTH = 5

# Scoring
CLOSED_TOLERANCE = 10.0  # Canvas units, checked per axis
DEFAULT_SAMPLE_RATE = 0.1  # Keep roughly 1 in 10 path points
SCORE_GREAT_THRESHOLD = 90  # Strictly above -> green
SCORE_GOOD_THRESHOLD = 70  # At or above -> orange

# High score celebration
HIGH_SCORE_SCALE = 1.5
HIGH_SCORE_HOLD = 1000  # ms before the label starts shrinking back
HIGH_SCORE_EASE = 1000  # ms to ease back to normal size

# Fonts
FONT_FILE = "Minecraft.ttf"  # Looked up in assets/, default font if missing
FONT_SIZE_TITLE = 32
FONT_SIZE_LABEL = 24
FONT_SIZE_SCORE = 28

# UI Layout
PADDING = 20
CENTER_MARKER_SIZE = 10
SWATCH_SIZE = 36
SWATCH_SPACING = 10
SLIDER_HEIGHT = 8
SLIDER_KNOB_RADIUS = 12
