"""Generator-level constants shared across modules."""
from __future__ import annotations

SERVICE_NAME = "ogp-generator"

FALLBACK_TITLE = "No Title"
FAILED_TITLE = "Failed to load"

MAX_TITLE_LINES = 3
LINE_HEIGHT_FACTOR = 1.2

# Upper bound for width and height accepted from the API and CLI.
MAX_CANVAS_SIDE = 4096

SITE_NAME_BOTTOM_OFFSET = 60
SITE_NAME_SCALE = 0.6
SITE_NAME_COLOR = (0, 0, 0, 178)

# (offset, color) pairs along the top-left to bottom-right diagonal.
GRADIENT_STOPS: tuple[tuple[float, str], ...] = (
    (0.0, "#667eea"),
    (0.5, "#764ba2"),
    (1.0, "#f093fb"),
)


class SHADOW:
    COLOR = (0, 0, 0, 77)
    OFFSET_X = 2
    OFFSET_Y = 2
    BLUR = 4
