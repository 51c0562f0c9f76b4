# IN THIS FILE: ALL CONSTANTS (GRAMMARS, TRANSITION TABLES, SERVICE SETTINGS)
import os
import re

from rover.utils.enums import Heading

# -----------------------------------------------------------------------------
# 1. TEXT GRAMMARS
# -----------------------------------------------------------------------------
# Used with fullmatch(). ASCII so that only 0-9 count as digits.
# CPython refuses int() on longer digit strings by default
MAX_COORDINATE_DIGITS = 4300
START_STRING_PATTERN = re.compile(
    rf"(\d{{1,{MAX_COORDINATE_DIGITS}}}) (\d{{1,{MAX_COORDINATE_DIGITS}}}) ([NESW])", re.ASCII
)
INSTRUCTION_STRING_PATTERN = re.compile(r"[LRM]*")

# -----------------------------------------------------------------------------
# 2. TRANSITION TABLES (total over the four headings)
# -----------------------------------------------------------------------------
TURN_LEFT_MAP = {
    Heading.NORTH: Heading.WEST,
    Heading.WEST: Heading.SOUTH,
    Heading.SOUTH: Heading.EAST,
    Heading.EAST: Heading.NORTH,
}

TURN_RIGHT_MAP = {
    Heading.NORTH: Heading.EAST,
    Heading.EAST: Heading.SOUTH,
    Heading.SOUTH: Heading.WEST,
    Heading.WEST: Heading.NORTH,
}

# Unit vector (dx, dy) for a single Move
MOVE_VECTORS = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}

# -----------------------------------------------------------------------------
# 3. RANDOM PLACEMENT
# -----------------------------------------------------------------------------
RANDOM_MAX_X = 10       # exclusive upper bound for random start x
RANDOM_MAX_Y = 10       # exclusive upper bound for random start y
ROVER_ID_PREFIX = "rover"
ROVER_ID_SUFFIX_LENGTH = 7

# -----------------------------------------------------------------------------
# 4. SERVICE & DASHBOARD
# -----------------------------------------------------------------------------
API_HOST = os.environ.get("ROVER_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("ROVER_PORT", "5000"))
API_URL = os.environ.get("ROVER_API_URL", f"http://localhost:{API_PORT}")
API_TIMEOUT = 5         # seconds, dashboard -> service requests

GRID_SIZE = 10          # minimum visible cells on each axis in the dashboard
FRAMES_PER_COMMAND = 6  # playback frames between two consecutive states
MAX_TICKS = 20          # axis ticks per side before labels get thinned out
