"""
Configuration file for the table-grid scanner.

Modules should read tuning values using the get_active_params() function.
Constants that define identity (VERTEX_TOLERANCE) are imported directly.
"""

# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

SELECTED_IMAGE_PATTERN = "selected/*.png"
OUTPUT_FOLDER = "output"


# ---------------------------------------------------------------
# SCAN START (batch mode)
# ---------------------------------------------------------------

# start point as a fraction of (width, height); centre of the page
START_POINT_RATIO = (0.5, 0.5)
START_DIRECTION = "TOP_BOTTOM"


# ---------------------------------------------------------------
# PROBE PARAMETERS
# ---------------------------------------------------------------

COLOR_TOLERANCE = 50               # per-channel difference counted as "same"
INITIAL_SCAN_WIDTH = 20            # strip size before line width is known
SCAN_WIDTH_FACTOR = 5              # strip size = factor * line width
PROVISIONAL_WIDTH_DIVISOR = 5      # line width guess = scan width / divisor
FOOTPRINT_FACTOR = 2               # skip factor * line width past a vertex


# ---------------------------------------------------------------
# VERTEX IDENTITY
# ---------------------------------------------------------------

VERTEX_TOLERANCE = 10              # px, also the hash quantization grid


# ---------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------

VERBOSE = False


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

COLOR_START = (255, 255, 0)   # start point - cyan
COLOR_VERTEX = (255, 0, 0)    # vertices - blue
COLOR_CELL = (0, 255, 0)      # cell outlines - green


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary, so the
    detectors only import a single accessor.
    """

    params = {
        "COLOR_TOLERANCE": COLOR_TOLERANCE,
        "INITIAL_SCAN_WIDTH": INITIAL_SCAN_WIDTH,
        "SCAN_WIDTH_FACTOR": SCAN_WIDTH_FACTOR,
        "PROVISIONAL_WIDTH_DIVISOR": PROVISIONAL_WIDTH_DIVISOR,
        "FOOTPRINT_FACTOR": FOOTPRINT_FACTOR,
        "VERTEX_TOLERANCE": VERTEX_TOLERANCE,
        "VERBOSE": VERBOSE,
    }

    return params
