"""
Configuration file for the line rasterization tool.

Holds the defaults for both rasterization modes, the output locations and
the chart/table appearance.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# "basic" (slope-intercept) or "dda"
DEFAULT_MODE = "basic"


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"
LOG_FOLDER = "logs"
LOG_KEEP_COUNT = 5


# ===============================================================
# RASTERIZER PARAMETERS
# ===============================================================

BASIC_X_STEP = 1.0                 # x increment of the slope-intercept walk


# ===============================================================
# INPUT HANDLING
# ===============================================================

MISSING_INPUT_MESSAGE = "Please fill in all fields."


# ---------------------------------------------------------------
# CHART GEOMETRY (400x200 canvas)
# ---------------------------------------------------------------

CHART_WIDTH = 400
CHART_HEIGHT = 200
CHART_MARGIN = 30
CHART_MAX_TICKS = 8
CHART_POINT_RADIUS = 3
CHART_LINE_THICKNESS = 2
CHART_TITLE = "Line Graph"


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

COLOR_BACKGROUND = (255, 255, 255)
COLOR_AXIS = (80, 80, 80)
COLOR_TEXT = (40, 40, 40)
COLOR_SERIES = (192, 192, 75)      # rgba(75, 192, 192) in RGB


# ---------------------------------------------------------------
# RESULT TABLES
# ---------------------------------------------------------------

TABLE_TITLES = {
    "basic": "Basic Line Results",
    "dda": "DDA Results",
}
BASIC_Y_DECIMALS = 4


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary, so that
    rasterizers and the display layer only import one name.
    """

    base = {
        "DEFAULT_MODE": DEFAULT_MODE,
        "OUTPUT_FOLDER": OUTPUT_FOLDER,
        "LOG_FOLDER": LOG_FOLDER,
        "LOG_KEEP_COUNT": LOG_KEEP_COUNT,
        "BASIC_X_STEP": BASIC_X_STEP,
        "MISSING_INPUT_MESSAGE": MISSING_INPUT_MESSAGE,
        "CHART_WIDTH": CHART_WIDTH,
        "CHART_HEIGHT": CHART_HEIGHT,
        "CHART_MARGIN": CHART_MARGIN,
        "CHART_MAX_TICKS": CHART_MAX_TICKS,
        "CHART_POINT_RADIUS": CHART_POINT_RADIUS,
        "CHART_LINE_THICKNESS": CHART_LINE_THICKNESS,
        "CHART_TITLE": CHART_TITLE,
        "COLOR_BACKGROUND": COLOR_BACKGROUND,
        "COLOR_AXIS": COLOR_AXIS,
        "COLOR_TEXT": COLOR_TEXT,
        "COLOR_SERIES": COLOR_SERIES,
        "TABLE_TITLES": dict(TABLE_TITLES),
        "BASIC_Y_DECIMALS": BASIC_Y_DECIMALS,
    }

    # Plot area must stay positive
    base["PLOT_WIDTH"] = max(1, CHART_WIDTH - 2 * CHART_MARGIN)
    base["PLOT_HEIGHT"] = max(1, CHART_HEIGHT - 2 * CHART_MARGIN)

    return base
