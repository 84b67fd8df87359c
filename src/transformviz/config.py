"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (canvas size, slider range, colours)
   from being scattered throughout the widgets.
2. Consistency: The coordinate convention is decided once here and read by
   every component that converts between pixels and plane coordinates.

Exports:
    CANVAS_WIDTH, CANVAS_HEIGHT (int): Size of the drawing surface in pixels.
    MATRIX_MIN, MATRIX_MAX (float): Allowed range of a single matrix cell.
    SLIDER_STEP (float): Granularity of the matrix sliders.
    Y_AXIS_UP (bool): Plane y-axis points up on screen when True.
"""

# Application identity (used by QCoreApplication)
ORG_ID = "transformviz"
APP_ID = "transformviz"
VISIBLE_APP_NAME = "Intro to Linear Algebra"

# Drawing surface
CANVAS_WIDTH: int = 500
CANVAS_HEIGHT: int = 500

# Plane y grows upwards; device y grows downwards, so the mapper flips it.
Y_AXIS_UP: bool = True

# Matrix controls
MATRIX_MIN: float = -5.0
MATRIX_MAX: float = 5.0
SLIDER_STEP: float = 0.1
DISPLAY_DECIMALS: int = 2

# Render style
BACKGROUND_COLOR = "white"
AXIS_COLOR = "black"
AXIS_WIDTH: float = 1.0
ORIGINAL_COLOR = "blue"
TRANSFORMED_COLOR = "red"
TRANSFORMED_WIDTH: float = 2.0
MARKER_RADIUS: float = 5.0

# Pointer handling: "drag" paints a trail while the button is held,
# "click" adds exactly one point per press.
DEFAULT_INTERACTION_MODE = "drag"
