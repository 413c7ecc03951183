"""
Fixed colours, stroke widths and opacities shared by the views.
"""

# Applied to a view's emphasised opacity for marks outside an active brush,
# identically in every view.
DIM_FACTOR = 0.15

# Transition durations (ms) for Plotly layout transitions
STYLE_TRANSITION_MS = 300
ZOOM_RESET_TRANSITION_MS = 750

# Scatter
SCATTER_RADIUS = 4
SCATTER_HOVER_STROKE = "#333333"
SCATTER_HOVER_WIDTH = 2
SCATTER_SELECTED_STROKE = "#ff0000"
SCATTER_SELECTED_WIDTH = 3
SCATTER_OPACITY = 1.0
SCATTER_DIMMED_OPACITY = SCATTER_OPACITY * DIM_FACTOR
SCATTER_TICKS = 6

# Parallel coordinates
LINE_WIDTH = 1
LINE_OPACITY = 0.3
LINE_HOVER_WIDTH = 3
LINE_HOVER_OPACITY = 0.8
LINE_SELECTED_WIDTH = 3
LINE_SELECTED_OPACITY = 1.0
LINE_EMPHASIZED_OPACITY = 0.8
LINE_DIMMED_OPACITY = LINE_EMPHASIZED_OPACITY * DIM_FACTOR
PARALLEL_TICKS = 4

# Donut
LEGENDARY_COLOR = "#ff7f0e"
NORMAL_COLOR = "#1f77b4"
DONUT_INNER_RADIUS = 40
DONUT_OUTER_RADIUS = 80
