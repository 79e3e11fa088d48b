"""Depth classification - Pure functions.

Maps an earthquake depth (km) to one of six fixed colors. The same
function colors the legend swatches, so markers and legend always agree.
"""

import math

# Ordered (upper_bound, color) table; a depth falls in the first bucket
# whose upper bound it is strictly below. Colors from rapidtables.com.
DEPTH_BUCKETS: tuple[tuple[float, str], ...] = (
    (10.0, "#B2FF66"),  # green
    (30.0, "#FFFF00"),  # yellow
    (50.0, "#FFB266"),  # orange
    (70.0, "#FF8000"),  # orange-red
    (90.0, "#FF6666"),  # red
    (math.inf, "#FF0000"),  # dark red
)

DEPTH_COLORS: tuple[str, ...] = tuple(color for _, color in DEPTH_BUCKETS)


def get_depth_color(depth: float) -> str:
    """Get the fill color for an earthquake depth.

    Pure function. Total over all floats: negative depths land in the
    shallowest bucket, and NaN or +inf land in the deepest.

    Args:
        depth: Depth in kilometers (positive downward)

    Returns:
        Hex color string (e.g., "#B2FF66")
    """
    for upper_bound, color in DEPTH_BUCKETS:
        if depth < upper_bound:
            return color
    return DEPTH_BUCKETS[-1][1]
