"""Depth legend - Pure functions.

Builds the static legend describing the depth buckets. Boundaries are
fixed constants and never depend on the fetched dataset.
"""

from dataclasses import dataclass

from quakemap.core.depth import get_depth_color


LEGEND_DEPTH_LIMITS: tuple[int, ...] = (-10, 10, 30, 50, 70, 90)

LEGEND_POSITIONS = ("topleft", "topright", "bottomleft", "bottomright")

EN_DASH = "–"


@dataclass(frozen=True)
class LegendEntry:
    """One legend row.

    Attributes:
        lower: Lower depth limit (km)
        upper: Upper depth limit (km), None for the open-ended top bucket
        color: Swatch color
        label: Human-readable range, e.g. "10–30" or "90+"
    """
    lower: float
    upper: float | None
    color: str
    label: str


def format_range_label(lower: float, upper: float | None) -> str:
    """Format a depth range label.

    Pure function.

    Args:
        lower: Lower limit
        upper: Upper limit, or None for the last bucket

    Returns:
        "lower–upper", or "lower+" when there is no upper limit
    """
    if upper is None:
        return f"{lower}+"
    return f"{lower}{EN_DASH}{upper}"


def build_legend_entries(
    limits: tuple[int, ...] = LEGEND_DEPTH_LIMITS,
) -> list[LegendEntry]:
    """Build one legend entry per depth limit.

    Pure function. Each entry is colored by classifying its lower limit.

    Args:
        limits: Ascending depth limits

    Returns:
        List of LegendEntry, one per limit
    """
    entries = []
    for i, lower in enumerate(limits):
        upper = limits[i + 1] if i + 1 < len(limits) else None
        entries.append(LegendEntry(
            lower=lower,
            upper=upper,
            color=get_depth_color(lower),
            label=format_range_label(lower, upper),
        ))
    return entries


def render_legend_html(entries: list[LegendEntry]) -> str:
    """Render legend entries as the inner HTML of the legend box.

    Pure function.
    """
    items = []
    for entry in entries:
        suffix = "<br>" if entry.upper is not None else ""
        items.append(
            f'<li style="background-color: {entry.color}">{entry.label}{suffix}</li>'
        )
    return "".join(items)
