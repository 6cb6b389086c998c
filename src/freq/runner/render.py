"""Bar chart rendering of ranked tokens."""

from collections.abc import Sequence

from ..index import RankedToken

BAR_CELL = "\u2591"  # light shade
AXIS_VERTICAL = "\u2502"
AXIS_CORNER = "\u2514"
AXIS_HORIZONTAL = "\u2500"


def format_percentage(frequency: int, total: int) -> str:
    """Format a token's share of all tokens, e.g. '42.00%'."""
    return f"{100 * frequency / total:.2f}%"


def bar_length(frequency: int, denominator: int, space: int) -> int:
    """Number of bar cells for a frequency, out of ``space`` cells for ``denominator``."""
    if denominator <= 0 or space <= 0:
        return 0
    return space * frequency // denominator


def render_chart(
    ranked: Sequence[RankedToken],
    total: int,
    scaled: bool = False,
    width: int = 80,
) -> str:
    """Render ranked tokens as a horizontal bar chart.

    Each token gets two bar rows and a blank spacer row; the chart closes with a
    horizontal axis spanning the full width. Unscaled bars are proportional
    to the token's share of ``total``; scaled bars are proportional to the
    top token's frequency, so the first bar fills the available space.

    Args:
        ranked: Tokens in rank order, as returned by ``extract_top``.
        total: Total number of tokens ingested.
        scaled: Scale bars relative to the top token.
        width: Total chart width in columns.

    Returns:
        The chart text without a trailing newline, or an empty string if
        there is nothing to show.
    """
    if not ranked or total <= 0:
        return ""

    label_width = max(len(item.token) for item in ranked) + 1
    pad = " " * label_width
    top_percentage = format_percentage(ranked[0].frequency, total)
    space = max(width - label_width - 1 - len(top_percentage), 0)
    denominator = ranked[0].frequency if scaled else total

    lines = []
    for item in ranked:
        bar = BAR_CELL * bar_length(item.frequency, denominator, space)
        percentage = format_percentage(item.frequency, total)
        lines.append(f"{item.token.ljust(label_width)}{AXIS_VERTICAL}{bar}{percentage}")
        lines.append(f"{pad}{AXIS_VERTICAL}{bar}")
        lines.append(pad)

    axis_length = max(width - label_width - 1, 0)
    lines.append(f"{pad}{AXIS_CORNER}{AXIS_HORIZONTAL * axis_length}")
    return "\n".join(lines)
