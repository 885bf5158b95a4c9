"""
ASCII rendering of histogram buckets.

Layout for ``width=40`` (every line is exactly ``width`` columns):

    value|---------------------------- count
        1|@@@@@                           10
        2|@@@@@@@@@@                      20
         ~
       16|@@@@@@@@@@@@@@@@@@@@@@@@@@@@    56
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from pyaggregate.errors import ConfigurationError

DEFAULT_WIDTH = 80
DEFAULT_FILL = "@"
SKIP_MARKER = "~"
LABEL_DIGITS = 12

VALUE_HEADER = "value"
COUNT_HEADER = "count"


class Bucket(NamedTuple):
    """A histogram bucket: the value it represents and its sample count."""

    value: float
    count: int


def format_value(value: float) -> str:
    """
    Decimal label for a bucket value.

    Floats are rounded to LABEL_DIGITS places so that accumulated edges
    such as 0.1 * 3 print as 0.3; integral floats drop the ``.0``.
    """
    if isinstance(value, float):
        value = round(value, LABEL_DIGITS)
        if value.is_integer():
            return str(int(value))
    return str(value)


def render_histogram(
    buckets: Sequence[Bucket],
    width: int = DEFAULT_WIDTH,
    fill: str = DEFAULT_FILL,
) -> str:
    """
    Render the non-empty buckets as a bar chart.

    Args:
        buckets: Every bucket in ascending order, empty ones included
        width: Total line width in columns
        fill: Single character used to draw bars

    Returns:
        Header line followed by one row per non-empty bucket. A run of
        empty buckets between two rows collapses to a single ``~`` line.

    Raises:
        ConfigurationError: ``fill`` is not one character, or ``width``
            leaves no room for the bar column.
    """
    if len(fill) != 1:
        raise ConfigurationError(f"fill must be a single character, got {fill!r}")

    shown = [(index, format_value(b.value), b.count) for index, b in enumerate(buckets) if b.count]
    max_count = max((count for _, _, count in shown), default=0)

    value_width = max([len(VALUE_HEADER)] + [len(label) for _, label, _ in shown])
    count_width = max(len(COUNT_HEADER), len(str(max_count)))
    # Separators are the "|" after the value and the space before the count
    bar_width = width - value_width - 2 - count_width
    if bar_width < 1:
        raise ConfigurationError(f"width {width} leaves no room for the histogram bars")

    weight = max(max_count / bar_width, 1.0)

    lines = [f"{VALUE_HEADER:>{value_width}}|{'-' * bar_width} {COUNT_HEADER:>{count_width}}"]
    prev_index = None
    for index, label, count in shown:
        if prev_index is not None and index != prev_index + 1:
            lines.append(SKIP_MARKER.rjust(value_width + 1))
        prev_index = index

        bar = fill * int(count / weight)
        lines.append(f"{label:>{value_width}}|{bar:<{bar_width}} {count:>{count_width}}")

    return "\n".join(lines)
