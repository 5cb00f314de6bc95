"""Text layout for the image card: word wrapping with line-count truncation."""

from __future__ import annotations

import textwrap

# Character widths tuned for the card's text area and font sizes. Changing
# either means re-tuning these by eye.
TITLE_WIDTH = 33
DESCRIPTION_WIDTH = 34
MAX_TITLE_LINES = 3
MAX_TOTAL_LINES = 13

ELLIPSIS = "..."


def wrap_text(text: str, max_width: int, max_lines: int) -> list[str]:
    """Wrap text at word boundaries and truncate to max_lines.

    When truncated, the last kept line ends with an ellipsis and still fits
    within max_width.
    """
    if max_lines <= 0:
        return []

    lines = textwrap.wrap(text, max_width)
    if len(lines) <= max_lines:
        return lines

    kept = lines[:max_lines]
    last = kept[-1].rstrip()
    if len(last) + len(ELLIPSIS) > max_width:
        last = last[: max_width - len(ELLIPSIS)]
    kept[-1] = last + ELLIPSIS
    return kept


def layout_card(title: str, description: str) -> tuple[list[str], list[str]]:
    """Return (title_lines, description_lines) sharing the total line budget."""
    title_lines = wrap_text(title, TITLE_WIDTH, MAX_TITLE_LINES)
    description_lines = wrap_text(
        description,
        DESCRIPTION_WIDTH,
        MAX_TOTAL_LINES - len(title_lines),
    )
    return title_lines, description_lines
