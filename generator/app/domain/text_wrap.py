"""Greedy word wrapping against a pixel width."""
from __future__ import annotations

from typing import Callable

from generator.app.constants import MAX_TITLE_LINES

TextMeasure = Callable[[str], float]


def wrap_text(
    text: str,
    max_width: float,
    measure: TextMeasure,
    *,
    max_lines: int = MAX_TITLE_LINES,
) -> list[str]:
    """Split text on single spaces and pack words greedily into lines.

    A candidate line is accepted only when its measured width is strictly
    below max_width. A word wider than max_width still gets a line of its
    own; words are never split. Lines past max_lines are dropped without
    any marker. Empty text yields one empty line.
    """
    words = text.split(" ")
    lines: list[str] = []
    current = words[0]

    for word in words[1:]:
        candidate = f"{current} {word}"
        if measure(candidate) < max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)

    return lines[:max_lines]
