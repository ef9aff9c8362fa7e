"""
Context-window search over ordered lines.

Free text rarely puts a name and its title on the same line. When a bare
name is found, the nearby lines are searched for the missing attribute:
the line itself first, then the lines after it, then the lines before it.
"""

from __future__ import annotations

from collections.abc import Callable, Container, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class ContextMatch:
    """A line found near a pivot.

    Attributes:
        index: Position of the matching line.
        text: The matching line.
        offset: Signed distance from the pivot (0 is the pivot itself).
    """

    index: int
    text: str
    offset: int


def context_indices(pivot: int, window: int, length: int) -> Iterator[int]:
    """Yield candidate indices in search priority order.

    The pivot first, then pivot+1 .. pivot+window, then pivot-1 .. pivot-window,
    clamped to [0, length).
    """
    if 0 <= pivot < length:
        yield pivot
    for index in range(pivot + 1, min(pivot + window, length - 1) + 1):
        yield index
    for index in range(pivot - 1, max(pivot - window, 0) - 1, -1):
        if index < length:
            yield index


def find_in_context(
    lines: Sequence[str],
    pivot: int,
    predicate: Callable[[str], bool],
    window: int = 2,
    include_pivot: bool = True,
    exclude: Container[int] = (),
) -> ContextMatch | None:
    """Return the first line near ``pivot`` satisfying ``predicate``.

    Args:
        lines: Ordered lines.
        pivot: Index of the line the search is centred on.
        predicate: Test applied to each candidate line.
        window: How many lines to look forward and backward.
        include_pivot: Whether the pivot line itself is a candidate.
        exclude: Indices that must not match (already consumed lines).

    Returns:
        The first match in priority order, or None.
    """
    for index in context_indices(pivot, max(window, 0), len(lines)):
        if (index == pivot and not include_pivot) or index in exclude:
            continue
        text = lines[index]
        if predicate(text):
            return ContextMatch(index=index, text=text, offset=index - pivot)
    return None
