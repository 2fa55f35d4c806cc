"""Recursive expansion of a genotype into coloured line segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .gene import Genotype, interpret_genotype

Color = Tuple[int, int, int]

COMPASS_POINTS = 8

WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)
BLUE: Color = (0, 0, 255)
GREEN: Color = (0, 255, 0)
RED: Color = (255, 0, 0)

# indexed by the remaining depth of the branch being drawn
BRANCH_PALETTE: Tuple[Color, ...] = (WHITE, YELLOW, BLUE, GREEN, WHITE)
DEFAULT_BRANCH_COLOR: Color = RED


@dataclass(frozen=True)
class Segment:
    x1: int
    y1: int
    x2: int
    y2: int
    color: Color


def branch_color(depth: int) -> Color:
    if 0 <= depth < len(BRANCH_PALETTE):
        return BRANCH_PALETTE[depth]
    return DEFAULT_BRANCH_COLOR


def normalise_heading(heading: int) -> int:
    # headings stay within one turn of the compass, so one correction is enough
    if heading < 0:
        return heading + COMPASS_POINTS
    if heading >= COMPASS_POINTS:
        return heading - COMPASS_POINTS
    return heading


def segment_count(depth: int) -> int:
    return 2 ** (depth + 1) - 1


def expand(
    x: int,
    y: int,
    depth: int,
    heading: int,
    dx: Sequence[int],
    dy: Sequence[int],
) -> List[Segment]:
    """Expand one branch and all of its descendants, in pre-order.

    Screen y grows downward, so the tree grows upward by subtracting ``dy``.
    A depth-0 call still emits its (zero-length) segment.
    """
    segments: List[Segment] = []
    _expand_into(segments, x, y, depth, heading, dx, dy)
    return segments


def _expand_into(
    segments: List[Segment],
    x: int,
    y: int,
    depth: int,
    heading: int,
    dx: Sequence[int],
    dy: Sequence[int],
) -> None:
    heading = normalise_heading(heading)
    x_new = x + depth * dx[heading]
    y_new = y - depth * dy[heading]
    segments.append(Segment(x, y, x_new, y_new, branch_color(depth)))
    if depth > 0:
        _expand_into(segments, x_new, y_new, depth - 1, heading - 1, dx, dy)
        _expand_into(segments, x_new, y_new, depth - 1, heading + 1, dx, dy)


def expand_genotype(genotype: Genotype, x: int, y: int) -> List[Segment]:
    phenotype = interpret_genotype(genotype)
    return expand(x, y, genotype.depth, genotype.heading, phenotype.dx, phenotype.dy)
