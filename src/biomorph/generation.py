"""Generations of biomorphs laid out in a grid of display panels."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .gene import Genotype, genotype_label, reproduce

log = logging.getLogger("biomorph.generation")

GRID_COLUMNS = 4
GRID_ROWS = 3
LITTER_SIZE = GRID_COLUMNS * GRID_ROWS - 1

Rect = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Panel:
    x: int
    y: int
    width: int
    height: int
    genotype: Genotype

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def center(self) -> Tuple[int, int]:
        return self.x + self.width // 2, self.y + self.height // 2

    def rect(self) -> Rect:
        return self.x, self.y, self.width, self.height


@dataclass(frozen=True)
class Generation:
    index: int
    parent: Genotype
    panels: Tuple[Panel, ...]


def layout_grid(width: int, height: int, columns: int = GRID_COLUMNS, rows: int = GRID_ROWS) -> List[Rect]:
    """Split the display area into row-major rectangles.

    Edges sit at ``width * c // columns`` and ``height * r // rows`` so the
    rectangles tile the whole area even when it does not divide evenly.
    """
    rects: List[Rect] = []
    for row in range(rows):
        top = height * row // rows
        bottom = height * (row + 1) // rows
        for column in range(columns):
            left = width * column // columns
            right = width * (column + 1) // columns
            rects.append((left, top, right - left, bottom - top))
    return rects


class GenerationManager:
    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None) -> None:
        self.width = width
        self.height = height
        self.rng = rng
        self._current: Optional[Generation] = None

    @property
    def current(self) -> Optional[Generation]:
        return self._current

    @property
    def panels(self) -> Tuple[Panel, ...]:
        if self._current is None:
            return ()
        return self._current.panels

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, parent: Genotype) -> Tuple[Panel, ...]:
        genotypes = reproduce(parent, LITTER_SIZE, self.rng)
        rects = layout_grid(self.width, self.height)
        panels = tuple(
            Panel(x, y, width, height, genotype)
            for (x, y, width, height), genotype in zip(rects, genotypes)
        )
        index = 0 if self._current is None else self._current.index + 1
        self._current = Generation(index=index, parent=parent, panels=panels)
        log.info("Generation %d bred from %s", index, genotype_label(parent))
        return panels

    def select_at(self, x: float, y: float) -> bool:
        genotype = self.genotype_at(x, y)
        if genotype is None:
            log.debug("Click at (%s, %s) missed every panel", x, y)
            return False
        self.select(genotype)
        return True

    # ------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------

    def panel_at(self, x: float, y: float) -> Optional[Panel]:
        for panel in self.panels:
            if panel.contains(x, y):
                return panel
        return None

    def genotype_at(self, x: float, y: float) -> Optional[Genotype]:
        panel = self.panel_at(x, y)
        return panel.genotype if panel is not None else None
