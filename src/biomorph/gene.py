"""Biomorph genotypes.

A genotype is eleven integers. Loci 0-8 are branch deflections, locus 9 is the
recursion depth and locus 10 is the heading of the root branch. The derived
phenotype is a pair of eight-entry delta tables that mirror left and right, so
every biomorph is bilaterally symmetric.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence, Tuple

# ---------------------------------------------------------------------------
# Genetic constants
# ---------------------------------------------------------------------------

LOCUS_COUNT = 11
DEFLECTION_COUNT = 9
DEPTH_LOCUS = 9
HEADING_LOCUS = 10
# a heading above this value resets to 0, giving nine distinct headings
HEADING_WRAP = 8
MUTATION_SPAN = 20
MUTATION_OFFSET = 10
DEFAULT_LITTER_SIZE = 11

DEFAULT_DEFLECTION = 5
DEFAULT_DEPTH = 4
DEFAULT_HEADING = 6


# ---------------------------------------------------------------------------
# Genotype and phenotype records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Genotype:
    deflections: Tuple[int, ...]
    depth: int
    heading: int

    def __post_init__(self) -> None:
        deflections = tuple(self.deflections)
        if len(deflections) != DEFLECTION_COUNT:
            raise ValueError(f"expected {DEFLECTION_COUNT} deflections, got {len(deflections)}")
        for value in deflections + (self.depth, self.heading):
            if not _is_int(value):
                raise ValueError(f"loci must be integers, got {value!r}")
        object.__setattr__(self, "deflections", deflections)

    @classmethod
    def from_loci(cls, loci: Sequence[int]) -> "Genotype":
        values = list(loci)
        if len(values) != LOCUS_COUNT:
            raise ValueError(f"expected {LOCUS_COUNT} loci, got {len(values)}")
        return cls(
            deflections=tuple(values[:DEFLECTION_COUNT]),
            depth=values[DEPTH_LOCUS],
            heading=values[HEADING_LOCUS],
        )

    def loci(self) -> Tuple[int, ...]:
        return self.deflections + (self.depth, self.heading)

    def locus(self, index: int) -> int:
        if not 0 <= index < LOCUS_COUNT:
            raise IndexError(f"locus {index} out of range")
        return self.loci()[index]

    def with_locus(self, index: int, value: int) -> "Genotype":
        if index == DEPTH_LOCUS:
            return replace(self, depth=value)
        if index == HEADING_LOCUS:
            return replace(self, heading=value)
        if not 0 <= index < DEFLECTION_COUNT:
            raise IndexError(f"locus {index} out of range")
        deflections = list(self.deflections)
        deflections[index] = value
        return replace(self, deflections=tuple(deflections))


@dataclass(frozen=True)
class Phenotype:
    dx: Tuple[int, ...]
    dy: Tuple[int, ...]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Genetic interpretation helpers
# ---------------------------------------------------------------------------


def default_genotype() -> Genotype:
    return Genotype(
        deflections=(DEFAULT_DEFLECTION,) * DEFLECTION_COUNT,
        depth=DEFAULT_DEPTH,
        heading=DEFAULT_HEADING,
    )


def interpret_genotype(genotype: Genotype) -> Phenotype:
    g = genotype.deflections
    dx: List[int] = [0] * 8
    dx[3] = g[0]
    dx[4] = g[1]
    dx[5] = g[2]
    dx[1] = -dx[3]
    dx[0] = -dx[4]
    dx[7] = -dx[5]
    # locus 3 is carried but never read
    dy: List[int] = [0] * 8
    dy[2] = g[4]
    dy[3] = g[5]
    dy[4] = g[6]
    dy[5] = g[7]
    dy[6] = g[8]
    dy[0] = dy[4]
    dy[1] = dy[3]
    dy[7] = dy[5]
    return Phenotype(dx=tuple(dx), dy=tuple(dy))


def genotype_label(genotype: Genotype) -> str:
    return "[" + ", ".join(str(value) for value in genotype.loci()) + "]"


# ---------------------------------------------------------------------------
# Mutation and reproduction
# ---------------------------------------------------------------------------


def mutate_locus(genotype: Genotype, index: int, rng: Optional[random.Random] = None) -> Genotype:
    """Return a copy of ``genotype`` with exactly one locus mutated.

    Depth only ever grows by one. Heading steps by one and wraps to 0 once it
    passes ``HEADING_WRAP``. Deflections drift by a uniform integer in
    [-10, 9] and are never clamped.
    """
    if not 0 <= index < LOCUS_COUNT:
        raise IndexError(f"locus {index} out of range")
    if index == DEPTH_LOCUS:
        return genotype.with_locus(index, genotype.depth + 1)
    if index == HEADING_LOCUS:
        heading = genotype.heading + 1
        if heading > HEADING_WRAP:
            heading = 0
        return genotype.with_locus(index, heading)
    source = rng or random
    delta = source.randrange(MUTATION_SPAN) - MUTATION_OFFSET
    return genotype.with_locus(index, genotype.locus(index) + delta)


def reproduce(
    parent: Genotype,
    litter_size: int = DEFAULT_LITTER_SIZE,
    rng: Optional[random.Random] = None,
) -> List[Genotype]:
    """Asexually reproduce ``parent``; the parent itself is kept at index 0.

    Offspring ``k`` (1-based) differs from the parent only at locus ``k - 1``.
    """
    children: List[Genotype] = [parent]
    for index in range(litter_size):
        children.append(mutate_locus(parent, index, rng))
    return children
