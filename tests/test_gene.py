"""Tests for genotypes, phenotype derivation, mutation and reproduction."""

import random

import pytest

from biomorph.gene import (
    DEPTH_LOCUS,
    HEADING_LOCUS,
    LOCUS_COUNT,
    Genotype,
    default_genotype,
    genotype_label,
    interpret_genotype,
    mutate_locus,
    reproduce,
)

from conftest import FixedRng


def assert_symmetric(genotype: Genotype) -> None:
    phenotype = interpret_genotype(genotype)
    dx, dy = phenotype.dx, phenotype.dy
    assert len(dx) == len(dy) == 8
    assert dx[2] == dx[6] == 0
    assert dx[1] == -dx[3]
    assert dx[0] == -dx[4]
    assert dx[7] == -dx[5]
    assert dy[0] == dy[4]
    assert dy[1] == dy[3]
    assert dy[7] == dy[5]


# ------------------------------------------------------------------
# Genotype record
# ------------------------------------------------------------------

class TestGenotype:

    def test_default_loci(self, adam):
        assert adam.loci() == (5, 5, 5, 5, 5, 5, 5, 5, 5, 4, 6)
        assert adam.depth == 4
        assert adam.heading == 6

    def test_from_loci_round_trip(self):
        loci = [1, -2, 3, 4, 5, 6, 7, 8, 9, 10, 2]
        genotype = Genotype.from_loci(loci)
        assert genotype.deflections == (1, -2, 3, 4, 5, 6, 7, 8, 9)
        assert genotype.depth == 10
        assert genotype.heading == 2
        assert list(genotype.loci()) == loci

    def test_from_loci_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            Genotype.from_loci([5] * 10)

    def test_rejects_non_integer_loci(self):
        with pytest.raises(ValueError):
            Genotype(deflections=(5.0,) * 9, depth=4, heading=6)
        with pytest.raises(ValueError):
            Genotype(deflections=(5,) * 9, depth=True, heading=6)

    def test_locus_accessor(self, adam):
        assert adam.locus(DEPTH_LOCUS) == 4
        assert adam.locus(HEADING_LOCUS) == 6
        with pytest.raises(IndexError):
            adam.locus(LOCUS_COUNT)

    def test_with_locus_leaves_original_untouched(self, adam):
        changed = adam.with_locus(3, -7)
        assert changed.locus(3) == -7
        assert adam.locus(3) == 5

    def test_is_frozen(self, adam):
        with pytest.raises(AttributeError):
            adam.depth = 9

    def test_label(self, adam):
        assert genotype_label(adam) == "[5, 5, 5, 5, 5, 5, 5, 5, 5, 4, 6]"


# ------------------------------------------------------------------
# Phenotype
# ------------------------------------------------------------------

class TestPhenotype:

    def test_default_deltas(self, adam):
        phenotype = interpret_genotype(adam)
        assert phenotype.dx == (-5, -5, 0, 5, 5, 5, 0, -5)
        assert phenotype.dy == (5, 5, 5, 5, 5, 5, 5, 5)

    def test_deltas_follow_loci(self):
        genotype = Genotype.from_loci([1, 2, 3, 99, 4, 6, 7, 8, 9, 4, 6])
        phenotype = interpret_genotype(genotype)
        assert phenotype.dx == (-2, -1, 0, 1, 2, 3, 0, -3)
        assert phenotype.dy == (7, 6, 4, 6, 7, 8, 9, 8)

    def test_locus_three_has_no_effect(self, adam):
        assert interpret_genotype(adam.with_locus(3, -40)) == interpret_genotype(adam)

    def test_symmetry_holds_for_random_genotypes(self, rng):
        genotype = default_genotype()
        for _ in range(30):
            genotype = reproduce(genotype, rng=rng)[rng.randrange(12)]
            assert_symmetric(genotype)


# ------------------------------------------------------------------
# Mutation
# ------------------------------------------------------------------

class TestMutation:

    def test_depth_grows_by_one(self, adam):
        genotype = adam
        for expected in range(5, 25):
            genotype = mutate_locus(genotype, DEPTH_LOCUS)
            assert genotype.depth == expected

    def test_heading_has_period_nine(self, adam):
        seen = []
        genotype = adam
        for _ in range(9):
            genotype = mutate_locus(genotype, HEADING_LOCUS)
            seen.append(genotype.heading)
        assert seen == [7, 8, 0, 1, 2, 3, 4, 5, 6]
        assert genotype.heading == adam.heading

    def test_deflection_delta_range(self, adam):
        assert mutate_locus(adam, 0, FixedRng(0)).locus(0) == -5
        assert mutate_locus(adam, 0, FixedRng(19)).locus(0) == 14

    def test_deflection_draws_from_twenty_outcomes(self, adam):
        fixed = FixedRng(10)
        assert mutate_locus(adam, 4, fixed).locus(4) == 5
        assert fixed.calls == [20]

    def test_deflections_are_unclamped(self, adam):
        genotype = adam
        for _ in range(10):
            genotype = mutate_locus(genotype, 2, FixedRng(0))
        assert genotype.locus(2) == 5 - 100

    def test_seeded_deltas_stay_in_range(self, adam, rng):
        for index in range(9):
            for _ in range(50):
                delta = mutate_locus(adam, index, rng).locus(index) - adam.locus(index)
                assert -10 <= delta <= 9

    def test_depth_and_heading_ignore_rng(self, adam):
        fixed = FixedRng(0)
        mutate_locus(adam, DEPTH_LOCUS, fixed)
        mutate_locus(adam, HEADING_LOCUS, fixed)
        assert fixed.calls == []

    def test_out_of_range_locus(self, adam):
        with pytest.raises(IndexError):
            mutate_locus(adam, 11)
        with pytest.raises(IndexError):
            mutate_locus(adam, -1)


# ------------------------------------------------------------------
# Reproduction
# ------------------------------------------------------------------

class TestReproduce:

    def test_litter_shape(self, adam, rng):
        children = reproduce(adam, 11, rng)
        assert len(children) == 12
        assert children[0] is adam

    def test_each_child_differs_at_one_locus(self, adam):
        children = reproduce(adam, 11, FixedRng(17))
        for k in range(1, 12):
            parent_loci = adam.loci()
            child_loci = children[k].loci()
            differing = [i for i in range(LOCUS_COUNT) if parent_loci[i] != child_loci[i]]
            assert differing == [k - 1]

    def test_random_children_only_touch_their_locus(self, rng):
        parent = Genotype.from_loci([3, -8, 12, 0, 7, 1, -4, 9, 2, 6, 8])
        children = reproduce(parent, rng=rng)
        for k, child in enumerate(children[1:], start=1):
            for index in range(LOCUS_COUNT):
                if index != k - 1:
                    assert child.locus(index) == parent.locus(index)
        assert children[10].depth == 7
        assert children[11].heading == 0

    def test_parent_is_not_mutated(self, adam, rng):
        reproduce(adam, rng=rng)
        assert adam == default_genotype()

    def test_same_seed_same_litter(self, adam):
        first = reproduce(adam, rng=random.Random(7))
        second = reproduce(adam, rng=random.Random(7))
        assert first == second
