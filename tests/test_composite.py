from dataclasses import replace

import pytest

from checksim.art import Check, L2_VIRTUAL_ID, build_l2_render_map, compose_l2, composite_genes, simulate_composite
from checksim.core.arith import min_gt0
from checksim.core.rng import keccak_uint
from checksim.errors import InvalidDepth


def test_single_composite_scenario():
    keeper, burner = Check.root(100, direction=1, speed=4), Check.root(200)
    result = simulate_composite(keeper, burner, 5)
    assert result.stored.divisor_index == 1
    assert result.checks_count == 40
    assert result.composite == 5
    assert result.stored.composites[0] == 5
    assert result.has_many_checks and not result.is_root
    assert (result.seed, result.direction, result.speed) == (100, 1, 4)
    gradient, color_band = composite_genes(keeper, burner)
    assert result.stored.color_bands[0] == color_band == result.color_band
    assert result.stored.gradients[0] == gradient == result.gradient


def test_keeper_is_not_mutated():
    keeper, burner = Check.root(100), Check.root(200)
    before = keeper.to_record()
    simulate_composite(keeper, burner, 5)
    simulate_composite(keeper, burner, 6)
    assert keeper.to_record() == before


def test_depth_chain_to_terminal():
    check = Check.root(7)
    burner = Check.root(8)
    expected_counts = [40, 20, 10, 5, 4, 1, 0]
    for depth in range(7):
        previous = check
        check = simulate_composite(check, burner, 100 + depth)
        assert check.stored.divisor_index == depth + 1
        assert check.checks_count == expected_counts[depth]
        assert check.stored.composites[depth] == 100 + depth
        assert check.composite == 100 + depth
        assert check.has_many_checks == (depth + 1 < 6)
        assert check.stored.composites[:depth] == previous.stored.composites[:depth]
        assert check.stored.color_bands[: min(depth, 5)] == previous.stored.color_bands[: min(depth, 5)]
    assert check.color_band == 6 and check.gradient == 0
    with pytest.raises(InvalidDepth):
        simulate_composite(check, burner, 1)


def test_gene_merge_bounds():
    seeds = [(100, 200), (1, 2), (300, 400), (5, 9)]
    for keeper_seed, burner_seed in seeds:
        for kg in range(7):
            for bg in range(7):
                for kb, bb in ((0, 6), (3, 4), (6, 6), (1, 0)):
                    keeper = replace(Check.root(keeper_seed), gradient=kg, color_band=kb)
                    burner = replace(Check.root(burner_seed), gradient=bg, color_band=bb)
                    gradient, band = composite_genes(keeper, burner)
                    assert 0 <= gradient <= 6 and 0 <= band <= 6
                    assert gradient in (kg, bg)


def test_smallest_nonzero_branch_keeps_the_nonzero_gradient():
    burner_seed = 1
    for keeper_seed in range(1, 2000):
        randomizer = keccak_uint(keeper_seed, burner_seed)
        if randomizer % 100 > 80 and randomizer % 2 == 0:
            break
    else:  # pragma: no cover
        pytest.fail("no seed pair hit the min_gt0 branch")
    keeper = replace(Check.root(keeper_seed), gradient=0)
    burner = replace(Check.root(burner_seed), gradient=3)
    gradient, _ = composite_genes(keeper, burner)
    assert gradient == min_gt0(0, 3) == 3


def test_compose_l2_scenario():
    a, b, c, d = (Check.root(s) for s in (100, 200, 300, 400))
    l1a = simulate_composite(a, b, 2)
    l1b = simulate_composite(c, d, 4)
    final = compose_l2(l1a, l1b)
    assert final.stored.divisor_index == 2
    assert final.checks_count == 20
    assert final.composite == L2_VIRTUAL_ID
    assert final.stored.composites[:2] == (2, L2_VIRTUAL_ID)
    assert final.seed == a.seed
    assert l1a.stored.composites[1] == 0


def test_build_l2_render_map_keys():
    a, b, c, d = (Check.root(s) for s in (100, 200, 300, 400))
    l1a = simulate_composite(a, b, 2)
    l1b = simulate_composite(c, d, 4)
    render_map = build_l2_render_map(l1a, l1b, b, d)
    assert render_map == {L2_VIRTUAL_ID: l1b, 2: b, 4: d}
