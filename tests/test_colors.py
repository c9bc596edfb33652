import pytest

from checksim.art import DIVISORS, Check, L2_VIRTUAL_ID, build_l2_render_map, compose_l2, color_indexes, simulate_composite
from checksim.core.rng import random
from checksim.errors import InvalidDepth, MissingVirtualMapEntry


@pytest.fixture
def chain():
    """Keeper composited down to every depth, with a map covering every pointer."""

    check = Check.root(999)
    virtual_map = {0: Check.root(31)}
    levels = [check]
    for depth in range(7):
        burner = Check.root(1000 + depth)
        virtual_map[50 + depth] = burner
        check = simulate_composite(check, burner, 50 + depth)
        levels.append(check)
    return levels, virtual_map


def test_root_indexes():
    root = Check.root(999)
    result = color_indexes(0, root, {})
    assert len(result) == 80
    assert all(0 <= i < 80 for i in result)
    assert result[0] == random(999, 80)


def test_length_matches_divisor_at_every_depth(chain):
    levels, virtual_map = chain
    for depth, check in enumerate(levels):
        result = color_indexes(depth, check, virtual_map)
        assert len(result) == DIVISORS[depth]
        assert all(0 <= i < 80 for i in result)
    assert color_indexes(7, levels[7], virtual_map) == []


def test_deterministic(chain):
    levels, virtual_map = chain
    for depth in (1, 3, 5):
        assert color_indexes(depth, levels[depth], virtual_map) == color_indexes(depth, levels[depth], virtual_map)


def test_depth_one_draws_from_parents():
    keeper, burner = Check.root(100), Check.root(200)
    l1 = simulate_composite(keeper, burner, 5)
    palette = set(color_indexes(0, keeper, {})) | set(color_indexes(0, burner, {}))
    result = color_indexes(1, l1, {5: burner})
    if l1.gradient == 0:
        assert set(result) <= palette
    else:
        assert result[0] in palette


def test_missing_entry_names_the_pointer():
    keeper, burner = Check.root(100), Check.root(200)
    l1 = simulate_composite(keeper, burner, 5)
    with pytest.raises(MissingVirtualMapEntry) as info:
        color_indexes(1, l1, {})
    assert info.value.pointer == 5
    assert "5" in str(info.value)


def test_l2_resolves_with_render_map():
    a, b, c, d = (Check.root(s) for s in (100, 200, 300, 400))
    l1a = simulate_composite(a, b, 2)
    l1b = simulate_composite(c, d, 4)
    final = compose_l2(l1a, l1b)
    render_map = build_l2_render_map(l1a, l1b, b, d)
    result = color_indexes(2, final, render_map)
    assert len(result) == 20
    assert all(0 <= i < 80 for i in result)
    with pytest.raises(MissingVirtualMapEntry) as info:
        color_indexes(2, final, {2: b, 4: d})
    assert info.value.pointer == L2_VIRTUAL_ID


@pytest.mark.parametrize("depth", [-1, 8])
def test_invalid_depth(depth):
    with pytest.raises(InvalidDepth):
        color_indexes(depth, Check.root(1), {})
