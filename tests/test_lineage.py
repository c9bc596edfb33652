import json

import pytest

from checksim.art import L2_VIRTUAL_ID, compose_l2, simulate_composite
from checksim.engine import CompositeTree


def test_tree_nodes(roots):
    ids = (1, 2, 3, 4)
    tree = CompositeTree.build(ids, [roots[i] for i in ids])
    assert list(tree.nodes) == ["A", "B", "C", "D", "L1a", "L1b", "ABCD"]
    l1a = simulate_composite(roots[1], roots[2], 2)
    l1b = simulate_composite(roots[3], roots[4], 4)
    assert tree.nodes["L1a"].check == l1a
    assert tree.final == compose_l2(l1a, l1b)
    assert tree.final.composite == L2_VIRTUAL_ID
    assert tree.nodes["ABCD"].parents == ("L1a", "L1b")
    assert tree.nodes["L1b"].render_map == {4: roots[4]}


def test_render_and_attributes(roots):
    tree = CompositeTree.build([1, 2, 3, 4], [roots[i] for i in (1, 2, 3, 4)])
    assert tree.render("L1a").count('<use href="#check"') == 40
    assert tree.render("ABCD").count('<use href="#check"') == 20
    checks = {a.trait_type: a.value for a in tree.attributes("ABCD")}
    assert checks["Checks"] == "20"


def test_write_svgs_and_dict(tmp_path, roots):
    tree = CompositeTree.build([5, 1, 4, 2], [roots[i] for i in (5, 1, 4, 2)])
    paths = tree.write_svgs(tmp_path)
    assert sorted(p.name for p in paths) == sorted(f"{label}.svg" for label in tree.nodes)
    document = json.loads(json.dumps(tree.to_dict()))
    assert document["ids"] == [5, 1, 4, 2]
    assert document["nodes"][0]["token_id"] == 5


def test_needs_four_checks(roots):
    with pytest.raises(ValueError):
        CompositeTree.build([1, 2, 3], [roots[1], roots[2], roots[3]])
