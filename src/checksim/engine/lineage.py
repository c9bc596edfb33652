"""Composite tree for one ordered 4-tuple: A+B -> L1a, C+D -> L1b, L1a+L1b -> ABCD."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Sequence

from checksim.art.attributes import Attribute, map_check_attributes
from checksim.art.check import Check
from checksim.art.composite import build_l2_render_map, compose_l2, simulate_composite
from checksim.art.render import generate_svg, save_svg

LEAF_LABELS = ("A", "B", "C", "D")


@dataclass
class TreeNode:
    label: str
    check: Check
    render_map: Mapping[int, Check]
    token_id: int | None = None
    parents: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "token_id": self.token_id,
            "parents": list(self.parents),
            "check_struct": self.check.to_record(),
            "attributes": [a.to_dict() for a in map_check_attributes(self.check)],
        }


@dataclass
class CompositeTree:
    """All intermediate checks of an L2 composite, each with the map needed to render it.

    Rendering is explicit: :meth:`render` recomputes the SVG on every call.
    """

    ids: tuple[int, int, int, int]
    nodes: Dict[str, TreeNode] = field(default_factory=dict)

    @classmethod
    def build(cls, ids: Sequence[int], checks: Sequence[Check]) -> "CompositeTree":
        if len(ids) != 4 or len(checks) != 4:
            raise ValueError("a composite tree needs exactly four checks")
        a, b, c, d = checks
        l1a = simulate_composite(a, b, ids[1])
        l1b = simulate_composite(c, d, ids[3])
        abcd = compose_l2(l1a, l1b)
        tree = cls(ids=tuple(int(i) for i in ids))
        for label, token_id, check in zip(LEAF_LABELS, ids, checks):
            tree.nodes[label] = TreeNode(label, check, {}, token_id=int(token_id))
        tree.nodes["L1a"] = TreeNode("L1a", l1a, {ids[1]: b}, parents=("A", "B"))
        tree.nodes["L1b"] = TreeNode("L1b", l1b, {ids[3]: d}, parents=("C", "D"))
        tree.nodes["ABCD"] = TreeNode("ABCD", abcd, build_l2_render_map(l1a, l1b, b, d), parents=("L1a", "L1b"))
        return tree

    @property
    def final(self) -> Check:
        return self.nodes["ABCD"].check

    def render(self, label: str) -> str:
        node = self.nodes[label]
        return generate_svg(node.check, node.render_map)

    def attributes(self, label: str) -> List[Attribute]:
        return map_check_attributes(self.nodes[label].check)

    def to_dict(self) -> dict:
        return {"ids": list(self.ids), "nodes": [node.to_dict() for node in self.nodes.values()]}

    def write_svgs(self, out_dir: Path) -> list[Path]:
        out_dir = Path(out_dir)
        return [save_svg(self.render(label), out_dir / f"{label}.svg") for label in self.nodes]
