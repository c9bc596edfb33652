"""Batch runner over ordered 4-tuples of same-count checks."""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Sequence

import yaml
from rich.console import Console
from rich.table import Table

from checksim.art.attributes import attribute_value, color_band_name, gradient_name, map_check_attributes
from checksim.art.check import Check
from checksim.art.composite import compose_l2, simulate_composite
from checksim.art.render import save_svg
from checksim.config import ConfigSchema
from checksim.core.profiling import timer
from checksim.core.rng import make_rng
from checksim.errors import ChecksimError
from checksim.engine.lineage import CompositeTree
from checksim.engine.metrics import existing_keys, save_permutations
from checksim.engine.parallel import chunked, parallel_map
from checksim.engine.records import RecordBatch

logger = logging.getLogger(__name__)
console = Console()

LOW_BAND_NAMES = frozenset({"Twenty", "Ten", "Five", "One"})


def perm4(n: int) -> int:
    """Number of ordered 4-tuples drawn from ``n`` tokens."""

    return n * (n - 1) * (n - 2) * (n - 3) if n >= 4 else 0


def iter_permutations(n: int, keeper: int | None = None) -> Iterator[tuple[int, int, int, int]]:
    """Ordered 4-tuples of ``range(n)``, optionally only those led by ``keeper``."""

    if keeper is None:
        return itertools.permutations(range(n), 4)
    rest = [i for i in range(n) if i != keeper]
    return ((keeper, i1, i2, i3) for i1, i2, i3 in itertools.permutations(rest, 3))


def is_eligible(check: Check) -> bool:
    """Low colour band or any gradient; unrevealed checks never qualify."""

    if not (check.is_revealed and check.has_many_checks):
        return False
    return color_band_name(check.color_band) in LOW_BAND_NAMES or gradient_name(check.gradient) != "None"


def rank_score(checks: Sequence[Check]) -> int:
    gradient_count = sum(1 for c in checks if c.gradient > 0)
    rarity = sum(max(0, c.color_band - 2) for c in checks)
    return gradient_count * 4 + rarity


def compute_permutation(checks: Sequence[Check], ids: Sequence[int]) -> dict:
    s0, s1, s2, s3 = checks
    l1a = simulate_composite(s0, s1, ids[1])
    l1b = simulate_composite(s2, s3, ids[3])
    attrs = map_check_attributes(compose_l2(l1a, l1b))
    abcd_checks = attribute_value(attrs, "Checks")
    return {
        "keeper_1_id": ids[0],
        "burner_1_id": ids[1],
        "keeper_2_id": ids[2],
        "burner_2_id": ids[3],
        "checks_count": s0.checks_count,
        "abcd_checks": int(abcd_checks) if abcd_checks is not None else None,
        "abcd_color_band": attribute_value(attrs, "Color Band"),
        "abcd_gradient": attribute_value(attrs, "Gradient"),
        "abcd_speed": attribute_value(attrs, "Speed"),
        "abcd_shift": attribute_value(attrs, "Shift"),
        "rank_score": rank_score(checks),
    }


@dataclass(frozen=True)
class _KeeperTask:
    keeper: int
    ids: tuple[int, ...]
    checks: tuple[Check, ...]
    skip: frozenset


def _evaluate_keeper(task: _KeeperTask) -> tuple[list[dict], int, list[str]]:
    rows: list[dict] = []
    failures: list[str] = []
    skipped = 0
    for slots in iter_permutations(len(task.ids), task.keeper):
        key = tuple(task.ids[i] for i in slots)
        if key in task.skip:
            skipped += 1
            continue
        try:
            rows.append(compute_permutation([task.checks[i] for i in slots], key))
        except ChecksimError as exc:
            failures.append(f"{key}: {exc}")
    return rows, skipped, failures


def group_by_count(checks: Dict[int, Check], *, eligible_only: bool = False) -> Dict[int, List[tuple[int, Check]]]:
    groups: Dict[int, List[tuple[int, Check]]] = {}
    for token_id, check in checks.items():
        if eligible_only and not is_eligible(check):
            continue
        groups.setdefault(check.checks_count, []).append((token_id, check))
    return groups


def run_permutations(config: ConfigSchema, batch: RecordBatch) -> Path:
    cfg = config.permutations
    run_dir = Path(config.outputs.run_dir) / f"permutations_{config.seed}"
    run_dir.mkdir(parents=True, exist_ok=True)
    out_path = run_dir / "permutations.csv"
    skip = frozenset(existing_keys(out_path)) if cfg.incremental else frozenset()
    if skip:
        console.log(f"incremental: {len(skip)} permutations already computed")

    groups = group_by_count(batch.checks, eligible_only=cfg.eligible_only)
    console.log(f"{len(batch)} checks -> {sum(len(g) for g in groups.values())} in {len(groups)} count groups")
    rng = make_rng(config.seed)
    records: list[dict] = []
    summary: list[dict] = []

    with timer("permutations"):
        for checks_count, members in sorted(groups.items(), reverse=True):
            n = len(members)
            if n < 4:
                console.log(f"checks_count={checks_count}: only {n} tokens, skipping (need >=4)")
                continue
            if cfg.shuffle:
                members = [members[int(i)] for i in rng.permutation(n)]
            if n > cfg.max_group_size:
                console.log(f"checks_count={checks_count}: {n} tokens, capping to {cfg.max_group_size}")
                members = members[: cfg.max_group_size]
                n = cfg.max_group_size
            limit = min(perm4(n), cfg.max_perms_per_group)
            console.log(f"checks_count={checks_count}: {n} tokens -> {perm4(n):,} permutations (limit {limit:,})")

            ids = tuple(tid for tid, _ in members)
            checks = tuple(check for _, check in members)
            group_rows: list[dict] = []
            skipped = 0
            failed = 0
            next_report = cfg.progress_interval
            for keepers in chunked(list(range(n)), cfg.workers):
                tasks = [_KeeperTask(i0, ids, checks, skip) for i0 in keepers]
                for rows, task_skipped, failures in parallel_map(_evaluate_keeper, tasks, cfg.workers):
                    group_rows.extend(rows)
                    skipped += task_skipped
                    failed += len(failures)
                    for failure in failures:
                        logger.warning("skipping %s", failure)
                if len(group_rows) >= next_report:
                    console.log(f"  {len(group_rows):,} / {limit:,} computed")
                    next_report = len(group_rows) + cfg.progress_interval
                if len(group_rows) >= limit:
                    break
            group_rows = group_rows[:limit]
            records.extend(group_rows)
            summary.append(
                {"checks_count": checks_count, "tokens": n, "computed": len(group_rows), "skipped": skipped, "failed": failed}
            )

    df = save_permutations(records, out_path, append=cfg.incremental)
    config_dict = config.model_dump(mode="json")
    with open(run_dir / "config.yaml", "w") as f:
        yaml.safe_dump(config_dict, f)

    if config.render.enabled and config.render.top_k and records:
        top = sorted(records, key=lambda r: r["rank_score"], reverse=True)[: config.render.top_k]
        console.log(f"rendering {len(top)} top-ranked composites")
        for row in top:
            key = (row["keeper_1_id"], row["burner_1_id"], row["keeper_2_id"], row["burner_2_id"])
            try:
                svg = CompositeTree.build(key, [batch.checks[k] for k in key]).render("ABCD")
            except ChecksimError as exc:
                logger.warning("skipping render of %s: %s", key, exc)
                continue
            save_svg(svg, run_dir / "renders" / f"{'-'.join(str(k) for k in key)}.svg")

    if config.outputs.summarize:
        table = Table(title="Permutation groups", show_lines=True)
        for column in ("checks_count", "tokens", "computed", "skipped", "failed"):
            table.add_column(column)
        for entry in summary:
            table.add_row(*(f"{entry[c]:,}" for c in ("checks_count", "tokens", "computed", "skipped", "failed")))
        console.print(table)
    console.print(f"{len(records):,} permutations computed ({len(df):,} stored) -> {run_dir}")
    return run_dir
