"""Generate markdown reports for permutation runs."""
from __future__ import annotations
from pathlib import Path
import json

from checksim.engine.metrics import load_permutations
from .filters import trait_counts


def write_report(run_dir: Path, *, top: int = 10):
    run_dir = Path(run_dir)
    csv_path = run_dir / "permutations.csv"
    if not csv_path.exists():
        return None
    df = load_permutations(csv_path)
    counts = trait_counts(df)
    (run_dir / "trait_counts.json").write_text(json.dumps(counts, indent=2))
    trait_section = []
    for name, values in counts.items():
        listing = ", ".join(f"{k}: {v}" for k, v in values.items()) or "n/a"
        trait_section.append(f"- **{name}**: {listing}")
    groups = df.groupby("checks_count").size().to_dict() if not df.empty else {}
    group_section = "\n".join(f"- {k} checks: {v} permutations" for k, v in sorted(groups.items(), reverse=True))
    best = df.sort_values("rank_score", ascending=False, kind="stable").head(top)
    try:
        best_table = best.to_markdown(index=False)
    except ImportError:
        best_table = best.to_string(index=False)
    report_path = run_dir / "report.md"
    report_path.write_text(
        "\n".join(
            [
                "# Permutation Report",
                "",
                f"Total permutations: {len(df)}",
                "",
                "## Groups",
                group_section,
                "",
                "## Final composite traits",
                "\n".join(trait_section),
                "",
                f"## Top {top} by rank score",
                best_table,
                "",
            ]
        )
    )
    return report_path
