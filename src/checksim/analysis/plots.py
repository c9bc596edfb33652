"""Plotting helpers."""
from __future__ import annotations
from pathlib import Path
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from checksim.engine.metrics import load_permutations
from .filters import TRAIT_COLUMNS


def plot_traits(run_dir: Path):
    run_dir = Path(run_dir)
    csv_path = run_dir / "permutations.csv"
    if not csv_path.exists():
        return None
    df = load_permutations(csv_path)
    out_dir = run_dir / "plots"
    out_dir.mkdir(parents=True, exist_ok=True)

    fig, axes = plt.subplots(1, len(TRAIT_COLUMNS), figsize=(4 * len(TRAIT_COLUMNS), 4))
    for ax, (name, column) in zip(axes, TRAIT_COLUMNS.items()):
        counts = df[column].dropna().astype(str).value_counts()
        ax.bar(counts.index.tolist(), counts.values.tolist(), color="#E84AA9")
        ax.set_title(name)
        ax.tick_params(axis="x", rotation=45)
    fig.tight_layout()
    out = out_dir / "traits.png"
    fig.savefig(out)
    plt.close(fig)

    if "rank_score" in df.columns and not df.empty:
        fig2, ax2 = plt.subplots()
        ax2.hist(df["rank_score"], bins=max(1, int(df["rank_score"].max()) + 1), color="#2480BD")
        ax2.set_xlabel("rank score")
        ax2.set_ylabel("permutations")
        fig2.savefig(out_dir / "rank_score.png")
        plt.close(fig2)
    return out
