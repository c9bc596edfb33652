"""Permutation row aggregation and CSV output."""
from __future__ import annotations
from pathlib import Path
import pandas as pd

PERMUTATION_KEY = ["keeper_1_id", "burner_1_id", "keeper_2_id", "burner_2_id"]
PERMUTATION_COLUMNS = PERMUTATION_KEY + [
    "checks_count",
    "abcd_checks",
    "abcd_color_band",
    "abcd_gradient",
    "abcd_speed",
    "abcd_shift",
    "rank_score",
]


def save_permutations(records: list[dict], path: Path, *, append: bool = False) -> pd.DataFrame:
    df = pd.DataFrame(records, columns=PERMUTATION_COLUMNS)
    path.parent.mkdir(parents=True, exist_ok=True)
    if append and path.exists():
        df = pd.concat([load_permutations(path), df], ignore_index=True)
        df = df.drop_duplicates(subset=PERMUTATION_KEY, keep="first")
    df.to_csv(path, index=False)
    return df


def load_permutations(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, dtype={"abcd_color_band": "string", "abcd_gradient": "string", "abcd_speed": "string", "abcd_shift": "string"})


def existing_keys(path: Path) -> set[tuple[int, int, int, int]]:
    if not path.exists():
        return set()
    df = pd.read_csv(path, usecols=PERMUTATION_KEY)
    return {tuple(int(v) for v in row) for row in df.itertuples(index=False, name=None)}
