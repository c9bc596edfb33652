"""Trait filters over computed permutation tables."""
from __future__ import annotations

import pandas as pd

TRAIT_COLUMNS = {
    "checks": "abcd_checks",
    "color_band": "abcd_color_band",
    "gradient": "abcd_gradient",
    "speed": "abcd_speed",
    "shift": "abcd_shift",
}


def filter_permutations(df: pd.DataFrame, *, token_id: int | None = None, **traits) -> pd.DataFrame:
    """Rows matching every given trait (``None`` means any), best rank first.

    ``token_id`` keeps rows where the token appears in any of the four slots.
    """

    unknown = set(traits) - set(TRAIT_COLUMNS)
    if unknown:
        raise ValueError(f"unknown trait filters: {sorted(unknown)}")
    mask = pd.Series(True, index=df.index)
    for name, value in traits.items():
        if value is None:
            continue
        column = df[TRAIT_COLUMNS[name]]
        if name == "checks":
            mask &= column == int(value)
        else:
            mask &= (column.astype("string") == str(value)).fillna(False).astype(bool)
    if token_id is not None:
        slots = df[["keeper_1_id", "burner_1_id", "keeper_2_id", "burner_2_id"]]
        mask &= (slots == token_id).any(axis=1)
    return df[mask].sort_values("rank_score", ascending=False, kind="stable")


def trait_counts(df: pd.DataFrame) -> dict[str, dict[str, int]]:
    counts: dict[str, dict[str, int]] = {}
    for name, column in TRAIT_COLUMNS.items():
        values = df[column].dropna().astype(str).value_counts()
        counts[name] = {str(k): int(v) for k, v in values.items()}
    return counts
