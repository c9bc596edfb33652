"""Analysis utilities."""
from __future__ import annotations

from .filters import filter_permutations, trait_counts
from .report import write_report
from .plots import plot_traits

__all__ = ["filter_permutations", "trait_counts", "write_report", "plot_traits"]
