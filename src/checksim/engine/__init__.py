"""Batch callers around the composite engine."""
from .records import RecordBatch, Rejection, load_records, parse_ids, validate_ids, write_records
from .lineage import CompositeTree
from .permutations import compute_permutation, is_eligible, perm4, rank_score, run_permutations

__all__ = [
    "RecordBatch",
    "Rejection",
    "load_records",
    "parse_ids",
    "validate_ids",
    "write_records",
    "CompositeTree",
    "compute_permutation",
    "is_eligible",
    "perm4",
    "rank_score",
    "run_permutations",
]
