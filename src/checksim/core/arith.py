"""Integer helpers mirroring the on-chain ``Utilities`` library."""
from __future__ import annotations

import builtins


def avg(a: int, b: int) -> int:
    return (a >> 1) + (b >> 1) + (a & b & 1)


def min(a: int, b: int) -> int:
    return builtins.min(a, b)


def max(a: int, b: int) -> int:
    return builtins.max(a, b)


def min_gt0(a: int, b: int) -> int:
    """Smallest non-zero operand, or 0 when both are 0.

    The on-chain helper returns 0 whenever either operand is 0; here a zero
    operand yields the other one instead.
    """

    if a == 0:
        return b
    if b == 0:
        return a
    return a if a < b else b
