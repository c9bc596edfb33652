"""Recursive colour-index resolution over a virtual check graph."""
from __future__ import annotations

from typing import Mapping

from checksim.core.rng import random
from checksim.errors import InvalidDepth, MissingVirtualMapEntry
from .check import Check
from .genes import color_band_index, gradient_index
from .tables import COLOR_BANDS, DIVISORS, GRADIENTS, MAX_DIVISOR_INDEX

PALETTE_SIZE = 80


def _gradient_fill(indexes: list[int], gradient: int, band_size: int, count: int) -> None:
    for i in range(1, count):
        indexes[i] = (indexes[0] + (i * gradient * band_size) // count % band_size) % PALETTE_SIZE


def color_indexes(divisor_index: int, check: Check, virtual_map: Mapping[int, Check]) -> list[int]:
    """Palette indexes for each check glyph of ``check`` at ``divisor_index``.

    Levels above 0 pick every colour from the parent level of ``check`` itself
    or of the check its composite pointer refers to in ``virtual_map``.
    """

    if not 0 <= divisor_index <= MAX_DIVISOR_INDEX:
        raise InvalidDepth(divisor_index)
    count = DIVISORS[divisor_index]
    if count == 0:
        return []
    seed = check.seed
    band_size = COLOR_BANDS[color_band_index(check, divisor_index)]
    gradient = GRADIENTS[gradient_index(check, divisor_index)]
    choices = DIVISORS[divisor_index - 1] * 2 if divisor_index > 0 else PALETTE_SIZE

    indexes = [0] * count
    indexes[0] = random(seed, choices)
    if check.has_many_checks:
        if gradient > 0:
            _gradient_fill(indexes, gradient, band_size, count)
        elif divisor_index == 0:
            for i in range(1, count):
                indexes[i] = (indexes[0] + random(seed + i, band_size)) % PALETTE_SIZE
        else:
            for i in range(1, count):
                indexes[i] = random(seed + i, choices)

    if divisor_index == 0:
        return indexes

    previous = divisor_index - 1
    parent_indexes = color_indexes(previous, check, virtual_map)
    try:
        composited = virtual_map[check.composite]
    except KeyError:
        raise MissingVirtualMapEntry(check.composite) from None
    composited_indexes = color_indexes(previous, composited, virtual_map)

    branch_count = DIVISORS[previous]

    def _branch(value: int) -> int:
        source = parent_indexes if value < branch_count else composited_indexes
        return source[value % branch_count]

    indexes[0] = _branch(indexes[0])
    if gradient == 0:
        # Entry 0 is remapped a second time here, as on-chain.
        indexes = [_branch(v) for v in indexes]
    else:
        _gradient_fill(indexes, gradient, band_size, count)
    return indexes
