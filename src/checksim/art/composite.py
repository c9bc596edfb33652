"""Composite step and two-level (L2) composition."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Mapping

from checksim.core.arith import avg, max, min, min_gt0
from checksim.core.rng import keccak_uint
from checksim.errors import InvalidDepth
from .check import Check, StoredState
from .genes import color_band_index, gradient_index
from .tables import DIVISORS, MAX_DIVISOR_INDEX

logger = logging.getLogger(__name__)

# Pointer for the L1b branch of an L2 composite; outside the real token id range.
L2_VIRTUAL_ID = 65535

VirtualMap = Mapping[int, Check]


def composite_genes(keeper: Check, burner: Check) -> tuple[int, int]:
    """Merged ``(gradient, color_band)`` for a keeper/burner pair.

    The gradient rule uses ``min_gt0`` with the zero-operand fix rather than the
    literal on-chain helper.
    """

    randomizer = keccak_uint(keeper.seed, burner.seed)
    if randomizer % 100 > 80:
        if randomizer % 2 == 0:
            gradient = min_gt0(keeper.gradient, burner.gradient)
        else:
            gradient = max(keeper.gradient, burner.gradient)
    else:
        gradient = min(keeper.gradient, burner.gradient)
    return gradient, avg(keeper.color_band, burner.color_band)


def _with_slot(values: tuple[int, ...], index: int, value: int) -> tuple[int, ...]:
    padded = values + (0,) * (index + 1 - len(values)) if index >= len(values) else values
    return padded[:index] + (value,) + padded[index + 1 :]


def simulate_composite(keeper: Check, burner: Check, burner_pointer: int) -> Check:
    """Combine ``keeper`` and ``burner`` into a check one divisor level deeper.

    ``burner_pointer`` is recorded as the composite pointer for the keeper's
    current level: the burner's token id for L1 steps, a virtual id otherwise.
    """

    divisor_index = keeper.stored.divisor_index
    if not 0 <= divisor_index < MAX_DIVISOR_INDEX:
        raise InvalidDepth(divisor_index, "cannot composite at divisor index")
    next_divisor = divisor_index + 1

    composites = _with_slot(keeper.stored.composites, divisor_index, burner_pointer)
    color_bands = keeper.stored.color_bands
    gradients = keeper.stored.gradients
    if divisor_index < 5:
        gradient, color_band = composite_genes(keeper, burner)
        color_bands = _with_slot(color_bands, divisor_index, color_band)
        gradients = _with_slot(gradients, divisor_index, gradient)

    stored = replace(
        keeper.stored,
        composites=composites,
        color_bands=color_bands,
        gradients=gradients,
        divisor_index=next_divisor,
    )
    result = Check(
        seed=keeper.seed,
        stored=stored,
        is_revealed=keeper.is_revealed,
        checks_count=DIVISORS[next_divisor],
        has_many_checks=next_divisor < 6,
        composite=composites[next_divisor - 1] if next_divisor - 1 < len(composites) else 0,
        is_root=False,
        direction=keeper.direction,
        speed=keeper.speed,
    )
    return replace(
        result,
        color_band=color_band_index(result, next_divisor),
        gradient=gradient_index(result, next_divisor),
    )


def compose_l2(l1a: Check, l1b: Check) -> Check:
    """Composite two L1 results, pointing the L1a slot at :data:`L2_VIRTUAL_ID`."""

    slot = l1a.stored.divisor_index
    stored: StoredState = replace(l1a.stored, composites=_with_slot(l1a.stored.composites, slot, L2_VIRTUAL_ID))
    return simulate_composite(replace(l1a, stored=stored), l1b, L2_VIRTUAL_ID)


def build_l2_render_map(l1a: Check, l1b: Check, burner1: Check, burner2: Check) -> dict[int, Check]:
    """Virtual map needed to resolve colours of ``compose_l2(l1a, l1b)``."""

    if l1a.composite == l1b.composite or L2_VIRTUAL_ID in (l1a.composite, l1b.composite):
        logger.warning(
            "L2 render map pointers collide (l1a=%s, l1b=%s); colours may resolve through the wrong burner",
            l1a.composite,
            l1b.composite,
        )
    return {
        L2_VIRTUAL_ID: l1b,
        l1a.composite: burner1,
        l1b.composite: burner2,
    }
