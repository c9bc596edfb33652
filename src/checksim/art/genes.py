"""Gene derivation: colour band and gradient indexes per divisor level."""
from __future__ import annotations

from typing import TYPE_CHECKING

from checksim.core.rng import random_salted
from checksim.errors import InvalidDepth

if TYPE_CHECKING:  # pragma: no cover
    from .check import Check

# Descending ladder applied to a draw in [0, 120) for root checks.
BAND_THRESHOLDS: tuple[int, ...] = (80, 40, 20, 10, 4, 1)
TERMINAL_BAND = 6


def color_band_index(check: "Check", divisor_index: int) -> int:
    """Colour band index in ``[0, 6]`` for ``check`` viewed at ``divisor_index``.

    Root level draws from the seed; levels 1-5 read the value recorded by the
    composite step that produced that level; deeper levels use the single-colour band.
    """

    if divisor_index < 0:
        raise InvalidDepth(divisor_index)
    if divisor_index == 0:
        n = random_salted(check.seed, "band", 120)
        for band, threshold in enumerate(BAND_THRESHOLDS):
            if n > threshold:
                return band
        return TERMINAL_BAND
    if divisor_index < 6:
        return check.stored.color_bands[divisor_index - 1]
    return TERMINAL_BAND


def gradient_index(check: "Check", divisor_index: int) -> int:
    """Gradient index in ``[0, 6]``; 0 means no gradient."""

    if divisor_index < 0:
        raise InvalidDepth(divisor_index)
    if divisor_index == 0:
        n = random_salted(check.seed, "gradient", 100)
        return 1 + (n % 6) if n < 20 else 0
    if divisor_index < 6:
        return check.stored.gradients[divisor_index - 1]
    return 0
