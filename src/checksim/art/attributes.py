"""Projection of a check onto its human-readable traits."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

from .check import Check

COLOR_BAND_NAMES: tuple[str, ...] = ("Eighty", "Sixty", "Forty", "Twenty", "Ten", "Five", "One")
GRADIENT_NAMES: tuple[str, ...] = ("None", "Linear", "Double Linear", "Reflected", "Double Angled", "Angled", "Linear Z")


@dataclass(frozen=True)
class Attribute:
    trait_type: str
    value: str

    def to_dict(self) -> dict:
        return asdict(self)


def color_band_name(index: int) -> str:
    return COLOR_BAND_NAMES[index] if 0 <= index < len(COLOR_BAND_NAMES) else "Unknown"


def gradient_name(index: int) -> str:
    return GRADIENT_NAMES[index] if 0 <= index < len(GRADIENT_NAMES) else "Unknown"


def format_speed(speed: int) -> str:
    if speed == 4:
        return "2x"
    if speed == 2:
        return "1x"
    return "0.5x"


def format_shift(direction: int) -> str:
    return "IR" if direction == 0 else "UV"


def map_check_attributes(check: Check) -> list[Attribute]:
    attrs: list[Attribute] = []
    if check.is_revealed and check.has_many_checks:
        attrs.append(Attribute("Color Band", color_band_name(check.color_band)))
        attrs.append(Attribute("Gradient", gradient_name(check.gradient)))
    if check.is_revealed and check.checks_count > 0:
        attrs.append(Attribute("Speed", format_speed(check.speed)))
        attrs.append(Attribute("Shift", format_shift(check.direction)))
    attrs.append(Attribute("Checks", str(check.checks_count)))
    attrs.append(Attribute("Day", str(check.stored.day)))
    return attrs


def attribute_value(attrs: Iterable[Attribute], trait_type: str) -> str | None:
    for attr in attrs:
        if attr.trait_type == trait_type:
            return attr.value
    return None
