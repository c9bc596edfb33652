"""Check data model and the ``check_struct`` record codec."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from checksim.errors import MalformedInputRecord
from .tables import COLOR_BANDS, DIVISORS, GRADIENTS, MAX_DIVISOR_INDEX, checks_count

COMPOSITE_SLOTS = 6
GENE_SLOTS = 5
SPEEDS = (1, 2, 4)
DIRECTIONS = (0, 1)


@dataclass(frozen=True)
class StoredState:
    """Per-token state as persisted by the Checks contract."""

    composites: tuple[int, ...] = (0,) * COMPOSITE_SLOTS
    color_bands: tuple[int, ...] = (0,) * GENE_SLOTS
    gradients: tuple[int, ...] = (0,) * GENE_SLOTS
    divisor_index: int = 0
    epoch: int = 0
    seed: int = 0
    day: int = 0

    def to_dict(self) -> dict:
        return {
            "composites": list(self.composites),
            "colorBands": list(self.color_bands),
            "gradients": list(self.gradients),
            "divisorIndex": self.divisor_index,
            "epoch": self.epoch,
            "seed": self.seed,
            "day": self.day,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StoredState":
        divisor_index = _as_int(data, "divisorIndex")
        if not 0 <= divisor_index <= MAX_DIVISOR_INDEX:
            raise MalformedInputRecord(f"divisorIndex out of range: {divisor_index}")
        # The terminal step pads composites with a seventh slot.
        composite_slots = (COMPOSITE_SLOTS,)
        if divisor_index == MAX_DIVISOR_INDEX:
            composite_slots = (COMPOSITE_SLOTS, COMPOSITE_SLOTS + 1)
        return cls(
            composites=_as_int_tuple(data, "composites", composite_slots),
            color_bands=_as_int_tuple(data, "colorBands", (GENE_SLOTS,), upper=len(COLOR_BANDS)),
            gradients=_as_int_tuple(data, "gradients", (GENE_SLOTS,), upper=len(GRADIENTS)),
            divisor_index=divisor_index,
            epoch=_as_int(data, "epoch"),
            seed=_as_int(data, "seed"),
            day=_as_int(data, "day"),
        )


@dataclass(frozen=True)
class Check:
    """A check as returned by ``getCheck`` / ``simulateComposite``.

    Instances are immutable; composite steps build new values and never touch
    the arrays of their inputs, so the same root can feed many computations.
    """

    seed: int
    stored: StoredState = field(default_factory=StoredState)
    is_revealed: bool = True
    checks_count: int = 80
    has_many_checks: bool = True
    composite: int = 0
    is_root: bool = True
    color_band: int = 0
    gradient: int = 0
    direction: int = 0
    speed: int = 2

    @property
    def depth(self) -> int:
        return self.stored.divisor_index

    @classmethod
    def root(
        cls,
        seed: int,
        *,
        is_revealed: bool = True,
        direction: int = 0,
        speed: int = 2,
        epoch: int = 1,
        day: int = 1,
    ) -> "Check":
        """Build a depth-0 root whose genes are derived from ``seed``."""

        from .genes import color_band_index, gradient_index

        base = cls(
            seed=seed,
            stored=StoredState(epoch=epoch, day=day),
            is_revealed=is_revealed,
            checks_count=DIVISORS[0],
            has_many_checks=True,
            is_root=True,
            direction=direction,
            speed=speed,
        )
        return replace(base, color_band=color_band_index(base, 0), gradient=gradient_index(base, 0))

    def to_record(self) -> dict:
        """Serialize to the JSON ``check_struct`` shape (seed as decimal string)."""

        return {
            "stored": self.stored.to_dict(),
            "isRevealed": self.is_revealed,
            "seed": str(self.seed),
            "checksCount": self.checks_count,
            "hasManyChecks": self.has_many_checks,
            "composite": self.composite,
            "isRoot": self.is_root,
            "colorBand": self.color_band,
            "gradient": self.gradient,
            "direction": self.direction,
            "speed": self.speed,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Check":
        if not isinstance(record, Mapping):
            raise MalformedInputRecord(f"expected an object, got {type(record).__name__}")
        stored = record.get("stored")
        if not isinstance(stored, Mapping):
            raise MalformedInputRecord("missing field: stored")
        stored_state = StoredState.from_dict(stored)
        count = _as_int(record, "checksCount")
        if count != checks_count(stored_state.divisor_index):
            raise MalformedInputRecord(f"checksCount {count} does not match divisorIndex {stored_state.divisor_index}")
        return cls(
            seed=_as_seed(record.get("seed")),
            stored=stored_state,
            is_revealed=_as_bool(record, "isRevealed"),
            checks_count=count,
            has_many_checks=_as_bool(record, "hasManyChecks"),
            composite=_as_int(record, "composite"),
            is_root=_as_bool(record, "isRoot"),
            color_band=_as_choice(record, "colorBand", range(len(COLOR_BANDS))),
            gradient=_as_choice(record, "gradient", range(len(GRADIENTS))),
            direction=_as_choice(record, "direction", DIRECTIONS),
            speed=_as_choice(record, "speed", SPEEDS),
        )


def _as_seed(value: Any) -> int:
    if value is None:
        raise MalformedInputRecord("missing field: seed")
    if isinstance(value, bool):
        raise MalformedInputRecord("seed must be numeric")
    if isinstance(value, int):
        seed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            seed = int(text, 16) if text.lower().startswith("0x") else int(text, 10)
        except ValueError as exc:
            raise MalformedInputRecord(f"seed is not numeric: {value!r}") from exc
    else:
        raise MalformedInputRecord(f"seed has unsupported type {type(value).__name__}")
    if not 0 <= seed < 2**256:
        raise MalformedInputRecord("seed outside uint256 range")
    return seed


def _as_int(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise MalformedInputRecord(f"missing field: {key}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise MalformedInputRecord(f"{key} must be an integer")
    try:
        return int(value)
    except ValueError as exc:
        raise MalformedInputRecord(f"{key} must be an integer") from exc


def _as_bool(data: Mapping[str, Any], key: str) -> bool:
    if key not in data:
        raise MalformedInputRecord(f"missing field: {key}")
    value = data[key]
    if not isinstance(value, bool):
        raise MalformedInputRecord(f"{key} must be a boolean")
    return value


def _as_choice(data: Mapping[str, Any], key: str, allowed) -> int:
    value = _as_int(data, key)
    if value not in allowed:
        raise MalformedInputRecord(f"{key} out of range: {value}")
    return value


def _as_int_tuple(
    data: Mapping[str, Any], key: str, lengths: tuple[int, ...], upper: int | None = None
) -> tuple[int, ...]:
    if key not in data:
        raise MalformedInputRecord(f"missing field: {key}")
    values = data[key]
    if not isinstance(values, (list, tuple)):
        raise MalformedInputRecord(f"{key} must be an array")
    if len(values) not in lengths:
        raise MalformedInputRecord(f"{key} must have {' or '.join(map(str, lengths))} entries, got {len(values)}")
    out = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise MalformedInputRecord(f"{key} must contain integers")
        if v < 0 or (upper is not None and v >= upper):
            raise MalformedInputRecord(f"{key} value out of range: {v}")
        out.append(v)
    return tuple(out)
