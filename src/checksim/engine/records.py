"""Loading raw check records from JSON / JSONL exports."""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator

from checksim.art.check import Check
from checksim.errors import MalformedInputRecord

logger = logging.getLogger(__name__)

_TOKEN_ID = re.compile(r"^\d+$")


@dataclass
class Rejection:
    token_id: int | None
    reason: str


@dataclass
class RecordBatch:
    """Decoded checks keyed by token id plus the rows that failed to decode."""

    checks: dict[int, Check] = field(default_factory=dict)
    rejected: list[Rejection] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.checks)

    def get(self, token_id: int) -> Check:
        try:
            return self.checks[token_id]
        except KeyError:
            raise KeyError(f"token {token_id} not present in record batch") from None


def _iter_rows(path: Path) -> Iterator[Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".jsonl":
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as exc:
                yield MalformedInputRecord(f"line {lineno}: {exc.msg}")
        return
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputRecord(f"{path}: line {exc.lineno}: {exc.msg}") from exc
    if isinstance(data, dict):
        data = data.get("checks", [data])
    if not isinstance(data, list):
        raise MalformedInputRecord(f"{path}: expected a list of rows, got {type(data).__name__}")
    yield from data


def decode_row(row: Any) -> tuple[int, Check]:
    """Decode one ``{"token_id", "check_struct"}`` row."""

    if not isinstance(row, dict):
        raise MalformedInputRecord(f"row must be an object, got {type(row).__name__}")
    raw_id = row.get("token_id")
    if isinstance(raw_id, bool) or not _TOKEN_ID.match(str(raw_id)):
        raise MalformedInputRecord(f"invalid token_id {raw_id!r}")
    token_id = int(raw_id)
    struct = row.get("check_struct")
    if struct is None:
        raise MalformedInputRecord("missing field: check_struct", token_id)
    try:
        return token_id, Check.from_record(struct)
    except MalformedInputRecord as exc:
        raise MalformedInputRecord(str(exc), token_id) from exc


def decode_rows(rows: Iterable[Any], *, include_burned: bool = False) -> RecordBatch:
    batch = RecordBatch()
    for row in rows:
        if isinstance(row, MalformedInputRecord):
            batch.rejected.append(Rejection(None, str(row)))
            logger.warning("rejected record: %s", row)
            continue
        if not include_burned and isinstance(row, dict) and row.get("is_burned"):
            continue
        try:
            token_id, check = decode_row(row)
        except MalformedInputRecord as exc:
            batch.rejected.append(Rejection(exc.token_id, str(exc)))
            logger.warning("rejected record: %s", exc)
            continue
        batch.checks[token_id] = check
    return batch


def load_records(path: Path, *, include_burned: bool = False) -> RecordBatch:
    """Decode every row of ``path``; malformed rows are rejected one by one, burned rows skipped."""

    path = Path(path)
    batch = decode_rows(_iter_rows(path), include_burned=include_burned)
    logger.info("loaded %d checks from %s (%d rejected)", len(batch.checks), path, len(batch.rejected))
    return batch


def write_records(checks: dict[int, Check], path: Path) -> Path:
    """Write checks as JSONL rows readable by :func:`load_records`."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [
        json.dumps({"token_id": tid, "checks_count": c.checks_count, "check_struct": c.to_record()})
        for tid, c in checks.items()
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def parse_ids(raw: str) -> list[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


def validate_ids(ids: list[str], minimum: int = 4) -> str:
    """Return an error message for a token id list, or ``""`` when it is usable."""

    if len(ids) < minimum:
        return f"Enter at least {minimum} token IDs separated by commas."
    for token_id in ids:
        if not _TOKEN_ID.match(token_id):
            return f'"{token_id}" is not a valid token ID.'
    if len(set(ids)) < len(ids):
        return "All token IDs must be unique."
    return ""
