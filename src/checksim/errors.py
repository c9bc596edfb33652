"""Error taxonomy for the composite engine."""
from __future__ import annotations


class ChecksimError(Exception):
    """Base class for engine errors."""


class MissingVirtualMapEntry(ChecksimError, LookupError):
    """A composite pointer was dereferenced but is absent from the virtual map."""

    def __init__(self, pointer: int):
        self.pointer = pointer
        super().__init__(f"Virtual map missing key: {pointer}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidDepth(ChecksimError, ValueError):
    """Composite or resolution requested outside the divisor range."""

    def __init__(self, depth: int, reason: str = "divisor index out of range"):
        self.depth = depth
        super().__init__(f"{reason}: {depth}")


class MalformedInputRecord(ChecksimError, ValueError):
    """An external record could not be decoded into a check."""

    def __init__(self, message: str, token_id: int | None = None):
        self.token_id = token_id
        if token_id is not None:
            message = f"token {token_id}: {message}"
        super().__init__(message)
