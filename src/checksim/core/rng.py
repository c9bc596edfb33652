"""Keccak-based pseudo-random draws matching the on-chain ``Utilities`` contract."""
from __future__ import annotations

from functools import lru_cache

from Crypto.Hash import keccak
from numpy.random import Generator, PCG64DXSM

UINT256_BYTES = 32


def keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def _pack_uint256(value: int) -> bytes:
    return int(value).to_bytes(UINT256_BYTES, "big")


def keccak_uint(*words: int) -> int:
    """Hash ``abi.encodePacked`` of uint256 words and return the digest as an integer."""

    return int.from_bytes(keccak256(b"".join(_pack_uint256(w) for w in words)), "big")


@lru_cache(maxsize=65536)
def random(seed: int, modulus: int) -> int:
    """Draw in ``[0, modulus)`` from ``keccak256(uint256 seed)``."""

    return keccak_uint(seed) % modulus


@lru_cache(maxsize=65536)
def random_salted(seed: int, salt: str, modulus: int) -> int:
    """Draw in ``[0, modulus)`` from ``keccak256(uint256 seed, string salt)``."""

    digest = keccak256(_pack_uint256(seed) + salt.encode("utf-8"))
    return int.from_bytes(digest, "big") % modulus


def make_rng(seed: int) -> Generator:
    """Seeded numpy generator for caller-side sampling (never used by the engine itself)."""

    return Generator(PCG64DXSM(seed))
