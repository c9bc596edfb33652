"""Deterministic primitives shared by the engine."""
from .rng import keccak256, keccak_uint, make_rng, random, random_salted
from .arith import avg, max, min, min_gt0

__all__ = ["keccak256", "keccak_uint", "make_rng", "random", "random_salted", "avg", "max", "min", "min_gt0"]
