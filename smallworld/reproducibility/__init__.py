"""Reproducibility infrastructure: seeded random source management."""

from smallworld.reproducibility.seed import (
    RandomSource,
    make_rng,
    verify_rng_determinism,
)

__all__ = [
    "RandomSource",
    "make_rng",
    "verify_rng_determinism",
]
