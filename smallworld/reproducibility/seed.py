"""Centralized random source for reproducible generation and clustering.

A single numpy Generator threads through the whole pipeline: rewiring
draws come first, k-means initialization draws follow from the same
stream. Re-creating the generator from the same seed therefore reproduces
the adjacency, the metrics and the community assignment exactly.
"""

import numpy as np

RandomSource = np.random.Generator


def make_rng(seed: int | None = None) -> RandomSource:
    """Create the random source used by generation and clustering.

    Args:
        seed: Master seed value (e.g., 42). None draws fresh OS entropy,
            giving a different network on every call.

    Returns:
        numpy Generator backed by PCG64.
    """
    return np.random.default_rng(seed)


def verify_rng_determinism(seed: int) -> bool:
    """Verify that re-seeding produces identical sequences.

    Draws 10 uniforms, 10 bounded integers and a 10-element permutation
    (the three kinds of draw the pipeline makes) from two generators
    built from the same seed. This is the self-test that proves seed
    control works.

    Args:
        seed: Seed value to test.

    Returns:
        True if both generators produce identical sequences.
    """
    draws = []
    for _ in range(2):
        rng = make_rng(seed)
        draws.append((
            rng.random(10).tolist(),
            rng.integers(0, 100, size=10).tolist(),
            rng.choice(50, size=10, replace=False).tolist(),
        ))
    return draws[0] == draws[1]
