"""Structural validation of generated networks.

Checks the invariants every downstream computation relies on: a square,
symmetric, loop-free adjacency, and (for p = 0) the exact ring lattice.
"""

import logging

import numpy as np
from scipy.sparse.csgraph import connected_components

from smallworld.graph.types import Network

log = logging.getLogger(__name__)


def validate_network(network: Network) -> list[str]:
    """Validate a network against the simple undirected graph invariants.

    Checks (cheapest first):
    1. No self-loops
    2. Symmetric adjacency

    Args:
        network: Network to check.

    Returns:
        List of error strings (empty = valid network).
    """
    errors: list[str] = []
    adj = network.adjacency

    # 1. No self-loops
    loops = np.flatnonzero(np.diag(adj))
    if loops.size:
        errors.append(f"Self-loops detected at nodes {loops.tolist()}")

    # 2. Symmetry
    asym = np.argwhere(adj != adj.T)
    if asym.size:
        i, j = asym[0]
        errors.append(
            f"Adjacency not symmetric: {asym.shape[0]} mismatched entries, "
            f"first at ({i}, {j})"
        )

    return errors


def is_ring_lattice(network: Network, k: int) -> bool:
    """Check that the network is exactly the canonical k-regular ring lattice.

    Node i must be adjacent to precisely (i +/- j) mod n for j in 1..k/2.

    Args:
        network: Network to check.
        k: Even mean degree of the lattice.

    Returns:
        True if every adjacency row matches the lattice pattern.
    """
    n = network.n
    offsets = np.arange(1, k // 2 + 1)
    expected = np.zeros((n, n), dtype=bool)
    rows = np.repeat(np.arange(n), offsets.size)
    cols = (rows + np.tile(offsets, n)) % n
    expected[rows, cols] = True
    expected[cols, rows] = True
    return bool(np.array_equal(network.adjacency, expected))


def count_components(network: Network) -> int:
    """Number of connected components (isolated nodes count as one each)."""
    if network.n == 0:
        return 0
    n_components, _ = connected_components(
        network.adjacency.astype(np.float64), directed=False
    )
    log.debug("Network has %d connected components", n_components)
    return int(n_components)
