"""Combinatorial graph Laplacian."""

import numpy as np

from smallworld.graph.types import Network


def build_laplacian(network: Network) -> np.ndarray:
    """Build L = D - A for an undirected network.

    L[i, i] = deg(i), L[i, j] = -1 for adjacent i != j, 0 otherwise.
    Symmetric positive semi-definite with rows summing to zero.

    Args:
        network: Network to transform.

    Returns:
        float64 array of shape (n, n).
    """
    a = network.adjacency.astype(np.float64)
    return np.diag(a.sum(axis=1)) - a
