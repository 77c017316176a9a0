"""Network data structure shared by generation and analysis."""

from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True, eq=False)
class Network:
    """Immutable undirected, simple, unweighted graph over n nodes.

    Holds a dense boolean adjacency matrix whose numpy writeable flag is
    cleared on construction, so a Network can be shared between the path,
    clustering and spectral computations without any of them mutating it.
    Uses frozen=True but omits slots=True since numpy arrays don't interact
    well with __slots__, and eq=False since elementwise array comparison
    has no single truth value; compare adjacency with np.array_equal.
    """

    adjacency: np.ndarray  # bool array of shape (n, n), symmetric, zero diagonal

    def __post_init__(self) -> None:
        adj = np.array(self.adjacency, dtype=bool, copy=True)
        if adj.ndim != 2 or adj.shape[0] != adj.shape[1]:
            raise ValueError(
                f"adjacency must be a square matrix, got shape {adj.shape}"
            )
        adj.setflags(write=False)
        object.__setattr__(self, "adjacency", adj)

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[tuple[int, int]]) -> "Network":
        """Build a network from an undirected edge list.

        Args:
            n: Number of nodes.
            edges: Pairs (i, j); both directions are set.

        Returns:
            Network with the given edges.
        """
        adj = np.zeros((n, n), dtype=bool)
        for i, j in edges:
            if i == j:
                raise ValueError(f"Self-loop ({i}, {j}) not allowed")
            adj[i, j] = True
            adj[j, i] = True
        return cls(adj)

    @property
    def n(self) -> int:
        return self.adjacency.shape[0]

    @property
    def n_edges(self) -> int:
        return int(np.triu(self.adjacency, 1).sum())

    def degrees(self) -> np.ndarray:
        """Degree of every node as an int64 array of shape (n,)."""
        return self.adjacency.sum(axis=1).astype(np.int64)

    def neighbors(self, node: int) -> np.ndarray:
        """Sorted indices of the nodes adjacent to ``node``."""
        return np.flatnonzero(self.adjacency[node])

    def has_edge(self, i: int, j: int) -> bool:
        return bool(self.adjacency[i, j])
