"""Watts-Strogatz small-world network generator with bounded rewiring.

Implements the Watts & Strogatz (1998) construction: a k-regular ring
lattice whose forward edges are each rewired with probability p to a
uniformly chosen new endpoint.
"""

import logging

import numpy as np

from smallworld.config.experiment import GenerationConfig
from smallworld.graph.types import Network
from smallworld.graph.validation import validate_network

log = logging.getLogger(__name__)

# Rejection draws per rewire before falling back to the explicit valid set.
DEFAULT_MAX_ATTEMPTS = 64


class GraphGenerationError(Exception):
    """Raised when a generated network violates the graph invariants."""


def ring_lattice(n: int, k: int) -> np.ndarray:
    """Build the adjacency of a k-regular ring lattice.

    Node i connects to (i + j) mod n for j in 1..k/2 and, by symmetry, to
    (i - j) mod n, so every node has degree exactly k when k < n.

    Args:
        n: Number of nodes.
        k: Even mean degree.

    Returns:
        Writable bool array of shape (n, n).
    """
    adj = np.zeros((n, n), dtype=bool)
    for i in range(n):
        for j in range(1, k // 2 + 1):
            neighbor = (i + j) % n
            adj[i, neighbor] = True
            adj[neighbor, i] = True
    return adj


def _draw_target(
    adj: np.ndarray,
    node: int,
    rng: np.random.Generator,
    max_attempts: int,
) -> int | None:
    """Draw a new endpoint for ``node`` uniformly from its valid targets.

    Valid targets are every node other than ``node`` that is not already
    adjacent to it. Rejection sampling is tried first; the explicit valid
    set is used once max_attempts draws are exhausted.

    Returns:
        The chosen target, or None when the valid set is empty.
    """
    n = adj.shape[0]
    # Degree n-1 means every peer is already a neighbor.
    if adj[node].sum() >= n - 1:
        return None

    for _ in range(max_attempts):
        candidate = int(rng.integers(n))
        if candidate != node and not adj[node, candidate]:
            return candidate

    valid = np.flatnonzero(~adj[node])
    valid = valid[valid != node]
    return int(rng.choice(valid))


def rewire_edges(
    adj: np.ndarray,
    k: int,
    p: float,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """Rewire the forward lattice edges in place.

    Visits the same (i, j) pairs that built the lattice, in order, and
    draws one uniform per pair. When the draw is below p the edge
    (i, (i + j) mod n) is replaced by an edge from i to a new valid
    target. The old target is still adjacent at draw time, so it is never
    re-selected.

    Args:
        adj: Writable bool adjacency from ring_lattice, modified in place.
        k: Even mean degree used to build the lattice.
        p: Rewiring probability in [0, 1].
        rng: numpy random Generator for reproducibility.
        max_attempts: Rejection draws before sampling the valid set directly.

    Returns:
        Number of rewires skipped because no valid target existed.
    """
    n = adj.shape[0]
    skipped = 0
    for i in range(n):
        for j in range(1, k // 2 + 1):
            old_target = (i + j) % n
            if rng.random() >= p:
                continue

            new_target = _draw_target(adj, i, rng, max_attempts)
            if new_target is None:
                skipped += 1
                log.debug(
                    "Node %d has no valid rewire target; keeping edge "
                    "(%d, %d)",
                    i,
                    i,
                    old_target,
                )
                continue

            adj[i, old_target] = False
            adj[old_target, i] = False
            adj[i, new_target] = True
            adj[new_target, i] = True
    return skipped


def generate_watts_strogatz(
    n: int,
    k: int,
    p: float,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Network:
    """Generate a Watts-Strogatz small-world network.

    Implements the full generation pipeline:
    1. Validate parameters (k even, 2 <= k < n, p in [0, 1])
    2. Build the ring lattice
    3. Rewire forward edges with probability p
    4. Validate the result (symmetric, loop-free)

    Args:
        n: Number of nodes.
        k: Even mean degree.
        p: Rewiring probability.
        rng: numpy random Generator for reproducibility.
        max_attempts: Rejection draws per rewire before direct sampling.

    Returns:
        Immutable Network.

    Raises:
        ValueError: If the parameters are invalid.
        GraphGenerationError: If the generated network fails validation.
    """
    # Raises ValueError on invalid parameters; nothing is coerced. Size is
    # not limited here.
    GenerationConfig(n=n, k=k, p=p)

    adj = ring_lattice(n, k)
    skipped = rewire_edges(adj, k, p, rng, max_attempts=max_attempts)
    network = Network(adj)

    errors = validate_network(network)
    if errors:
        raise GraphGenerationError(
            f"Generated network is invalid (n={n}, k={k}, p={p}): "
            f"{'; '.join(errors)}"
        )

    log.info(
        "Network generated (n=%d, k=%d, p=%.3f, edges=%d, skipped_rewires=%d)",
        n,
        k,
        p,
        network.n_edges,
        skipped,
    )
    return network


def generate_from_config(
    config: GenerationConfig, rng: np.random.Generator
) -> Network:
    """Generate a network from a validated GenerationConfig."""
    return generate_watts_strogatz(config.n, config.k, config.p, rng)
