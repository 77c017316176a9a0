"""Spectral community detection: Laplacian -> embedding -> k-means -> labels.

Community detection is best-effort. Networks too small to embed, or whose
eigendecomposition fails, get an unassigned result (every label -1,
count 0) instead of an exception, so path and clustering metrics computed
from the same network are never lost.
"""

import logging
from dataclasses import dataclass

import numpy as np

from smallworld.analysis.kmeans import DEFAULT_MAX_ITERATIONS, kmeans
from smallworld.analysis.laplacian import build_laplacian
from smallworld.analysis.spectral import (
    DEFAULT_DIMENSIONS,
    SpectralError,
    spectral_embedding,
)
from smallworld.graph.types import Network

log = logging.getLogger(__name__)

DEFAULT_N_COMMUNITIES = 4
UNASSIGNED = -1


@dataclass(frozen=True, eq=False)
class CommunityAssignment:
    """Per-node community labels.

    Attributes:
        labels: int64 array of shape [n]. Dense ids in [0, count), or
            UNASSIGNED (-1) everywhere when detection was not possible.
        count: Number of distinct communities (0 when unassigned).
    """

    labels: np.ndarray
    count: int

    @classmethod
    def unassigned(cls, n: int) -> "CommunityAssignment":
        labels = np.full(n, UNASSIGNED, dtype=np.int64)
        labels.setflags(write=False)
        return cls(labels=labels, count=0)

    @property
    def is_assigned(self) -> bool:
        return self.count > 0

    def sizes(self) -> np.ndarray:
        """Number of nodes in each community, shape [count]."""
        if not self.is_assigned:
            return np.zeros(0, dtype=np.int64)
        return np.bincount(self.labels, minlength=self.count)


def normalize_labels(raw: np.ndarray) -> tuple[np.ndarray, int]:
    """Relabel cluster ids densely in first-encounter order.

    The first node's cluster becomes 0, the next unseen cluster becomes 1,
    and so on, so equal partitions always get equal labels regardless of
    the arbitrary raw k-means numbering.

    Args:
        raw: Integer cluster id per node.

    Returns:
        (labels, count) with read-only labels in [0, count).
    """
    remap: dict[int, int] = {}
    labels = np.empty(len(raw), dtype=np.int64)
    for i, old in enumerate(np.asarray(raw).tolist()):
        if old not in remap:
            remap[old] = len(remap)
        labels[i] = remap[old]
    labels.setflags(write=False)
    return labels, len(remap)


def detect_communities(
    network: Network,
    rng: np.random.Generator,
    n_communities: int = DEFAULT_N_COMMUNITIES,
    dimensions: int = DEFAULT_DIMENSIONS,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> CommunityAssignment:
    """Partition a network into communities by spectral clustering.

    Pipeline:
    1. Build the Laplacian L = D - A
    2. Embed nodes on the smallest non-trivial eigenvectors
    3. Run k-means with k = min(n_communities, n)
    4. Normalize labels to a dense range

    Args:
        network: Network to partition.
        rng: numpy random Generator for k-means initialization.
        n_communities: Target number of clusters.
        dimensions: Embedding dimensions.
        max_iterations: k-means pass cap.

    Returns:
        CommunityAssignment; unassigned when n < 2 or the
        eigendecomposition fails.
    """
    n = network.n
    if n < 2:
        log.info("Community detection skipped: network has %d node(s)", n)
        return CommunityAssignment.unassigned(n)

    try:
        points = spectral_embedding(build_laplacian(network), dimensions)
    except SpectralError as exc:
        log.warning("Community detection failed, leaving nodes unassigned: %s", exc)
        return CommunityAssignment.unassigned(n)

    result = kmeans(points, min(n_communities, n), rng, max_iterations)
    if not result.converged:
        log.info(
            "k-means did not converge within %d passes; using last assignment",
            max_iterations,
        )

    labels, count = normalize_labels(result.labels)
    log.debug("Detected %d communities over %d nodes", count, n)
    return CommunityAssignment(labels=labels, count=count)
