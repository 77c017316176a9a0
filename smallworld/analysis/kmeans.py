"""Lloyd's k-means for partitioning spectral embeddings.

Empty clusters keep their previous centroid instead of being reseeded
from a random point, so random draws happen only at initialization.
"""

import logging
from dataclasses import dataclass

import numpy as np

log = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 50


@dataclass(frozen=True, eq=False)
class KMeansResult:
    """Output of a k-means run.

    Attributes:
        labels: Raw cluster id in [0, k) per point, shape [n].
        centroids: Final centroid positions, shape [k, d].
        n_iter: Assignment passes performed.
        converged: True if the last pass changed no assignment.
    """

    labels: np.ndarray
    centroids: np.ndarray
    n_iter: int
    converged: bool


def kmeans(
    points: np.ndarray,
    k: int,
    rng: np.random.Generator,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> KMeansResult:
    """Cluster points into k groups.

    Initial centroids are k distinct points chosen uniformly without
    replacement. Each pass assigns every point to its nearest centroid
    (Euclidean; ties go to the lowest cluster index) and then moves each
    centroid to the mean of its points. Stops after a pass that changes
    no assignment, or after max_iterations passes.

    Args:
        points: float array of shape [n, d].
        k: Number of clusters, 1 <= k <= n.
        rng: numpy random Generator for initialization.
        max_iterations: Pass cap.

    Returns:
        KMeansResult with raw labels.

    Raises:
        ValueError: If points is not 2-D or k is out of range.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2:
        raise ValueError(f"points must be 2-D, got shape {points.shape}")
    n = points.shape[0]
    if not 1 <= k <= n:
        raise ValueError(f"k ({k}) must be in [1, n_points ({n})]")

    init = rng.choice(n, size=k, replace=False)
    centroids = points[init].copy()
    labels = np.full(n, -1, dtype=np.int64)

    converged = False
    n_iter = 0
    while n_iter < max_iterations:
        n_iter += 1

        # Assignment step: [n, k] distance matrix, argmin picks lowest index on ties
        dists = np.linalg.norm(
            points[:, None, :] - centroids[None, :, :], axis=2
        )
        new_labels = np.argmin(dists, axis=1)
        changed = not np.array_equal(new_labels, labels)
        labels = new_labels

        # Update step: empty clusters keep their previous centroid
        for c in range(k):
            members = labels == c
            if members.any():
                centroids[c] = points[members].mean(axis=0)

        if not changed:
            converged = True
            break

    log.debug(
        "k-means (k=%d, n=%d): %d passes, converged=%s",
        k,
        n,
        n_iter,
        converged,
    )
    return KMeansResult(
        labels=labels,
        centroids=centroids,
        n_iter=n_iter,
        converged=converged,
    )
