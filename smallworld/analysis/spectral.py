"""Spectral embedding from the eigenvectors of the graph Laplacian.

Nodes are placed at the coordinates given by the eigenvectors of the
smallest non-trivial Laplacian eigenvalues (the Fiedler vector and its
successors), so nodes in the same structural community land close
together.
"""

import logging

import numpy as np
import scipy.linalg

log = logging.getLogger(__name__)

DEFAULT_DIMENSIONS = 4
ZERO_EIG_TOL = 1e-9  # Eigenvalues below this count as zero (one per component)


class SpectralError(Exception):
    """Raised when the Laplacian eigendecomposition cannot be computed."""


def laplacian_spectrum(laplacian: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Full eigendecomposition of a symmetric Laplacian.

    scipy.linalg.eigh returns eigenvalues in ascending order, so column 0
    is the trivial constant eigenvector (eigenvalue 0).

    Args:
        laplacian: Symmetric (n, n) float matrix.

    Returns:
        (eigenvalues, eigenvectors): shapes (n,) and (n, n); column i of
        eigenvectors belongs to eigenvalues[i].

    Raises:
        SpectralError: On non-finite input or non-convergence.
    """
    try:
        eigenvalues, eigenvectors = scipy.linalg.eigh(laplacian)
    except (np.linalg.LinAlgError, ValueError) as exc:
        raise SpectralError(
            f"Laplacian eigendecomposition failed for shape "
            f"{laplacian.shape}: {exc}"
        ) from exc
    return eigenvalues, eigenvectors


def spectral_embedding(
    laplacian: np.ndarray, dimensions: int = DEFAULT_DIMENSIONS
) -> np.ndarray:
    """Embed every node using the smallest non-trivial eigenvectors.

    Uses eigenvector columns 1..dimensions of the ascending spectrum,
    skipping column 0. A network with n nodes has only n - 1 non-trivial
    directions, so fewer columns are returned when n - 1 < dimensions.

    Disconnected networks have one zero eigenvalue per component and the
    leading columns then span a degenerate subspace. That is tolerated:
    the embedding is still returned and downstream clustering copes.

    Args:
        laplacian: Symmetric (n, n) Laplacian.
        dimensions: Number of embedding coordinates per node.

    Returns:
        float64 array of shape (n, min(dimensions, n - 1)).

    Raises:
        SpectralError: If the eigendecomposition fails.
    """
    n = laplacian.shape[0]
    if n == 0:
        return np.zeros((0, 0), dtype=np.float64)

    eigenvalues, eigenvectors = laplacian_spectrum(laplacian)
    n_zero = int((np.abs(eigenvalues) < ZERO_EIG_TOL).sum())
    if n_zero > 1:
        log.debug(
            "Laplacian has %d zero eigenvalues (disconnected network); "
            "embedding is degenerate",
            n_zero,
        )

    used = min(dimensions, n - 1)
    return np.ascontiguousarray(eigenvectors[:, 1 : 1 + used])
