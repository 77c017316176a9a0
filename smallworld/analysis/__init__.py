"""Analysis module for small-world network metrics and communities.

Provides all-pairs BFS distance metrics, clustering coefficients, the
graph Laplacian, spectral embedding, k-means partitioning, and the
combined analysis pipeline.
"""

from smallworld.analysis.clustering import average_clustering, local_clustering
from smallworld.analysis.communities import (
    UNASSIGNED,
    CommunityAssignment,
    detect_communities,
    normalize_labels,
)
from smallworld.analysis.kmeans import KMeansResult, kmeans
from smallworld.analysis.laplacian import build_laplacian
from smallworld.analysis.paths import PathMetrics, bfs, compute_path_metrics
from smallworld.analysis.pipeline import (
    AnalysisResult,
    analyze,
    generate_and_analyze,
)
from smallworld.analysis.spectral import (
    SpectralError,
    laplacian_spectrum,
    spectral_embedding,
)
from smallworld.analysis.sweep import SweepPoint, sweep_rewiring

__all__ = [
    "UNASSIGNED",
    "AnalysisResult",
    "CommunityAssignment",
    "KMeansResult",
    "PathMetrics",
    "SpectralError",
    "SweepPoint",
    "analyze",
    "average_clustering",
    "bfs",
    "build_laplacian",
    "compute_path_metrics",
    "detect_communities",
    "generate_and_analyze",
    "kmeans",
    "laplacian_spectrum",
    "local_clustering",
    "normalize_labels",
    "spectral_embedding",
    "sweep_rewiring",
]
