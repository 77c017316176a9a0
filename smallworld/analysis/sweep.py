"""Rewiring-probability sweep: the Watts-Strogatz C(p)/C(0), L(p)/L(0) curve."""

import logging
from dataclasses import dataclass, replace

from smallworld.analysis.clustering import average_clustering
from smallworld.analysis.paths import compute_path_metrics
from smallworld.config.experiment import AnalysisConfig, SweepConfig
from smallworld.graph.watts_strogatz import generate_from_config
from smallworld.reproducibility.seed import make_rng

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SweepPoint:
    """Metrics at one rewiring probability, raw and relative to p = 0."""

    p: float
    average_path_length: float
    clustering_coefficient: float
    relative_path_length: float  # L(p) / L(0)
    relative_clustering: float  # C(p) / C(0)


def _ratio(value: float, baseline: float) -> float:
    # NaN when the baseline is zero, e.g. C(0) of a k=2 lattice
    return value / baseline if baseline > 0 else float("nan")


def sweep_rewiring(
    config: AnalysisConfig, p_values: tuple[float, ...] | None = None
) -> list[SweepPoint]:
    """Measure path length and clustering across rewiring probabilities.

    Each p reuses config.generation's n and k and config.seed, so the
    baseline lattice and every rewired network are reproducible. The
    p = 0 lattice is always generated as the baseline, even when 0 is not
    among p_values.

    Args:
        config: Base configuration (generation.p is ignored).
        p_values: Probabilities to visit; defaults to config.sweep.p_values,
            then SweepConfig().p_values.

    Returns:
        One SweepPoint per p, in the given order.
    """
    if p_values is None:
        p_values = (config.sweep or SweepConfig()).p_values

    def measure(p: float) -> tuple[float, float]:
        generation = replace(config.generation, p=p)
        network = generate_from_config(generation, make_rng(config.seed))
        return (
            compute_path_metrics(network).average_path_length,
            average_clustering(network),
        )

    base_length, base_clustering = measure(0.0)
    points = []
    for p in p_values:
        length, clustering = measure(p)
        points.append(
            SweepPoint(
                p=p,
                average_path_length=length,
                clustering_coefficient=clustering,
                relative_path_length=_ratio(length, base_length),
                relative_clustering=_ratio(clustering, base_clustering),
            )
        )
        log.info(
            "Sweep p=%.4f: L/L0=%.3f, C/C0=%.3f",
            p,
            points[-1].relative_path_length,
            points[-1].relative_clustering,
        )
    return points
