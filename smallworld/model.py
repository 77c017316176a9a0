"""Stateful facade consumed by visualization and control layers.

SmallWorldModel holds exactly one AnalysisResult. regenerate() builds the
replacement completely before swapping the reference, so readers never see
a network next to metrics computed from a different one, and a failed
regeneration leaves the previous result in place.
"""

import logging
from dataclasses import replace

import numpy as np

from smallworld.analysis.communities import CommunityAssignment
from smallworld.analysis.paths import PathMetrics
from smallworld.analysis.pipeline import AnalysisResult, generate_and_analyze
from smallworld.config.defaults import DEFAULT_CONFIG
from smallworld.config.experiment import (
    AnalysisConfig,
    GenerationConfig,
    check_network_size,
)

log = logging.getLogger(__name__)


class SmallWorldModel:
    """Current network and its analysis, regenerated on request."""

    def __init__(self, config: AnalysisConfig = DEFAULT_CONFIG) -> None:
        check_network_size(config.generation)
        self._result = generate_and_analyze(config)

    def regenerate(
        self, n: int, k: int, p: float, seed: int | None = None
    ) -> None:
        """Rebuild the network and all derived state.

        Spectral settings carry over from the current config.

        Args:
            n: Number of nodes.
            k: Even mean degree, 2 <= k < n.
            p: Rewiring probability in [0, 1].
            seed: Seed for a reproducible network; None for fresh entropy.

        Raises:
            ValueError: If (n, k, p) is invalid or n exceeds MAX_NODES.
                The current state is kept.
        """
        config = replace(
            self.config,
            generation=GenerationConfig(n=n, k=k, p=p),
            seed=seed,
        )
        check_network_size(config.generation)
        self._result = generate_and_analyze(config)
        log.info(
            "Regenerated network (n=%d, k=%d, p=%.3f, seed=%s)", n, k, p, seed
        )

    @property
    def result(self) -> AnalysisResult:
        return self._result

    @property
    def config(self) -> AnalysisConfig:
        # generate_and_analyze always records the config on the result
        return self._result.config

    def adjacency(self) -> np.ndarray:
        """Read-only (n, n) boolean adjacency matrix."""
        return self._result.network.adjacency

    def size(self) -> int:
        return self._result.network.n

    def metrics(self) -> PathMetrics:
        return self._result.path_metrics

    def clustering_coefficient(self) -> float:
        return self._result.clustering_coefficient

    def communities(self) -> CommunityAssignment:
        return self._result.communities
