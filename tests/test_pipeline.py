"""Tests for the analysis pipeline and the SmallWorldModel facade."""

from dataclasses import replace
from unittest.mock import patch

import numpy as np
import pytest

from smallworld import SmallWorldModel
from smallworld.analysis import (
    AnalysisResult,
    SpectralError,
    analyze,
    generate_and_analyze,
)
from smallworld.config import (
    DEFAULT_CONFIG,
    MAX_NODES,
    AnalysisConfig,
    GenerationConfig,
    SpectralConfig,
)
from smallworld.graph import Network


def _config(n: int = 40, k: int = 4, p: float = 0.1, seed: int = 42) -> AnalysisConfig:
    return AnalysisConfig(generation=GenerationConfig(n=n, k=k, p=p), seed=seed)


class TestAnalyze:
    """analyze() produces one consistent snapshot."""

    def test_known_network(self) -> None:
        network = Network.from_edges(4, [(0, 1), (1, 2), (0, 2), (0, 3)])
        result = analyze(network, np.random.default_rng(0))
        assert isinstance(result, AnalysisResult)
        assert result.network is network
        assert result.clustering_coefficient == pytest.approx(7 / 12)
        assert result.path_metrics.diameter == 2
        assert result.config is None

    def test_local_clustering_is_read_only(self) -> None:
        result = generate_and_analyze(_config())
        with pytest.raises(ValueError):
            result.local_clustering[0] = 0.5

    def test_clustering_is_mean_of_local(self) -> None:
        result = generate_and_analyze(_config(p=0.3))
        assert result.clustering_coefficient == pytest.approx(
            result.local_clustering.mean()
        )

    def test_spectral_config_is_applied(self) -> None:
        config = replace(_config(), spectral=SpectralConfig(n_communities=2))
        result = generate_and_analyze(config)
        assert result.communities.count <= 2
        assert result.config is config

    def test_spectral_failure_keeps_metrics(self) -> None:
        with patch(
            "smallworld.analysis.communities.spectral_embedding",
            side_effect=SpectralError("did not converge"),
        ):
            result = generate_and_analyze(_config())
        assert not result.communities.is_assigned
        assert result.path_metrics.diameter > 0
        assert result.clustering_coefficient > 0


class TestRoundTrip:
    """Same (n, k, p, seed) gives identical adjacency, metrics and communities."""

    @pytest.mark.parametrize("p", [0.0, 0.2, 1.0])
    def test_regenerate_same_seed_is_identical(self, p: float) -> None:
        r1 = generate_and_analyze(_config(n=50, k=6, p=p, seed=3))
        r2 = generate_and_analyze(_config(n=50, k=6, p=p, seed=3))
        np.testing.assert_array_equal(r1.network.adjacency, r2.network.adjacency)
        assert r1.path_metrics == r2.path_metrics
        assert r1.clustering_coefficient == r2.clustering_coefficient
        np.testing.assert_array_equal(r1.communities.labels, r2.communities.labels)
        assert r1.communities.count == r2.communities.count


class TestSmallWorldModel:
    """The stateful facade exposes the current result atomically."""

    def test_default_model(self) -> None:
        model = SmallWorldModel()
        assert model.size() == DEFAULT_CONFIG.generation.n
        assert model.adjacency().shape == (20, 20)
        assert model.config == DEFAULT_CONFIG
        # p = 0 on the default config: regular ring with k = 4
        assert (model.adjacency().sum(axis=1) == 4).all()

    def test_regenerate_replaces_everything(self) -> None:
        model = SmallWorldModel()
        before = model.result
        model.regenerate(60, 6, 0.2, seed=7)
        assert model.result is not before
        assert model.size() == 60
        assert model.communities().labels.shape == (60,)
        assert model.result.network.n == model.size()
        assert model.config.generation == GenerationConfig(n=60, k=6, p=0.2)
        assert model.config.seed == 7

    def test_getters_match_result(self) -> None:
        model = SmallWorldModel(_config())
        result = model.result
        assert model.metrics() is result.path_metrics
        assert model.clustering_coefficient() == result.clustering_coefficient
        assert model.communities() is result.communities
        assert model.adjacency() is result.network.adjacency

    def test_adjacency_is_read_only(self) -> None:
        model = SmallWorldModel()
        with pytest.raises(ValueError):
            model.adjacency()[0, 1] = False

    def test_regenerate_with_seed_is_reproducible(self) -> None:
        model = SmallWorldModel()
        model.regenerate(40, 4, 0.3, seed=11)
        first = model.result
        model.regenerate(40, 4, 0.3, seed=11)
        np.testing.assert_array_equal(first.network.adjacency, model.adjacency())
        assert first.path_metrics == model.metrics()
        np.testing.assert_array_equal(
            first.communities.labels, model.communities().labels
        )

    def test_invalid_parameters_keep_state(self) -> None:
        model = SmallWorldModel()
        before = model.result
        with pytest.raises(ValueError, match="even"):
            model.regenerate(30, 5, 0.1)
        assert model.result is before

    def test_oversized_network_keeps_state(self) -> None:
        model = SmallWorldModel()
        before = model.result
        with patch("smallworld.model.generate_and_analyze") as generate:
            with pytest.raises(ValueError, match="MAX_NODES"):
                model.regenerate(MAX_NODES + 2, 4, 0.1, seed=1)
            generate.assert_not_called()
        assert model.result is before

    def test_oversized_initial_config_rejected(self) -> None:
        with pytest.raises(ValueError, match="MAX_NODES"):
            SmallWorldModel(_config(n=MAX_NODES + 2))

    def test_community_labels_are_read_only(self) -> None:
        model = SmallWorldModel()
        with pytest.raises(ValueError):
            model.communities().labels[0] = 99

    def test_internal_failure_keeps_state(self) -> None:
        model = SmallWorldModel()
        before = model.result
        with patch(
            "smallworld.analysis.pipeline.compute_path_metrics",
            side_effect=RuntimeError("boom"),
        ):
            with pytest.raises(RuntimeError, match="boom"):
                model.regenerate(30, 4, 0.1, seed=1)
        assert model.result is before
        assert model.size() == 20

    def test_unseeded_regenerate(self) -> None:
        model = SmallWorldModel()
        model.regenerate(30, 4, 0.5)
        assert model.size() == 30
        assert model.config.seed is None
