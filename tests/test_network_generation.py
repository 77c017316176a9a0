"""Tests for Watts-Strogatz generation, rewiring and network validation."""

from unittest.mock import patch

import numpy as np
import pytest

from smallworld.config.experiment import MAX_NODES, GenerationConfig
from smallworld.graph import (
    GraphGenerationError,
    Network,
    count_components,
    generate_from_config,
    generate_watts_strogatz,
    is_ring_lattice,
    rewire_edges,
    ring_lattice,
    validate_network,
)


class TestNetwork:
    """Tests for the immutable Network container."""

    def test_adjacency_is_read_only(self) -> None:
        network = Network.from_edges(3, [(0, 1), (1, 2)])
        with pytest.raises(ValueError):
            network.adjacency[0, 2] = True

    def test_input_array_is_copied(self) -> None:
        adj = np.zeros((3, 3), dtype=bool)
        network = Network(adj)
        adj[0, 1] = True
        assert not network.has_edge(0, 1)

    def test_from_edges_is_symmetric(self) -> None:
        network = Network.from_edges(4, [(0, 3)])
        assert network.has_edge(0, 3) and network.has_edge(3, 0)
        assert network.n_edges == 1

    def test_from_edges_rejects_self_loop(self) -> None:
        with pytest.raises(ValueError, match="Self-loop"):
            Network.from_edges(3, [(1, 1)])

    def test_rejects_non_square(self) -> None:
        with pytest.raises(ValueError, match="square"):
            Network(np.zeros((2, 3), dtype=bool))

    def test_degrees_and_neighbors(self) -> None:
        network = Network.from_edges(4, [(0, 1), (0, 2), (2, 3)])
        np.testing.assert_array_equal(network.degrees(), [2, 1, 2, 1])
        np.testing.assert_array_equal(network.neighbors(0), [1, 2])

    def test_empty_network(self) -> None:
        network = Network(np.zeros((0, 0), dtype=bool))
        assert network.n == 0
        assert network.n_edges == 0


class TestRingLattice:
    """Tests for lattice construction (p = 0)."""

    def test_every_degree_is_k(self) -> None:
        adj = ring_lattice(20, 6)
        assert (adj.sum(axis=1) == 6).all()

    def test_neighbors_are_nearest_on_ring(self) -> None:
        adj = ring_lattice(10, 4)
        assert set(np.flatnonzero(adj[0]).tolist()) == {1, 2, 8, 9}

    def test_p_zero_returns_lattice(self) -> None:
        rng = np.random.default_rng(42)
        network = generate_watts_strogatz(30, 4, 0.0, rng)
        assert is_ring_lattice(network, 4)
        assert (network.degrees() == 4).all()

    def test_lattice_is_vertex_transitive(self) -> None:
        """Rotating node labels by one position maps the lattice onto itself."""
        network = generate_watts_strogatz(15, 6, 0.0, np.random.default_rng(0))
        rolled = np.roll(np.roll(network.adjacency, 1, axis=0), 1, axis=1)
        np.testing.assert_array_equal(rolled, network.adjacency)

    def test_is_ring_lattice_detects_rewiring(self) -> None:
        network = generate_watts_strogatz(30, 4, 1.0, np.random.default_rng(1))
        assert not is_ring_lattice(network, 4)


class TestRewiring:
    """Tests for probabilistic rewiring."""

    @pytest.mark.parametrize("p", [0.0, 0.1, 0.5, 1.0])
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_symmetric_and_loop_free(self, p: float, seed: int) -> None:
        network = generate_watts_strogatz(40, 6, p, np.random.default_rng(seed))
        adj = network.adjacency
        assert np.array_equal(adj, adj.T)
        assert not np.diag(adj).any()
        assert validate_network(network) == []

    @pytest.mark.parametrize("p", [0.0, 0.3, 1.0])
    def test_edge_count_preserved(self, p: float) -> None:
        """Each rewire removes one edge and adds one new edge."""
        network = generate_watts_strogatz(50, 4, p, np.random.default_rng(3))
        assert network.n_edges == 50 * 4 // 2

    def test_mean_degree_preserved(self) -> None:
        network = generate_watts_strogatz(60, 6, 0.4, np.random.default_rng(5))
        assert network.degrees().mean() == pytest.approx(6.0)

    def test_complete_lattice_does_not_hang(self) -> None:
        """k = n - 1 leaves no valid rewire target; every rewire is skipped."""
        adj = ring_lattice(5, 4)
        skipped = rewire_edges(adj, 4, 1.0, np.random.default_rng(0))
        assert skipped == 5 * 2
        assert adj.sum() == 5 * 4

    def test_complete_lattice_generation(self) -> None:
        network = generate_watts_strogatz(7, 6, 1.0, np.random.default_rng(0))
        assert network.n_edges == 7 * 6 // 2
        assert (network.degrees() == 6).all()

    def test_explicit_valid_set_fallback(self) -> None:
        """With no rejection draws allowed, targets come from the valid set."""
        adj = ring_lattice(20, 4)
        skipped = rewire_edges(adj, 4, 1.0, np.random.default_rng(9), max_attempts=0)
        network = Network(adj)
        assert skipped == 0
        assert validate_network(network) == []
        assert network.n_edges == 40

    def test_same_seed_reproduces_network(self) -> None:
        g1 = generate_watts_strogatz(50, 4, 0.3, np.random.default_rng(42))
        g2 = generate_watts_strogatz(50, 4, 0.3, np.random.default_rng(42))
        np.testing.assert_array_equal(g1.adjacency, g2.adjacency)

    def test_different_seeds_differ(self) -> None:
        g1 = generate_watts_strogatz(50, 4, 0.5, np.random.default_rng(1))
        g2 = generate_watts_strogatz(50, 4, 0.5, np.random.default_rng(2))
        assert not np.array_equal(g1.adjacency, g2.adjacency)

    def test_generate_from_config(self) -> None:
        config = GenerationConfig(n=24, k=4, p=0.0)
        network = generate_from_config(config, np.random.default_rng(0))
        assert network.n == 24
        assert is_ring_lattice(network, 4)


class TestParameterValidation:
    """Invalid parameters are rejected before generation begins."""

    def test_odd_k(self) -> None:
        with pytest.raises(ValueError, match="even"):
            generate_watts_strogatz(20, 5, 0.1, np.random.default_rng(0))

    def test_k_too_small(self) -> None:
        with pytest.raises(ValueError, match=">= 2"):
            generate_watts_strogatz(20, 0, 0.1, np.random.default_rng(0))

    def test_k_not_below_n(self) -> None:
        with pytest.raises(ValueError, match="< n"):
            generate_watts_strogatz(4, 4, 0.1, np.random.default_rng(0))

    def test_generator_has_no_size_limit(self) -> None:
        n = MAX_NODES + 2
        network = generate_watts_strogatz(n, 2, 0.0, np.random.default_rng(0))
        assert network.n == n
        assert network.n_edges == n


class TestValidation:
    """Tests for validate_network and component counting."""

    def test_detects_self_loop(self) -> None:
        adj = np.zeros((3, 3), dtype=bool)
        adj[1, 1] = True
        errors = validate_network(Network(adj))
        assert any("Self-loops" in e for e in errors)

    def test_detects_asymmetry(self) -> None:
        adj = np.zeros((3, 3), dtype=bool)
        adj[0, 2] = True
        errors = validate_network(Network(adj))
        assert any("not symmetric" in e for e in errors)

    def test_generation_error_on_invalid_result(self) -> None:
        with patch(
            "smallworld.graph.watts_strogatz.validate_network",
            return_value=["Simulated failure"],
        ):
            with pytest.raises(GraphGenerationError, match="Simulated failure"):
                generate_watts_strogatz(10, 4, 0.2, np.random.default_rng(0))

    def test_count_components(self) -> None:
        network = Network.from_edges(5, [(0, 1), (2, 3)])
        assert count_components(network) == 3
        assert count_components(Network(np.zeros((0, 0), dtype=bool))) == 0
