"""Graph generation module for Watts-Strogatz small-world networks."""

from smallworld.graph.types import Network
from smallworld.graph.validation import (
    count_components,
    is_ring_lattice,
    validate_network,
)
from smallworld.graph.watts_strogatz import (
    DEFAULT_MAX_ATTEMPTS,
    GraphGenerationError,
    generate_from_config,
    generate_watts_strogatz,
    ring_lattice,
    rewire_edges,
)

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "GraphGenerationError",
    "Network",
    "count_components",
    "generate_from_config",
    "generate_watts_strogatz",
    "is_ring_lattice",
    "rewire_edges",
    "ring_lattice",
    "validate_network",
]
