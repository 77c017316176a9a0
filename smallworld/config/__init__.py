"""Analysis configuration system with frozen, hashable, serializable dataclasses."""

from smallworld.config.experiment import (
    MAX_NODES,
    AnalysisConfig,
    GenerationConfig,
    SpectralConfig,
    SweepConfig,
    check_network_size,
)
from smallworld.config.defaults import DEFAULT_CONFIG
from smallworld.config.hashing import config_hash, network_config_hash
from smallworld.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MAX_NODES",
    "AnalysisConfig",
    "GenerationConfig",
    "SpectralConfig",
    "SweepConfig",
    "check_network_size",
    "DEFAULT_CONFIG",
    "config_hash",
    "network_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
