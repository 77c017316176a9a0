"""JSON serialization and deserialization for analysis configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from smallworld.config.experiment import AnalysisConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple, float],
    check_types=True,
    strict=True,
)


def config_to_json(config: AnalysisConfig) -> str:
    """Serialize an AnalysisConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> AnalysisConfig:
    """Deserialize a JSON string to an AnalysisConfig.

    Uses dacite with strict=True to reject unknown keys, cast=[tuple]
    to convert JSON arrays back to tuples for tags and sweep p_values,
    and cast=[float] so a JSON integer such as "p": 0 loads as 0.0.
    Validation in __post_init__ runs on every nested config.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: AnalysisConfig) -> dict[str, Any]:
    """Convert an AnalysisConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> AnalysisConfig:
    """Reconstruct an AnalysisConfig from a plain dictionary."""
    return from_dict(
        data_class=AnalysisConfig,
        data=d,
        config=_DACITE_CONFIG,
    )
