"""Short SHA-256 fingerprints for analysis parameter sets."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from smallworld.config.experiment import AnalysisConfig


def _fingerprint(payload: dict[str, Any]) -> str:
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()[:16]


def config_hash(config: AnalysisConfig) -> str:
    """Fingerprint of the whole config, labels and sweep included."""
    return _fingerprint(asdict(config))


def network_config_hash(config: AnalysisConfig) -> str:
    """Fingerprint of the inputs that fix the generated network.

    n, k, p and the seed determine the adjacency matrix exactly; spectral
    settings, the sweep and the descriptive fields do not enter it. An
    unseeded config (seed None) still hashes, though its networks differ.
    """
    gen = config.generation
    return _fingerprint(
        {"n": gen.n, "k": gen.k, "p": float(gen.p), "seed": config.seed}
    )
