"""Analysis configuration dataclasses: all frozen and slotted for immutability."""

from dataclasses import dataclass, field

# Size guard for the O(N^2) all-pairs BFS and O(N^3) dense eigendecomposition.
MAX_NODES = 5000


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Watts-Strogatz generation parameters.

    Invalid combinations are rejected, never coerced: callers that want
    to round an odd k or clamp p must do so before building the config.
    """

    n: int = 20  # number of nodes
    k: int = 4  # mean degree (even, 2 <= k < n)
    p: float = 0.0  # rewiring probability

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"n ({self.n}) must be >= 1")
        if self.k % 2 != 0:
            raise ValueError(f"k ({self.k}) must be even for a ring lattice")
        if self.k < 2:
            raise ValueError(f"k ({self.k}) must be >= 2")
        if self.k >= self.n:
            raise ValueError(f"k ({self.k}) must be < n ({self.n})")
        if not 0.0 <= self.p <= 1.0:
            raise ValueError(f"p ({self.p}) must be in [0, 1]")


def check_network_size(generation: GenerationConfig) -> None:
    """Reject networks too large to analyze interactively.

    Applied by callers before generation; the generator and the analysis
    stages accept any size.

    Raises:
        ValueError: If generation.n exceeds MAX_NODES.
    """
    if generation.n > MAX_NODES:
        raise ValueError(
            f"n ({generation.n}) exceeds MAX_NODES ({MAX_NODES}); all-pairs "
            f"BFS and dense eigendecomposition do not scale past it"
        )


@dataclass(frozen=True, slots=True)
class SpectralConfig:
    """Spectral community detection parameters."""

    n_communities: int = 4  # k for k-means
    dimensions: int = 4  # embedding dimensions (non-trivial eigenvectors)
    max_iterations: int = 50  # k-means pass cap

    def __post_init__(self) -> None:
        if self.n_communities < 1:
            raise ValueError(
                f"n_communities ({self.n_communities}) must be >= 1"
            )
        if self.dimensions < 1:
            raise ValueError(f"dimensions ({self.dimensions}) must be >= 1")
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations ({self.max_iterations}) must be >= 1"
            )


@dataclass(frozen=True, slots=True)
class SweepConfig:
    """Rewiring probabilities visited by a small-world sweep."""

    p_values: tuple[float, ...] = (
        0.0, 0.0001, 0.001, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0,
    )

    def __post_init__(self) -> None:
        bad = [p for p in self.p_values if not 0.0 <= p <= 1.0]
        if bad:
            raise ValueError(f"p_values outside [0, 1]: {bad}")


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Top-level configuration composing all sub-configs."""

    generation: GenerationConfig = field(default_factory=GenerationConfig)
    spectral: SpectralConfig = field(default_factory=SpectralConfig)
    sweep: SweepConfig | None = None
    seed: int | None = 42  # None draws fresh entropy on every generation
    description: str = ""
    tags: tuple[str, ...] = ()
