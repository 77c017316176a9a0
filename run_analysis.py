#!/usr/bin/env python3
"""Entry point for generating and analyzing a Watts-Strogatz network.

Chains all pipeline stages into a single executable command:
generation -> path metrics -> clustering -> spectral communities,
optionally followed by a rewiring-probability sweep.

Usage:
    python run_analysis.py
    python run_analysis.py --n 100 --k 6 --p 0.1 --seed 7
    python run_analysis.py --config config.json --sweep
    python run_analysis.py --config config.json --dry-run --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from smallworld.config import (
    DEFAULT_CONFIG,
    AnalysisConfig,
    GenerationConfig,
    check_network_size,
    config_from_json,
    config_hash,
    network_config_hash,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s")
    log.info("Completed: %s in %.3fs", name, elapsed)


def build_config(args: argparse.Namespace) -> AnalysisConfig:
    """Load the base config and apply command-line overrides.

    Raises:
        ValueError: If the resulting parameters are invalid or the network
            would exceed MAX_NODES.
    """
    config = DEFAULT_CONFIG
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())

    gen = config.generation
    generation = GenerationConfig(
        n=args.n if args.n is not None else gen.n,
        k=args.k if args.k is not None else gen.k,
        p=args.p if args.p is not None else gen.p,
    )
    check_network_size(generation)
    seed = args.seed if args.seed is not None else config.seed
    return replace(config, generation=generation, seed=seed)


def run_pipeline(config: AnalysisConfig, sweep: bool = False) -> None:
    """Execute generation and analysis and print a summary."""
    from smallworld.analysis import analyze, sweep_rewiring
    from smallworld.graph import count_components, generate_from_config
    from smallworld.reproducibility import make_rng

    rng = make_rng(config.seed)

    with stage_timer("Network Generation"):
        network = generate_from_config(config.generation, rng)
        log.info(
            "Network: n=%d, edges=%d, components=%d",
            network.n, network.n_edges, count_components(network),
        )

    with stage_timer("Analysis"):
        result = analyze(network, rng, spectral=config.spectral, config=config)

    metrics = result.path_metrics
    communities = result.communities
    print(f"\n{'=' * 60}")
    print(f"  Avg. path:   {metrics.average_path_length:.4f}")
    print(f"  Diameter:    {metrics.diameter}")
    print(f"  Path:        {' -> '.join(map(str, metrics.diameter_path))}")
    print(f"  Clustering:  {result.clustering_coefficient:.4f}")
    if communities.is_assigned:
        sizes = ", ".join(str(s) for s in communities.sizes())
        print(f"  Communities: {communities.count} (sizes {sizes})")
    else:
        print("  Communities: unavailable")
    print(f"{'=' * 60}")

    if sweep:
        with stage_timer("Rewiring Sweep"):
            points = sweep_rewiring(config)
        print(f"\n{'p':>10} {'L(p)/L(0)':>10} {'C(p)/C(0)':>10}")
        for point in points:
            print(
                f"{point.p:>10.4f} {point.relative_path_length:>10.3f} "
                f"{point.relative_clustering:>10.3f}"
            )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate and analyze a Watts-Strogatz small-world network"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to analysis config JSON file (defaults built in)",
    )
    parser.add_argument("--n", type=int, default=None, help="Number of nodes")
    parser.add_argument("--k", type=int, default=None, help="Even mean degree")
    parser.add_argument(
        "--p", type=float, default=None, help="Rewiring probability in [0, 1]"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--sweep",
        action="store_true",
        help="Also sweep the rewiring probability and print C(p)/C(0), L(p)/L(0)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and print the config without running the analysis",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = build_config(args)
    except (ValueError, DaciteError) as exc:
        print(f"Error: invalid parameters: {exc}", file=sys.stderr)
        sys.exit(2)

    gen = config.generation
    spectral = config.spectral
    print(f"Config hash:  {config_hash(config)}")
    print(f"Network hash: {network_config_hash(config)}")
    print()
    print(f"Network:  n={gen.n}, k={gen.k}, p={gen.p}")
    print(f"Spectral: communities={spectral.n_communities}, "
          f"dimensions={spectral.dimensions}, "
          f"max_iterations={spectral.max_iterations}")
    print(f"Seed:     {config.seed}")

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_pipeline(config, sweep=args.sweep)
    except Exception:
        log.exception("Analysis failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
