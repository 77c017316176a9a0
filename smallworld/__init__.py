"""Watts-Strogatz small-world network generation and analysis."""

from smallworld.model import SmallWorldModel

__all__ = ["SmallWorldModel"]
