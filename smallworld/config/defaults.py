"""Default configuration: single source of truth for analysis parameters."""

from smallworld.config.experiment import AnalysisConfig

# All-default values: n=20, k=4, p=0.0 (regular ring), 4 communities over a
# 4-dimensional spectral embedding, 50 k-means passes, seed=42.
DEFAULT_CONFIG = AnalysisConfig()
