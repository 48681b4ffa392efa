"""
Triple-modular redundancy (TMR) voting over simulated unreliable modules.

    sample_module  - one noisy module reading
    classic_vote   - majority with random three-way tie-break
    map_vote       - maximum-a-posteriori vote using per-module reliabilities
"""

from .modules import (
    NUM_VALUES,
    TRUE_VALUE,
    InvalidReliability,
    sample_module,
    sample_outputs,
    validate_reliabilities,
    validate_reliability,
)
from .voters import classic_vote, map_log_likelihood, map_vote

__all__ = [
    "NUM_VALUES",
    "TRUE_VALUE",
    "InvalidReliability",
    "sample_module",
    "sample_outputs",
    "validate_reliabilities",
    "validate_reliability",
    "classic_vote",
    "map_log_likelihood",
    "map_vote",
]
