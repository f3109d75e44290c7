"""
Sampling Module
===============

Stratified random sampling used to bound how many frames and columns
the entropy computation touches.
"""

from enimda.sampling.sampler import (
    resolve_density,
    round_half_up,
    sample,
    validate_density,
    validate_limit,
)

__all__ = [
    "sample",
    "resolve_density",
    "round_half_up",
    "validate_density",
    "validate_limit",
]
