"""
Stratified Sampler
==================

Bounded random sampling of an index domain (frames, columns).

The domain [0, total) is split into contiguous strata of
1 / density indices each (rounded half up), plus one trailing partial
stratum when the division leaves a remainder. One index is drawn
uniformly from every stratum, the draws are shuffled and the list is cut to
`limit` entries.

One draw per stratum gives even coverage of the domain, which plain
uniform sampling does not guarantee.

Bypass Convention:
    sample() returns None instead of a full index set when sampling is
    switched off (density == 1.0 or limit == 0). Callers treat None as
    "use the whole domain".

Example:
    rng = random.Random(42)
    indices = sample(total=1000, density=0.1, limit=20, rng=rng)
    if indices is None:
        ...  # use every index
"""

import logging
import math
import random
from typing import Optional, Set

from enimda.errors import InvalidParameterError


logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves upward."""
    return int(math.floor(value + 0.5))


def validate_density(density: float, name: str = "density") -> None:
    """Fail fast when a sampling density is outside [0, 1]."""
    if not 0.0 <= density <= 1.0:
        raise InvalidParameterError(f"0.0 <= {name} <= 1.0 expected, got {density}")


def validate_limit(limit: Optional[int], name: str = "limit") -> None:
    """Fail fast when a sample limit is negative."""
    if limit is not None and limit < 0:
        raise InvalidParameterError(f"{name} must be non-negative, got {limit}")


def resolve_density(total: int, limit: Optional[int], density: Optional[float]) -> float:
    """
    Pick the strata density for a sampling call.
    
    An explicit density always wins. Otherwise the density is derived from
    the limit so that the strata spread `limit` draws over the whole domain.
    
    Args:
        total: Domain size
        limit: Sample limit (None or 0 disables sampling)
        density: Explicit density, if the caller supplied one
        
    Returns:
        Density in [0, 1]; 1.0 means "no sampling"
    """
    if density is not None:
        validate_density(density)
        return density
    
    if not limit or total <= 0 or limit >= total:
        return 1.0
    
    return limit / total


def sample(
    total: int,
    density: float,
    limit: int,
    rng: Optional[random.Random] = None,
) -> Optional[Set[int]]:
    """
    Draw a stratified random subset of [0, total).
    
    Args:
        total: Domain size (>= 0)
        density: Target fraction of the domain to examine, in [0, 1]
        limit: Maximum number of indices to return (0 disables sampling)
        rng: Random generator; a fresh process-local one is used if None
        
    Returns:
        Set of unique indices, or None when sampling is bypassed
        
    Raises:
        InvalidParameterError: If density is outside [0, 1] or total/limit
            are negative
    """
    validate_density(density)
    validate_limit(limit)
    if total < 0:
        raise InvalidParameterError(f"total must be non-negative, got {total}")
    
    if density == 1.0 or limit == 0:
        return None
    
    if rng is None:
        rng = random.Random()
    
    # density 0 collapses to a single stratum spanning the domain
    stratum = round_half_up(1.0 / density) if density > 0 else max(total, 1)
    full, remainder = divmod(total, stratum)
    
    indexes = [rng.randrange(page * stratum, (page + 1) * stratum) for page in range(full)]
    if remainder:
        indexes.append(rng.randrange(full * stratum, total))
    
    rng.shuffle(indexes)
    
    return set(indexes[:limit])
