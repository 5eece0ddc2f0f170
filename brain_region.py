# brain_region.py
from dataclasses import dataclass, field
from numbers import Integral
from typing import List, Optional, Sequence, Tuple
import math
import numpy as np

@dataclass
class RegionSpec:
    """Static description of a placement zone inside the brain."""
    name: str
    center: Tuple[float, float, float]
    radius: float
    share: Optional[float] = None  # Fraction of the total; None takes the remainder
    minimum: int = 0  # Floor applied once the total is large enough

@dataclass
class BrainRegion:
    """Represents a brain region with spatial properties and neuron indices."""
    name: str
    num_neurons: int  # Quota requested for this region
    center: Tuple[float, float, float]
    radius: float
    start_idx: int = 0
    end_idx: int = 0
    attempts: int = 0
    positions: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))

    @property
    def placed(self) -> int:
        return len(self.positions)

    @property
    def is_filled(self) -> bool:
        return self.placed >= self.num_neurons

def validate_count(count) -> int:
    """Reject negative or non-integral neuron counts."""
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise ValueError(f"count must be a non-negative integer, got {count!r}")
    if count < 0:
        raise ValueError(f"count must be a non-negative integer, got {count}")
    return int(count)

def _split(count: int, regions: Sequence[RegionSpec], apply_minimums: bool) -> List[int]:
    quotas: List[Optional[int]] = []
    for spec in regions:
        if spec.share is None:
            quotas.append(None)
            continue
        quota = int(math.floor(count * spec.share))
        if apply_minimums:
            quota = max(spec.minimum, quota)
        quotas.append(quota)

    remainder = count - sum(q for q in quotas if q is not None)
    for i, spec in enumerate(regions):
        if quotas[i] is None:
            quota = max(0, remainder)
            if apply_minimums:
                quota = max(spec.minimum, quota)
            quotas[i] = quota
    return quotas

def compute_region_quotas(count: int, regions: Sequence[RegionSpec]) -> List[int]:
    """
    Split a neuron count across regions.

    Shared regions receive floor(count * share); the remainder region takes
    whatever is left. Per-region minimums only apply when the count can cover
    all of them; if the raised quotas would still overshoot, the plain
    proportional split is used. The result never sums above ``count``.
    """
    count = validate_count(count)
    if count >= sum(spec.minimum for spec in regions):
        quotas = _split(count, regions, apply_minimums=True)
        if sum(quotas) <= count:
            return quotas
    return _split(count, regions, apply_minimums=False)

def build_regions(count: int, regions: Sequence[RegionSpec]) -> List[BrainRegion]:
    """Create region records carrying their quotas, in placement order."""
    quotas = compute_region_quotas(count, regions)
    return [
        BrainRegion(spec.name, quota, tuple(spec.center), spec.radius)
        for spec, quota in zip(regions, quotas)
    ]
