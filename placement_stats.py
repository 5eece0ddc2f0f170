# placement_stats.py
from dataclasses import dataclass, field
from typing import Dict, List, Sequence
import numpy as np
from scipy.spatial.distance import pdist

from boundary import BrainBoundary
from brain_region import BrainRegion

@dataclass
class RegionFill:
    name: str
    quota: int
    placed: int
    attempts: int

@dataclass
class PlacementReport:
    """Diagnostics for one placement run."""
    requested: int
    placed: int
    regions: List[RegionFill] = field(default_factory=list)
    min_pairwise_distance: float = float('inf')
    all_inside: bool = True

    @property
    def fill_ratio(self) -> float:
        if self.requested == 0:
            return 1.0
        return self.placed / self.requested

    @property
    def under_filled(self) -> List[str]:
        return [r.name for r in self.regions if r.placed < r.quota]

    def satisfies_invariants(self, min_distance: float, tolerance: float = 1e-9) -> bool:
        """Containment and minimum separation both hold."""
        return self.all_inside and self.min_pairwise_distance >= min_distance - tolerance

def analyze_placement(regions: Sequence[BrainRegion], boundary: BrainBoundary,
                      requested: int) -> PlacementReport:
    """Build a report from the regions returned by a placement run."""
    positions = [r.positions for r in regions if len(r.positions)]
    points = np.vstack(positions) if positions else np.zeros((0, 3))

    min_distance = float('inf')
    if len(points) > 1:
        min_distance = float(np.min(pdist(points)))

    return PlacementReport(
        requested=requested,
        placed=len(points),
        regions=[RegionFill(r.name, r.num_neurons, r.placed, r.attempts) for r in regions],
        min_pairwise_distance=min_distance,
        all_inside=bool(np.all(boundary.contains_many(points))) if len(points) else True,
    )

def summarize_trials(reports: Sequence[PlacementReport]) -> Dict[str, float]:
    """Aggregate several placement runs of the same size."""
    if not reports:
        return {'trials': 0}
    fill = np.array([r.fill_ratio for r in reports])
    return {
        'trials': len(reports),
        'mean_fill_ratio': float(np.mean(fill)),
        'min_fill_ratio': float(np.min(fill)),
        'under_filled_runs': sum(1 for r in reports if r.under_filled),
        'worst_min_distance': float(min(r.min_pairwise_distance for r in reports)),
        'all_inside': all(r.all_inside for r in reports),
    }
