# boundary.py
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np

@dataclass
class Ellipsoid:
    """Axis-aligned ellipsoid used as one lobe of the brain boundary."""
    name: str
    center: Tuple[float, float, float]
    radii: Tuple[float, float, float]  # Semi-axes along x, y, z

    def normalized_distance(self, points) -> np.ndarray:
        """Normalized squared distance to the center; <= 1 means inside."""
        pts = np.asarray(points, dtype=float)
        scaled = (pts - np.asarray(self.center, dtype=float)) / np.asarray(self.radii, dtype=float)
        return np.sum(scaled * scaled, axis=-1)

    def contains(self, point) -> bool:
        return bool(self.normalized_distance(point) <= 1.0)

class BrainBoundary:
    """Union of ellipsoids approximating the brain silhouette."""

    def __init__(self, ellipsoids: Sequence[Ellipsoid]):
        if not ellipsoids:
            raise ValueError("BrainBoundary needs at least one ellipsoid")
        self.ellipsoids: List[Ellipsoid] = list(ellipsoids)

    def contains(self, point) -> bool:
        """True if the point lies inside at least one ellipsoid."""
        return any(ellipsoid.contains(point) for ellipsoid in self.ellipsoids)

    def contains_many(self, points) -> np.ndarray:
        """Vectorized containment test for an (n, 3) array of points."""
        pts = np.asarray(points, dtype=float).reshape(-1, 3)
        inside = np.zeros(len(pts), dtype=bool)
        for ellipsoid in self.ellipsoids:
            inside |= ellipsoid.normalized_distance(pts) <= 1.0
        return inside

    def bounding_box(self) -> Tuple[np.ndarray, np.ndarray]:
        """Axis-aligned box enclosing every ellipsoid."""
        centers = np.array([e.center for e in self.ellipsoids], dtype=float)
        radii = np.array([e.radii for e in self.ellipsoids], dtype=float)
        return (centers - radii).min(axis=0), (centers + radii).max(axis=0)
