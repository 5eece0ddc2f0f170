# neuron_placement.py
from typing import List, Optional, Tuple
import numpy as np

from boundary import BrainBoundary
from brain_region import BrainRegion, build_regions
from logger import PlacementLogger
from placement_config import PlacementConfig, default_config

Point3 = Tuple[float, float, float]

def _sample_candidate(rng: np.random.Generator, center: np.ndarray, radius: float,
                      radial_base: float, radial_span: float) -> np.ndarray:
    """Draw one point around a region center, biased away from its edge."""
    theta = rng.uniform(0, 2 * np.pi)
    phi = np.arccos(rng.uniform(-1, 1))  # Uniform on the sphere, no pole clustering
    r = radius * (radial_base + radial_span * np.cbrt(rng.uniform(0, 1)))

    return center + r * np.array([
        np.sin(phi) * np.cos(theta),
        np.sin(phi) * np.sin(theta),
        np.cos(phi),
    ])

class NeuronPlacementGenerator:
    """Places topic neurons inside the brain boundary by rejection sampling."""

    def __init__(self, config: Optional[PlacementConfig] = None,
                 rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.config = (config or default_config()).validate()
        self.boundary: BrainBoundary = self.config.boundary()
        self.rng = rng
        self.seed = seed
        self.logger = PlacementLogger.get_logger()

    def _make_rng(self) -> np.random.Generator:
        if self.rng is not None:
            return self.rng
        return np.random.default_rng(self.seed)

    def generate_regions(self, count: int) -> List[BrainRegion]:
        """
        Run one placement and keep the per-region breakdown.

        Args:
            count: Number of neurons requested

        Returns:
            Regions in placement order, each holding its accepted positions
            and its slice of the concatenated output.
        """
        regions = build_regions(count, self.config.regions)
        rng = self._make_rng()
        min_distance = self.config.min_distance

        total = sum(region.num_neurons for region in regions)
        placed = np.zeros((total, 3))
        n_placed = 0

        for region in regions:
            center = np.asarray(region.center, dtype=float)
            region.start_idx = n_placed
            max_attempts = region.num_neurons * self.config.attempts_per_neuron
            attempts = 0

            while n_placed - region.start_idx < region.num_neurons and attempts < max_attempts:
                attempts += 1
                candidate = _sample_candidate(rng, center, region.radius,
                                              self.config.radial_base, self.config.radial_span)

                if not self.boundary.contains(candidate):
                    continue

                if n_placed:
                    distances = np.linalg.norm(placed[:n_placed] - candidate, axis=1)
                    if np.any(distances < min_distance):
                        continue

                placed[n_placed] = candidate
                n_placed += 1

            region.end_idx = n_placed
            region.attempts = attempts
            region.positions = placed[region.start_idx:region.end_idx].copy()

            self.logger.debug(
                f"Region {region.name}: placed {region.placed}/{region.num_neurons} "
                f"in {attempts} attempts"
            )
            if not region.is_filled:
                self.logger.warning(
                    f"Region {region.name} under-filled: {region.placed}/{region.num_neurons} "
                    f"after {attempts} attempts"
                )

        return regions

    def generate(self, count: int) -> List[Point3]:
        """Return up to ``count`` neuron positions in region order."""
        positions = []
        for region in self.generate_regions(count):
            positions.extend(tuple(float(v) for v in p) for p in region.positions)
        return positions

def generate_brain_neurons(count: int = 40, config: Optional[PlacementConfig] = None,
                           rng: Optional[np.random.Generator] = None,
                           seed: Optional[int] = None) -> List[Point3]:
    """Generate neuron positions for ``count`` topics."""
    return NeuronPlacementGenerator(config=config, rng=rng, seed=seed).generate(count)
