# placement_config.py
import json
import math
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Union

from boundary import BrainBoundary, Ellipsoid
from brain_region import RegionSpec

Y_OFFSET = 0.8  # Lifts the layout into the main brain volume

class PlacementConfigError(ValueError):
    """Raised when a placement configuration is inconsistent."""

def default_regions() -> List[RegionSpec]:
    """Four placement zones tuned to sit inside a ~4.6 unit wide brain model."""
    return [
        RegionSpec('right_frontal', (1.0, 0.2 + Y_OFFSET, 0.0), 1.2, share=0.25, minimum=6),
        RegionSpec('left_frontal', (-1.0, 0.2 + Y_OFFSET, 0.0), 1.2, share=0.25, minimum=6),
        RegionSpec('central_core', (0.0, -0.1 + Y_OFFSET, 0.0), 1.35, share=0.30, minimum=6),
        RegionSpec('occipital', (0.0, 0.05 + Y_OFFSET, -1.0), 0.95, share=None, minimum=4),
    ]

def default_ellipsoids() -> List[Ellipsoid]:
    """Two hemispheres joined by a central bridge."""
    hemisphere = (1.5, 1.3, 1.0)
    return [
        Ellipsoid('left_hemisphere', (-1.0, 0.2 + Y_OFFSET, 0.0), hemisphere),
        Ellipsoid('right_hemisphere', (1.0, 0.2 + Y_OFFSET, 0.0), hemisphere),
        Ellipsoid('bridge', (0.0, 0.2 + Y_OFFSET, 0.0), (0.8, 0.55, 0.85)),
    ]

@dataclass
class PlacementConfig:
    """Tunable geometry and sampling bounds for neuron placement."""
    min_distance: float = 0.36        # Minimum separation between any two neurons
    attempts_per_neuron: int = 200    # Attempt cap per region is quota * this
    radial_base: float = 0.4          # Radial fraction = base + span * cbrt(u)
    radial_span: float = 0.35
    regions: List[RegionSpec] = field(default_factory=default_regions)
    ellipsoids: List[Ellipsoid] = field(default_factory=default_ellipsoids)

    def validate(self) -> 'PlacementConfig':
        if not self.regions:
            raise PlacementConfigError("at least one region is required")
        if not self.ellipsoids:
            raise PlacementConfigError("at least one boundary ellipsoid is required")
        if not math.isfinite(self.min_distance) or self.min_distance < 0:
            raise PlacementConfigError(f"min_distance must be >= 0, got {self.min_distance}")
        if int(self.attempts_per_neuron) != self.attempts_per_neuron or self.attempts_per_neuron < 1:
            raise PlacementConfigError(
                f"attempts_per_neuron must be a positive integer, got {self.attempts_per_neuron}")
        for name in ('radial_base', 'radial_span'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise PlacementConfigError(f"{name} must be within [0, 1], got {value}")

        remainder_regions = [i for i, r in enumerate(self.regions) if r.share is None]
        if len(remainder_regions) > 1:
            raise PlacementConfigError("only one region may take the remainder")
        if remainder_regions and remainder_regions[0] != len(self.regions) - 1:
            raise PlacementConfigError("the remainder region must be listed last")

        total_share = 0.0
        for region in self.regions:
            _check_point(region.name, region.center)
            if not region.radius > 0:
                raise PlacementConfigError(f"region {region.name!r} needs a positive radius")
            if region.minimum < 0:
                raise PlacementConfigError(f"region {region.name!r} has a negative minimum")
            if region.share is not None:
                if region.share < 0:
                    raise PlacementConfigError(f"region {region.name!r} has a negative share")
                total_share += region.share
        if total_share > 1.0 + 1e-9:
            raise PlacementConfigError(f"region shares sum to {total_share:.3f}, above 1")

        for ellipsoid in self.ellipsoids:
            _check_point(ellipsoid.name, ellipsoid.center)
            if len(ellipsoid.radii) != 3 or not all(r > 0 for r in ellipsoid.radii):
                raise PlacementConfigError(
                    f"ellipsoid {ellipsoid.name!r} needs three positive semi-axes")
        return self

    def boundary(self) -> BrainBoundary:
        return BrainBoundary(self.ellipsoids)

    def scaled(self, factor: float) -> 'PlacementConfig':
        """Copy with every length multiplied by ``factor``."""
        if not factor > 0:
            raise PlacementConfigError(f"scale factor must be positive, got {factor}")
        return replace(
            self,
            min_distance=self.min_distance * factor,
            regions=[
                replace(r, center=tuple(c * factor for c in r.center), radius=r.radius * factor)
                for r in self.regions
            ],
            ellipsoids=[
                replace(e, center=tuple(c * factor for c in e.center),
                        radii=tuple(a * factor for a in e.radii))
                for e in self.ellipsoids
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlacementConfig':
        """Build a config from plain data; missing keys keep their defaults."""
        defaults = cls()
        try:
            regions = defaults.regions
            if 'regions' in data:
                regions = [
                    RegionSpec(
                        name=r['name'],
                        center=tuple(float(c) for c in r['center']),
                        radius=float(r['radius']),
                        share=None if r.get('share') is None else float(r['share']),
                        minimum=int(r.get('minimum', 0)),
                    )
                    for r in data['regions']
                ]
            ellipsoids = defaults.ellipsoids
            if 'ellipsoids' in data:
                ellipsoids = [
                    Ellipsoid(
                        name=e.get('name', f'ellipsoid_{i}'),
                        center=tuple(float(c) for c in e['center']),
                        radii=tuple(float(a) for a in e['radii']),
                    )
                    for i, e in enumerate(data['ellipsoids'])
                ]
            config = cls(
                min_distance=float(data.get('min_distance', defaults.min_distance)),
                attempts_per_neuron=int(data.get('attempts_per_neuron', defaults.attempts_per_neuron)),
                radial_base=float(data.get('radial_base', defaults.radial_base)),
                radial_span=float(data.get('radial_span', defaults.radial_span)),
                regions=regions,
                ellipsoids=ellipsoids,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise PlacementConfigError(f"malformed placement config: {e}") from e
        return config.validate()

def _check_point(name: str, point) -> None:
    if len(point) != 3 or not all(math.isfinite(float(c)) for c in point):
        raise PlacementConfigError(f"{name!r} needs a finite 3D center, got {point!r}")

def default_config() -> PlacementConfig:
    return PlacementConfig().validate()

def load_config(path: Union[str, Path]) -> PlacementConfig:
    """Load a placement config from a JSON file."""
    path = Path(path)
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise PlacementConfigError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PlacementConfigError(f"{path} must contain a JSON object")
    return PlacementConfig.from_dict(data)

def save_config(config: PlacementConfig, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
