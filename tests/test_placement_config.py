"""Tests for placement configuration loading and validation."""

import json
from dataclasses import replace

import pytest

from brain_region import RegionSpec
from placement_config import (
    PlacementConfig,
    PlacementConfigError,
    default_config,
    load_config,
    save_config,
)


class TestDefaults:

    def test_default_constants(self, config):
        assert config.min_distance == pytest.approx(0.36)
        assert config.attempts_per_neuron == 200
        assert [r.name for r in config.regions] == [
            'right_frontal', 'left_frontal', 'central_core', 'occipital']
        assert [r.share for r in config.regions] == [0.25, 0.25, 0.30, None]
        assert [r.minimum for r in config.regions] == [6, 6, 6, 4]
        assert [e.name for e in config.ellipsoids] == [
            'left_hemisphere', 'right_hemisphere', 'bridge']

    def test_region_centers_include_offset(self, config):
        centers = {r.name: r.center for r in config.regions}
        assert centers['right_frontal'] == pytest.approx((1.0, 1.0, 0.0))
        assert centers['central_core'] == pytest.approx((0.0, 0.7, 0.0))
        assert centers['occipital'] == pytest.approx((0.0, 0.85, -1.0))

    def test_scaled_shrinks_lengths(self, config):
        small = config.scaled(0.5)
        assert small.min_distance == pytest.approx(0.18)
        assert small.regions[0].radius == pytest.approx(0.6)
        assert small.ellipsoids[2].radii == pytest.approx((0.4, 0.275, 0.425))
        # Original untouched
        assert config.regions[0].radius == pytest.approx(1.2)


class TestValidation:

    @pytest.mark.parametrize('changes', [
        {'min_distance': -0.1},
        {'attempts_per_neuron': 0},
        {'radial_base': 1.5},
        {'radial_span': -0.1},
        {'regions': []},
        {'ellipsoids': []},
    ])
    def test_rejects_bad_scalars(self, changes):
        with pytest.raises(PlacementConfigError):
            replace(default_config(), **changes).validate()

    def test_rejects_shares_above_one(self, config):
        config.regions[0] = replace(config.regions[0], share=0.9)
        with pytest.raises(PlacementConfigError):
            config.validate()

    def test_rejects_remainder_not_last(self, config):
        config.regions.insert(0, RegionSpec('extra', (0, 0, 0), 1.0, share=None))
        with pytest.raises(PlacementConfigError):
            config.validate()

    def test_rejects_non_positive_radius(self, config):
        config.regions[1] = replace(config.regions[1], radius=0.0)
        with pytest.raises(PlacementConfigError):
            config.validate()

    def test_rejects_non_finite_center(self, config):
        config.ellipsoids[0] = replace(config.ellipsoids[0], center=(float('nan'), 0.0, 0.0))
        with pytest.raises(PlacementConfigError):
            config.validate()

    def test_config_error_is_value_error(self):
        assert issubclass(PlacementConfigError, ValueError)


class TestSerialization:

    def test_save_and_load(self, tmp_path, config):
        config.min_distance = 0.2
        config.attempts_per_neuron = 50
        path = save_config(config, tmp_path / 'nested' / 'config.json')

        loaded = load_config(path)
        assert loaded.min_distance == pytest.approx(0.2)
        assert loaded.attempts_per_neuron == 50
        assert loaded.regions == config.regions
        assert loaded.ellipsoids == config.ellipsoids

    def test_missing_keys_keep_defaults(self):
        loaded = PlacementConfig.from_dict({'min_distance': 0.5})
        assert loaded.min_distance == pytest.approx(0.5)
        assert loaded.regions == default_config().regions

    def test_malformed_region(self):
        with pytest.raises(PlacementConfigError):
            PlacementConfig.from_dict({'regions': [{'name': 'x'}]})

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{not json')
        with pytest.raises(PlacementConfigError):
            load_config(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / 'list.json'
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(PlacementConfigError):
            load_config(path)
