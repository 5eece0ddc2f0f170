"""Tests for region quota partitioning."""

import pytest

from brain_region import build_regions, compute_region_quotas, validate_count, RegionSpec


class TestRegionQuotas:

    def test_forty_splits_25_25_30_20(self, config):
        assert compute_region_quotas(40, config.regions) == [10, 10, 12, 8]

    def test_quotas_sum_to_count(self, config):
        for count in range(0, 201):
            quotas = compute_region_quotas(count, config.regions)
            assert sum(quotas) == count, count
            assert all(q >= 0 for q in quotas)

    def test_minimums_apply_once_affordable(self, config):
        assert compute_region_quotas(22, config.regions) == [6, 6, 6, 4]
        assert compute_region_quotas(24, config.regions) == [6, 6, 7, 5]

    def test_small_counts_drop_minimums(self, config):
        assert compute_region_quotas(8, config.regions) == [2, 2, 2, 2]
        assert compute_region_quotas(4, config.regions) == [1, 1, 1, 1]
        assert compute_region_quotas(1, config.regions) == [0, 0, 0, 1]
        assert compute_region_quotas(0, config.regions) == [0, 0, 0, 0]

    def test_overshooting_minimums_fall_back_to_proportional(self):
        regions = [
            RegionSpec('a', (0, 0, 0), 1.0, share=0.9, minimum=1),
            RegionSpec('b', (0, 0, 0), 1.0, share=None, minimum=5),
        ]
        # 10 covers the minimums, but 9 + 5 would overshoot
        assert compute_region_quotas(10, regions) == [9, 1]

    @pytest.mark.parametrize('bad', [-1, 2.5, '3', True, None])
    def test_rejects_invalid_counts(self, bad):
        with pytest.raises(ValueError):
            validate_count(bad)

    def test_build_regions_keeps_order(self, config):
        regions = build_regions(40, config.regions)
        assert [r.name for r in regions] == [
            'right_frontal', 'left_frontal', 'central_core', 'occipital']
        assert [r.num_neurons for r in regions] == [10, 10, 12, 8]
        assert all(r.placed == 0 for r in regions)
