from __future__ import annotations

import math
import unittest

from app.domain.entities.apr_history import PoolSnapshot
from app.domain.services.apr_estimation import (
    annualized_fee_apr,
    compute_base_apr,
    round2,
    volume_boost,
)


def _pool(**overrides) -> PoolSnapshot:
    payload = {
        "id": "aegis-ausd",
        "tvl_usd": 10_000_000,
        "volume_24h_usd": 1_000_000,
        "fees_24h_usd": 3_000,
        "baseline_apr": 30,
    }
    payload.update(overrides)
    return PoolSnapshot(**payload)


class AprEstimationTests(unittest.TestCase):
    def test_reference_pool_blends_baseline_and_fee_apr(self):
        # fee_apr=10.95, blended=23.3325, boost=1+0.08*tanh(-0.9)~0.9427
        # exact product is 21.9954..., so two-decimal rounding gives 22.00 (not 21.98)
        self.assertAlmostEqual(annualized_fee_apr(fees_24h_usd=3_000, tvl_usd=10_000_000), 10.95)
        self.assertEqual(compute_base_apr(_pool()), 22.0)

    def test_zero_tvl_uses_only_baseline(self):
        result = compute_base_apr(_pool(tvl_usd=0, volume_24h_usd=5, fees_24h_usd=5, baseline_apr=10))
        # boost = 1 + 0.08 * tanh(-1)
        self.assertEqual(result, 6.1)

    def test_negative_inputs_are_clamped_to_zero(self):
        self.assertEqual(compute_base_apr(_pool(baseline_apr=-50, fees_24h_usd=0)), 0.0)
        self.assertEqual(compute_base_apr(_pool(fees_24h_usd=-1_000_000, baseline_apr=0)), 0.0)

    def test_boost_stays_bounded(self):
        for ratio in (-1e9, -3.0, 0.0, 0.5, 1.0, 2.0, 50.0, 1e9):
            boost = volume_boost(ratio)
            self.assertGreaterEqual(boost, 0.92)
            self.assertLessEqual(boost, 1.08)
        self.assertEqual(volume_boost(1.0), 1.0)

    def test_high_volume_pool_gets_higher_estimate(self):
        quiet = compute_base_apr(_pool(volume_24h_usd=100_000))
        busy = compute_base_apr(_pool(volume_24h_usd=30_000_000))
        self.assertGreater(busy, quiet)

    def test_round2_matches_to_fixed_semantics(self):
        self.assertEqual(round2(0.125), 0.13)
        self.assertEqual(round2(-0.125), -0.13)
        self.assertEqual(round2(1.005), 1.0)
        self.assertEqual(round2(2.675), 2.67)
        self.assertEqual(round2(21.995458), 22.0)

    def test_huge_values_are_rounded_without_decimal_overflow(self):
        self.assertEqual(round2(1e27), 1e27)
        self.assertEqual(round2(1.7e308), 1.7e308)
        self.assertEqual(round2(float("inf")), float("inf"))

    def test_huge_baseline_is_estimated_not_rejected(self):
        result = compute_base_apr(_pool(tvl_usd=1.0, volume_24h_usd=0, fees_24h_usd=0, baseline_apr=1e27))
        # 0.65e27 * (1 + 0.08 * tanh(-1))
        self.assertGreater(result, 6.0e26)
        self.assertLess(result, 6.2e26)

    def test_dust_tvl_pool_does_not_fail(self):
        result = compute_base_apr(_pool(tvl_usd=1e-30, volume_24h_usd=0, fees_24h_usd=1.0, baseline_apr=5))
        self.assertTrue(math.isfinite(result))
        self.assertGreater(result, 1e34)


if __name__ == "__main__":
    unittest.main()
