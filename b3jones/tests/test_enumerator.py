"""
Tests for the breadth-first enumeration driver.
"""

import json
import os
import tempfile
import unittest

from b3jones.braid import Braid, Twist, canonical_braids
from b3jones.bracket import BraidData
from b3jones.config import EnumerationConfig
from b3jones.enumerator import BraidJonesEnumerator, enumerate_braid_jones, enumerate_braids
from b3jones.poly import LaurentPoly

U = LaurentPoly.from_dict({-2: -1, 2: -1})


class TestEnumerate(unittest.TestCase):
    """Tests for enumerate_braid_jones."""

    def test_length_0(self):
        """Test that length 0 yields only the identity."""
        records = enumerate_braid_jones(0)
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].braid, Braid.identity())
        self.assertEqual(records[0].jones, U * U * U)

    def test_length_2(self):
        """Test the record count up to length 2."""
        records = enumerate_braid_jones(2)
        self.assertEqual(len(records), 1 + 4 + 12)
        self.assertEqual(records[0].jones.get_coef(0), 0)

    def test_alias(self):
        """Test that enumerate_braids is the same function."""
        self.assertIs(enumerate_braids, enumerate_braid_jones)

    def test_order(self):
        """Test records are ordered by length, then parent, then generator."""
        records = enumerate_braid_jones(3)
        expected = [b for length in range(4) for b in canonical_braids(length)]
        self.assertEqual([r.braid for r in records], expected)

    def test_jones_matches_direct_fold(self):
        """Test memoized results against a fresh fold of each word."""
        for r in enumerate_braid_jones(4):
            with self.subTest(braid=str(r.braid)):
                self.assertEqual(r.jones, BraidData.from_braid(r.braid).jones)

    def test_negative_length(self):
        """Test that a negative bound is rejected."""
        with self.assertRaises(ValueError):
            enumerate_braid_jones(-1)
        with self.assertRaises(ValueError):
            BraidJonesEnumerator().run(-3)

    def test_non_int_length(self):
        """Test that float and bool bounds are rejected."""
        with self.assertRaises(ValueError):
            BraidJonesEnumerator().run(2.0)
        with self.assertRaises(ValueError):
            BraidJonesEnumerator().run(True)

    def test_max_length_option_rejected(self):
        """Test that the bound cannot also be passed as max_length."""
        with self.assertRaises(ValueError):
            enumerate_braid_jones(2, max_length=3)


class TestEnumerationResult(unittest.TestCase):
    """Tests for statistics and export."""

    @classmethod
    def setUpClass(cls):
        cls.result = BraidJonesEnumerator(max_length=4).run()

    def test_generation_sizes(self):
        """Test the per-length counts 1, 4, 12, 34, 92."""
        self.assertEqual(self.result.generation_sizes, [1, 4, 12, 34, 92])

    def test_cumulative_counts(self):
        """Test running totals of the generation sizes."""
        self.assertEqual(self.result.cumulative_counts(), [1, 5, 17, 51, 143])
        self.assertEqual(len(self.result), 143)

    def test_branching_factors(self):
        """Test ratios of consecutive generation sizes."""
        factors = self.result.branching_factors()
        self.assertEqual(factors[:2], [4.0, 3.0])
        for f in factors:
            self.assertGreaterEqual(f, 2.0)
            self.assertLessEqual(f, 4.0)

    def test_records_of_length(self):
        """Test slicing records by canonical length."""
        braids = [r.braid for r in self.result.records_of_length(1)]
        self.assertEqual(braids, [Braid((t,)) for t in Twist])
        self.assertEqual(len(self.result.records_of_length(4)), 92)
        self.assertEqual(self.result.records_of_length(5), [])

    def test_stats(self):
        """Test the statistics dict of a run."""
        stats = self.result.stats
        self.assertEqual(stats['total_braids'], 143)
        self.assertEqual(stats['peak_frontier'], 92)
        self.assertEqual(len(stats['generation_times']), 4)
        self.assertEqual(stats['config']['max_length'], 4)

    def test_stats_record_effective_length(self):
        """Test that stats record the bound passed to run, not the config default."""
        result = BraidJonesEnumerator(max_length=10).run(1)
        self.assertEqual(result.stats['max_length'], 1)
        self.assertEqual(result.stats['config']['max_length'], 1)
        self.assertEqual(result.generation_sizes, [1, 4])

    def test_summary(self):
        """Test the human-readable summary."""
        summary = self.result.summary()
        self.assertIn("Total braids: 143", summary)
        self.assertIn("length   4: 92", summary)

    def test_last_nonzero_length(self):
        """Test the constant-term scan over records."""
        identity_only = BraidJonesEnumerator().run(0)
        self.assertEqual(identity_only.last_nonzero_length(0), -1)
        self.assertEqual(identity_only.last_nonzero_length(6), 0)
        # Jones of a single crossing is U^2, which has constant term 2.
        self.assertEqual(BraidJonesEnumerator().run(1).last_nonzero_length(0), 1)

    def test_save(self):
        """Test the JSON export."""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "records.json")
            self.result.save(path)
            with open(path) as f:
                data = json.load(f)

        self.assertEqual(data["generation_sizes"], [1, 4, 12, 34, 92])
        self.assertEqual(len(data["records"]), 143)
        self.assertEqual(data["records"][0]["braid"], [])
        self.assertEqual(data["records"][0]["jones"], [[k, v] for k, v in (U * U * U).terms()])
        self.assertEqual(data["records"][1]["braid"], [1])


class TestConfig(unittest.TestCase):
    """Tests for EnumerationConfig validation."""

    def test_defaults(self):
        """Test default configuration values."""
        config = EnumerationConfig()
        self.assertEqual(config.max_length, 10)
        self.assertFalse(config.parallel)
        self.assertFalse(config.truncated_parity)

    def test_invalid_values(self):
        """Test that out-of-range fields are rejected."""
        with self.assertRaises(ValueError):
            EnumerationConfig(max_length=-1)
        with self.assertRaises(ValueError):
            EnumerationConfig(num_workers=0)
        with self.assertRaises(ValueError):
            EnumerationConfig(parallel_threshold=0)

    def test_cpu_count(self):
        """Test that num_workers=None resolves to the CPU count."""
        self.assertGreaterEqual(EnumerationConfig(num_workers=None).num_workers, 1)

    def test_config_and_options(self):
        """Test that a config and keyword options cannot be mixed."""
        with self.assertRaises(ValueError):
            BraidJonesEnumerator(EnumerationConfig(), max_length=3)

    def test_truncated_parity_option(self):
        """Test the remainder-variant writhe sign through the driver."""
        records = enumerate_braid_jones(1, truncated_parity=True)
        by_braid = {r.braid: r.jones for r in records}
        self.assertEqual(by_braid[Braid((Twist.A_INV,))], U * U * -3)
        self.assertEqual(by_braid[Braid((Twist.A,))], U * U)


class TestParallel(unittest.TestCase):
    """Process pool expansion gives the same records as the sequential loop."""

    def test_parallel_matches_sequential(self):
        """Test that pool expansion keeps records and order."""
        sequential = enumerate_braid_jones(4)
        parallel = enumerate_braid_jones(4, num_workers=2, parallel_threshold=1)

        self.assertEqual([r.braid for r in parallel], [r.braid for r in sequential])
        self.assertEqual([r.jones for r in parallel], [r.jones for r in sequential])

    def test_no_pool_below_threshold(self):
        """Test that no pool is started while every frontier is below the threshold."""
        result = BraidJonesEnumerator(num_workers=2, parallel_threshold=10 ** 6).run(3)
        self.assertIsNone(result.stats['pool_started_at'])
        self.assertEqual(result.generation_sizes, [1, 4, 12, 34])

    def test_pool_starts_at_threshold(self):
        """Test that the pool starts with the first frontier at the threshold."""
        # Frontier sizes are 1, 4, 12, so the pool is first used for length 3.
        result = BraidJonesEnumerator(num_workers=2, parallel_threshold=12).run(4)
        self.assertEqual(result.stats['pool_started_at'], 3)
        self.assertEqual(result.generation_sizes, [1, 4, 12, 34, 92])

    def test_sequential_never_starts_pool(self):
        """Test that a single worker never starts a pool."""
        result = BraidJonesEnumerator(parallel_threshold=1).run(2)
        self.assertIsNone(result.stats['pool_started_at'])


if __name__ == '__main__':
    unittest.main()
