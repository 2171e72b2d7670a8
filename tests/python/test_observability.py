import unittest

import numpy as np

from cachematrix import CacheObservability


class TestCacheObservability(unittest.TestCase):
    def setUp(self):
        self.obs = CacheObservability()

    def test_last_is_none_before_any_record(self):
        self.assertIsNone(self.obs.last())
        self.assertIsNone(self.obs.last("cache_solve"))

    def test_records_latest_overall_and_per_op(self):
        self.obs.record("cache_solve", "miss", np.eye(2))
        self.obs.record("set_matrix", "invalidate", np.eye(3))

        self.assertEqual(self.obs.last()["op"], "set_matrix")
        self.assertEqual(self.obs.last("cache_solve")["event"], "miss")
        self.assertEqual(self.obs.last("cache_solve")["shape"], (2, 2))
        self.assertEqual(self.obs.last("set_matrix")["shape"], (3, 3))

    def test_trace_tags_count_up(self):
        first = self.obs.record("cache_solve", "miss")
        second = self.obs.record("cache_solve", "hit")
        self.assertEqual(first["trace_tag"], "cache_solve:1")
        self.assertEqual(second["trace_tag"], "cache_solve:2")
        self.assertIsNone(first["shape"])

    def test_last_returns_a_copy(self):
        self.obs.record("cache_solve", "hit")
        self.obs.last()["event"] = "tampered"
        self.assertEqual(self.obs.last()["event"], "hit")

    def test_counts_and_clear(self):
        for event in ("miss", "hit", "hit", "keep"):
            self.obs.record("cache_solve", event)
        self.assertEqual(self.obs.counts(), {"hit": 2, "miss": 1, "invalidate": 0, "keep": 1})

        self.obs.clear()
        self.assertIsNone(self.obs.last())
        self.assertEqual(sum(self.obs.counts().values()), 0)

    def test_unknown_event_rejected(self):
        with self.assertRaises(ValueError):
            self.obs.record("cache_solve", "evict")

    def test_disabled_recorder_keeps_nothing(self):
        obs = CacheObservability(enabled=False)
        self.assertIsNone(obs.record("cache_solve", "hit"))
        self.assertIsNone(obs.last())
        self.assertEqual(obs.counts()["hit"], 0)


if __name__ == "__main__":
    unittest.main()
