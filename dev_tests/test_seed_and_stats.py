# dev_tests/test_seed_and_stats.py
"""
Tests for:
  - components.seed_words.build_seed_index / SEED_WORDS
  - components.index_stats.letter_distribution / length_summary / summarize
"""

import os
import sys
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from components.index_stats import letter_distribution, length_summary, summarize  # noqa: E402
from components.seed_words import SEED_WORDS, build_seed_index  # noqa: E402
from tries.prefix_index import PrefixIndex  # noqa: E402


class TestSeedWords(unittest.TestCase):
    def test_seed_list_shape(self):
        self.assertEqual(len(SEED_WORDS), 49)
        self.assertEqual(len(set(SEED_WORDS)), 49)
        self.assertTrue(all(w.isalpha() and w.islower() for w in SEED_WORDS))
        self.assertEqual({w[0] for w in SEED_WORDS}, set("abcdefghi"))

    def test_build_seed_index(self):
        with self.assertLogs("autosuggest", level="INFO") as logs:
            index, elapsed_ms = build_seed_index()
        self.assertEqual(index.count(), 49)
        self.assertGreaterEqual(elapsed_ms, 0.0)
        self.assertEqual(index.query(""), sorted(SEED_WORDS))
        self.assertIn("Loaded 49 words", logs.output[0])

    def test_seed_queries(self):
        index, _ = build_seed_index()
        self.assertEqual(index.query("ba"),
                         ["badge", "balance", "ball", "banana", "bat", "battle"])
        self.assertEqual(index.query("cat"), ["cat", "caterpillar", "cattle"])
        self.assertEqual(index.query("xyz"), [])

    def test_build_from_custom_words(self):
        index, _ = build_seed_index(["Zebra", "zoo", "zoo"])
        self.assertEqual(index.query("z"), ["zebra", "zoo"])


class TestIndexStats(unittest.TestCase):
    def test_letter_distribution_seed(self):
        index, _ = build_seed_index()
        dist = letter_distribution(index)
        self.assertEqual(list(dist.columns), ["letter", "words"])
        self.assertEqual(list(dist["letter"]), list("abcdefghi"))
        self.assertEqual(list(dist["words"]), [6, 6, 6, 6, 5, 5, 5, 5, 5])
        self.assertEqual(int(dist["words"].sum()), index.count())

    def test_letter_distribution_empty(self):
        dist = letter_distribution(PrefixIndex())
        self.assertEqual(len(dist), 0)
        self.assertEqual(list(dist.columns), ["letter", "words"])

    def test_length_summary(self):
        summary = length_summary(PrefixIndex(["a", "abc"]))
        self.assertEqual(summary["min"], 1)
        self.assertEqual(summary["max"], 3)
        self.assertAlmostEqual(summary["mean"], 2.0)
        self.assertAlmostEqual(summary["median"], 2.0)

    def test_length_summary_empty(self):
        self.assertEqual(length_summary(PrefixIndex()),
                         {"min": 0, "max": 0, "mean": 0.0, "median": 0.0})

    def test_summarize(self):
        summary = summarize(PrefixIndex(["a", "ab", "ac", "b"]))
        self.assertEqual(summary["words"], 4)
        self.assertEqual(summary["nodes"], 5)
        self.assertAlmostEqual(summary["avg_branch_factor"], 2.0)
        self.assertEqual(summary["length_max"], 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
