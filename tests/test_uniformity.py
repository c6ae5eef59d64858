import unittest
import random
import sys
import os
from collections import Counter

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_forge.algo import registry

# Number of spanning trees of the 3x3 grid graph
SPANNING_TREES_3X3 = 192
TRIALS = SPANNING_TREES_3X3 * 40


def sample_trees(algo_id, trials, seed):
    rng = random.Random(seed)
    counts = Counter()
    for _ in range(trials):
        grid = registry.create(algo_id, 3, 3, rng=rng).run_all()
        counts[grid.snapshot().walls()] += 1
    return counts


def chi_square(counts, categories, trials):
    expected = trials / categories
    observed = list(counts.values()) + [0] * (categories - len(counts))
    return sum((o - expected) ** 2 / expected for o in observed)


class TestUniformity(unittest.TestCase):
    # df = 191: mean 191, std ~19.5. The bound sits ~6 std above the mean.
    CHI_SQUARE_BOUND = 310

    def assert_uniform(self, algo_id):
        counts = sample_trees(algo_id, TRIALS, seed=2024)
        self.assertEqual(len(counts), SPANNING_TREES_3X3, f"{algo_id} missed some spanning trees")
        stat = chi_square(counts, SPANNING_TREES_3X3, TRIALS)
        self.assertLess(stat, self.CHI_SQUARE_BOUND, f"{algo_id} looks biased (chi2={stat:.1f})")

    def test_wilson_is_uniform(self):
        self.assert_uniform("wilson")

    def test_aldous_broder_is_uniform(self):
        self.assert_uniform("aldous-broder")

    def test_binary_tree_is_not(self):
        # Sanity check that the statistic can tell a biased generator apart
        counts = sample_trees("binary-tree", 2000, seed=1)
        self.assertEqual(len(counts), 16)
        self.assertGreater(chi_square(counts, SPANNING_TREES_3X3, 2000), self.CHI_SQUARE_BOUND)

if __name__ == '__main__':
    unittest.main()
