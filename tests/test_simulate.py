import os
import sys
import unittest
import contextlib
import io

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), 'tools'))

from simulate import simulate  # noqa: E402


class TestSimulate(unittest.TestCase):
    def test_given_seed_when_simulating_then_counts_are_consistent(self):
        with contextlib.redirect_stdout(io.StringIO()):
            summary = simulate(steps=200, seed=8, capacity=5, verbose=True)
        self.assertEqual(summary["played"] + summary["inserted"] + summary["rejected"], 200)
        # initial fill plus every accepted insert
        self.assertEqual(summary["totalPiecesGenerated"], 5 + summary["inserted"])
        self.assertEqual(summary["remainingInQueue"], 5 + summary["inserted"] - summary["played"])
        self.assertTrue(0 <= summary["remainingInQueue"] <= 5)

    def test_given_same_seed_when_simulating_twice_then_identical(self):
        a = simulate(steps=50, seed=3, capacity=4, verbose=False)
        b = simulate(steps=50, seed=3, capacity=4, verbose=False)
        self.assertEqual(a, b)


if __name__ == '__main__':
    unittest.main(verbosity=2)
