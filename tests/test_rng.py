import unittest

from tetris_rng import BagRandom


class BagRandomTests(unittest.TestCase):
    def test_every_bag_is_a_permutation(self):
        bag = BagRandom(seed=7)
        for _ in range(20):
            draws = [bag.next_piece() for _ in range(7)]
            self.assertEqual(sorted(draws), sorted(BagRandom.PIECES))

    def test_same_seed_same_sequence(self):
        a, b = BagRandom(seed=42), BagRandom(seed=42)
        self.assertEqual([a.next_piece() for _ in range(21)],
                         [b.next_piece() for _ in range(21)])

    def test_repeat_gap_is_bounded(self):
        bag = BagRandom(seed=5)
        seq = [next(bag) for _ in range(700)]
        last = {}
        for i, kind in enumerate(seq):
            if kind in last:
                self.assertLessEqual(i - last[kind], 13)
            last[kind] = i


if __name__ == "__main__":
    unittest.main()
