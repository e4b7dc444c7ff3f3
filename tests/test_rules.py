import unittest

from tetris_rules import drop_interval, level_for_lines, line_clear_score


class LevelCurveTests(unittest.TestCase):
    def test_curve(self):
        for lines, level, interval in [(0, 1, 1000), (9, 1, 1000), (10, 2, 930),
                                       (25, 3, 860), (140, 15, 80), (500, 51, 80)]:
            self.assertEqual(level_for_lines(lines), level)
            self.assertEqual(drop_interval(level), interval)


class ScoreTests(unittest.TestCase):
    def test_table_times_level(self):
        self.assertEqual([line_clear_score(n, 1) for n in range(5)], [0, 100, 300, 500, 800])
        self.assertEqual(line_clear_score(4, 3), 2400)
        self.assertEqual(line_clear_score(2, 7), 2100)


if __name__ == "__main__":
    unittest.main()
