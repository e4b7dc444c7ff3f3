import unittest

from tetris_config import CONFIG
from tetris_input import InputState, ShiftRepeat


class InputStateTests(unittest.TestCase):
    def test_direction(self):
        self.assertEqual(InputState().direction, 0)
        self.assertEqual(InputState(left=True).direction, -1)
        self.assertEqual(InputState(right=True).direction, 1)
        self.assertEqual(InputState(left=True, right=True).direction, 0)

    def test_only_horizontal_flags(self):
        self.assertEqual(set(vars(InputState())), {"left", "right"})


class ShiftRepeatTests(unittest.TestCase):
    def setUp(self):
        self.shift = ShiftRepeat(das_ms=150, arr_ms=40)

    def test_defaults_come_from_config(self):
        shift = ShiftRepeat()
        self.assertEqual((shift.das_ms, shift.arr_ms), (CONFIG["DAS_MS"], CONFIG["ARR_MS"]))

    def test_first_press_steps_immediately(self):
        self.assertEqual(self.shift.update(16, 1), 1)
        self.assertEqual(self.shift.update(16, 1), 0)

    def test_repeats_after_das(self):
        self.shift.update(16, 1)
        self.assertEqual(self.shift.update(100, 1), 0)
        self.assertEqual(self.shift.update(60, 1), 1)
        self.assertEqual(self.shift.update(100, 1), 3)

    def test_long_frame_consumes_several_repeats(self):
        self.shift.update(16, -1)
        self.assertEqual(self.shift.update(310, -1), 7)

    def test_switch_and_release_reset(self):
        self.shift.update(16, 1)
        self.shift.update(200, 1)
        self.assertEqual(self.shift.update(16, -1), 1)
        self.assertEqual(self.shift.update(16, 0), 0)
        self.assertEqual((self.shift.dir, self.shift.das, self.shift.arr), (0, 0.0, 0.0))
        self.assertEqual(self.shift.update(16, -1), 1)


if __name__ == "__main__":
    unittest.main()
