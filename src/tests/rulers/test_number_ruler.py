import unittest
from rulerkit.config import RulerConfig
from rulerkit.errors import InvalidRangeError, InvalidSettingError
from rulerkit.rulers.number import NumberRuler
from rulerkit.rulers.orientation import Orientation


class TestNumberRuler(unittest.TestCase):
    def setUp(self):
        self.ruler = NumberRuler()
        self.ruler.set_allocation(800, 25)

    def test_defaults(self):
        ruler = NumberRuler()
        self.assertEqual((ruler.lower, ruler.upper), (0.0, 10.0))
        self.assertEqual(ruler.orientation, Orientation.HORIZONTAL)
        self.assertIsNone(ruler.interval)
        self.assertIsNone(ruler.first_tick())
        self.assertEqual(ruler.plan(), [])

    def test_invalid_initial_range(self):
        with self.assertRaises(InvalidRangeError):
            NumberRuler(lower=3, upper=3)
        with self.assertRaises(InvalidRangeError):
            NumberRuler(lower=float("nan"), upper=10)

    def test_allocation_sets_interval(self):
        self.assertEqual(self.ruler.interval, 1)
        self.assertEqual(self.ruler.length, 800)
        self.assertFalse(self.ruler.set_allocation(800, 25))

    def test_set_range(self):
        self.assertTrue(self.ruler.set_range(0, 100))
        self.assertEqual(self.ruler.interval, 10)
        self.assertFalse(self.ruler.set_range(0, 100))
        self.ruler.set_range(0, 37)
        self.assertEqual(self.ruler.interval, 5)

    def test_set_range_rejects_invalid(self):
        self.ruler.set_range(0, 100)
        for lower, upper in [(5, 3), (4, 4)]:
            with self.assertRaises(InvalidRangeError):
                self.ruler.set_range(lower, upper)
            self.assertEqual((self.ruler.lower, self.ruler.upper), (0, 100))
            self.assertEqual(self.ruler.interval, 10)

    def test_set_range_rejects_non_finite(self):
        self.ruler.set_range(0, 100)
        nan, inf = float("nan"), float("inf")
        for lower, upper in [(nan, 10), (0, nan), (0, inf), (-inf, 10)]:
            with self.assertRaises(InvalidRangeError):
                self.ruler.set_range(lower, upper)
            self.assertEqual((self.ruler.lower, self.ruler.upper), (0, 100))
            self.assertEqual(self.ruler.interval, 10)
        self.assertEqual(len(self.ruler.plan()), 10 * 4)

    def test_vertical_uses_height(self):
        ruler = NumberRuler(Orientation.VERTICAL, 0, 37)
        ruler.set_allocation(25, 800)
        self.assertEqual(ruler.length, 800)
        self.assertEqual(ruler.interval, 5)

    def test_zero_allocation_keeps_interval_undefined(self):
        ruler = NumberRuler(Orientation.VERTICAL)
        ruler.set_allocation(800, 0)
        self.assertIsNone(ruler.interval)

    def test_set_orientation(self):
        self.ruler.set_range(0, 100)
        self.assertTrue(self.ruler.set_orientation(Orientation.VERTICAL))
        self.assertFalse(self.ruler.set_orientation("vertical"))
        self.assertEqual(self.ruler.orientation, Orientation.VERTICAL)
        self.assertEqual((self.ruler.lower, self.ruler.upper, self.ruler.interval), (0, 100, 10))

    def test_min_major_tick_spacing(self):
        self.ruler.set_range(0, 100)
        self.assertTrue(self.ruler.set_min_major_tick_spacing(160))
        self.assertEqual(self.ruler.interval, 50)
        with self.assertRaises(InvalidSettingError):
            self.ruler.set_min_major_tick_spacing(0)
        self.assertEqual(self.ruler.config.min_major_tick_spacing, 160)

    def test_major_tick_length(self):
        self.assertTrue(self.ruler.set_major_tick_length(0.5))
        self.assertTrue(all(t.length == 0.5 for t in self.ruler.plan() if t.is_major))
        with self.assertRaises(InvalidSettingError):
            self.ruler.set_major_tick_length(1.5)
        self.assertEqual(self.ruler.config.major_tick_length, 0.5)

    def test_desired_size_does_not_touch_ticks(self):
        self.ruler.set_range(0, 100)
        self.assertTrue(self.ruler.set_desired_size(width=300))
        self.assertFalse(self.ruler.set_desired_size(width=300))
        self.assertEqual(self.ruler.config.desired_width, 300)
        self.assertEqual(self.ruler.interval, 10)

    def test_transform(self):
        self.ruler.set_range(0, 100)
        self.assertEqual(self.ruler.transform(50), 400)
        self.assertEqual(self.ruler.get_value_at(400), 50)
        self.assertEqual(self.ruler.pixel_spacing(10, 20), 80)

    def test_first_tick(self):
        self.ruler.set_range(-3, 97)
        self.assertEqual(self.ruler.interval, 10)
        self.assertEqual(self.ruler.first_tick(), -10)
        self.assertEqual(self.ruler.plan()[0].label, "-10")

    def test_orientation_mirrors_pixel_placement(self):
        horizontal = NumberRuler(Orientation.HORIZONTAL, -3, 97, RulerConfig())
        horizontal.set_allocation(400, 25)
        vertical = NumberRuler(Orientation.VERTICAL, -3, 97, RulerConfig())
        vertical.set_allocation(25, 400)

        h_ticks = horizontal.plan()
        self.assertEqual(h_ticks, vertical.plan())

        for tick in h_ticks:
            h_pos = horizontal.transform(tick.position)
            v_pos = vertical.transform(tick.position)
            self.assertEqual(h_pos, v_pos)
            h_line, _ = horizontal.strategy.tick(h_pos, tick.length, 400, 25, 1)
            v_line, _ = vertical.strategy.tick(v_pos, tick.length, 25, 400, 1)
            self.assertEqual((h_line[0], h_line[2]), (v_line[1], v_line[3]))

    def test_get_visible_range_str(self):
        self.ruler.set_range(2.5, 7)
        self.assertEqual(self.ruler.get_visible_range_str(), "2.5 - 7")


if __name__ == '__main__':
    unittest.main()
