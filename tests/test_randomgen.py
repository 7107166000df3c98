"""Random generator variants, range validation, and shuffling."""

from __future__ import annotations

import random
import unittest

from consoletools.randomgen import (
    INT32_MAX,
    INT32_MIN,
    IntegerRange,
    InvalidRangeError,
    RandomGenerator,
    RealRange,
    shuffle,
)


class DistributionTests(unittest.TestCase):
    def test_integer_values_stay_within_inclusive_bounds(self) -> None:
        generator = RandomGenerator(IntegerRange(-3, 3), rng=random.Random(7))

        values = generator.take(500)

        self.assertTrue(all(isinstance(value, int) for value in values))
        self.assertTrue(all(-3 <= value <= 3 for value in values))
        self.assertEqual(set(values), set(range(-3, 4)))

    def test_single_point_ranges_always_return_that_point(self) -> None:
        self.assertEqual(RandomGenerator(IntegerRange(5, 5)).take(3), [5, 5, 5])
        self.assertEqual(RandomGenerator(RealRange(2.5, 2.5)).next(), 2.5)

    def test_real_values_stay_within_bounds(self) -> None:
        generator = RandomGenerator(RealRange(-1.0, 1.0), rng=random.Random(3))

        for value in generator.take(200):
            self.assertIsInstance(value, float)
            self.assertGreaterEqual(value, -1.0)
            self.assertLessEqual(value, 1.0)

    def test_defaults(self) -> None:
        self.assertEqual(IntegerRange(), IntegerRange(INT32_MIN, INT32_MAX))
        self.assertEqual(RealRange(), RealRange(0.0, 1.0))

    def test_inverted_ranges_are_rejected_at_construction(self) -> None:
        with self.assertRaises(InvalidRangeError):
            IntegerRange(2, 1)
        with self.assertRaises(ValueError):
            RealRange(1.0, 0.5)

    def test_bound_types_are_checked(self) -> None:
        with self.assertRaises(TypeError):
            IntegerRange(0.5, 2)
        with self.assertRaises(TypeError):
            IntegerRange(True, 2)
        with self.assertRaises(TypeError):
            RealRange(0.0, float("inf"))

    def test_seeded_generators_are_reproducible(self) -> None:
        first = RandomGenerator(IntegerRange(0, 1000), rng=random.Random(11)).take(10)
        second = RandomGenerator(IntegerRange(0, 1000), rng=random.Random(11)).take(10)

        self.assertEqual(first, second)

    def test_negative_take_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RandomGenerator(IntegerRange(0, 1)).take(-1)


class ShuffleTests(unittest.TestCase):
    def test_shuffle_permutes_in_place(self) -> None:
        items = list(range(50))

        shuffle(items, rng=random.Random(5))

        self.assertEqual(sorted(items), list(range(50)))
        self.assertNotEqual(items, list(range(50)))


if __name__ == "__main__":
    unittest.main()
