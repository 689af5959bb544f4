"""
Unit tests for the coordinate calculator.
"""
import unittest

import pytest

from lineup_pitch.services.coordinate_calculator import CoordinateCalculator

from tests.helpers import outfield


class TestCoordinateCalculator(unittest.TestCase):
    """Test line spacing, lateral spacing and pitch bounds."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.calculator = CoordinateCalculator()

    def test_single_player_is_centred(self) -> None:
        positions = self.calculator.calculate_positions([outfield(1)])
        self.assertEqual(len(positions), 1)
        self.assertEqual(positions[0].x, 50)
        self.assertEqual(positions[0].y, 70)

    def test_even_lateral_spacing(self) -> None:
        positions = self.calculator.calculate_positions([outfield(4)])
        xs = [p.x for p in positions]

        # inner width 92 split into 5 gaps of 18.4
        self.assertEqual(xs, [pytest.approx(v) for v in (22.4, 40.8, 59.2, 77.6)])
        gaps = [b - a for a, b in zip(xs, xs[1:])]
        for gap in gaps:
            self.assertAlmostEqual(gap, 18.4)
        self.assertAlmostEqual(xs[0] - 4, 96 - xs[-1])

    def test_line_heights(self) -> None:
        for line_count in range(1, 7):
            for line_index in range(line_count):
                expected = 4 + 132 * (line_index + 0.5) / line_count
                self.assertAlmostEqual(self.calculator.line_y(line_index, line_count), expected)

    def test_bounds_for_many_shapes(self) -> None:
        for line_count in range(1, 7):
            for size in range(1, 12):
                with self.subTest(lines=line_count, size=size):
                    lines = [outfield(size) for _ in range(line_count)]
                    positions = self.calculator.calculate_positions(lines)

                    self.assertEqual(len(positions), line_count * size)
                    for position in positions:
                        self.assertGreaterEqual(position.x, 4)
                        self.assertLessEqual(position.x, 96)
                        self.assertGreaterEqual(position.y, 4)
                        self.assertLessEqual(position.y, 136)

    def test_place_matches_flattened_order(self) -> None:
        lines = [outfield(3, "A"), outfield(2, "B"), outfield(1, "C")]
        placements = self.calculator.place(lines)
        flat = [p for line in lines for p in line]

        self.assertEqual([pl.player for pl in placements], flat)
        self.assertEqual([pl.position for pl in placements],
                         self.calculator.calculate_positions(lines))
        self.assertEqual([(pl.line_index, pl.slot_index) for pl in placements],
                         [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (2, 0)])

    def test_lines_do_not_overlap(self) -> None:
        lines = [outfield(4), outfield(4), outfield(2), outfield(1)]
        ys = sorted({p.y for p in self.calculator.calculate_positions(lines)})
        self.assertEqual(len(ys), 4)

    def test_empty_input(self) -> None:
        self.assertEqual(self.calculator.calculate_positions([]), [])

    def test_invalid_margin(self) -> None:
        with self.assertRaises(ValueError):
            CoordinateCalculator(width=100, height=140, margin=50)
        with self.assertRaises(ValueError):
            CoordinateCalculator(margin=-1)


if __name__ == "__main__":
    unittest.main()
