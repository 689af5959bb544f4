"""
Unit tests for formation descriptor parsing.
"""
import unittest

from lineup_pitch.services.errors import EmptyFormationError, FormationStructureError
from lineup_pitch.services.formation_parser import parse_formation, require_line_sizes


class TestParseFormation(unittest.TestCase):
    """Test the tolerant descriptor parser."""

    def test_standard_formations(self) -> None:
        self.assertEqual(parse_formation("4-3-3"), [4, 3, 3])
        self.assertEqual(parse_formation("4-2-3-1"), [4, 2, 3, 1])
        self.assertEqual(parse_formation("5-4-1"), [5, 4, 1])

    def test_empty_tokens_are_dropped(self) -> None:
        self.assertEqual(parse_formation("4--3"), [4, 3])
        self.assertEqual(parse_formation("-4-4-2-"), [4, 4, 2])

    def test_empty_string(self) -> None:
        self.assertEqual(parse_formation(""), [])

    def test_invalid_tokens_are_dropped(self) -> None:
        """Zero, non-numeric and fractional tokens never make it into the result."""
        self.assertEqual(parse_formation("4-0-3"), [4, 3])
        self.assertEqual(parse_formation("4-x-3"), [4, 3])
        self.assertEqual(parse_formation("4-1.5-3"), [4, 3])
        self.assertEqual(parse_formation("four-four-two"), [])

    def test_negative_numbers_are_dropped(self) -> None:
        # "4--2" reads as 4, then an empty token, then 2; there is no way to
        # write a negative size, so every token is either positive or dropped
        self.assertEqual(parse_formation("-3"), [3])
        self.assertEqual(parse_formation("4--2-1"), [4, 2, 1])

    def test_whitespace_is_tolerated(self) -> None:
        self.assertEqual(parse_formation(" 4 - 3 - 3 "), [4, 3, 3])

    def test_non_string_input(self) -> None:
        self.assertEqual(parse_formation(None), [])
        self.assertEqual(parse_formation(433), [])

    def test_parsing_is_deterministic(self) -> None:
        for formation in ["4-3-3", "4--3", "", "x-1-y-2", "3-5-2", "--"]:
            with self.subTest(formation=formation):
                self.assertEqual(parse_formation(formation), parse_formation(formation))

    def test_never_raises_on_odd_input(self) -> None:
        for formation in ["---", "4-²-3", "٣-4", "1_0-2", "\n", "4-3-3 (attacking)"]:
            with self.subTest(formation=formation):
                result = parse_formation(formation)
                self.assertTrue(all(isinstance(n, int) and n > 0 for n in result))


class TestRequireLineSizes(unittest.TestCase):
    """Test the strict variant used by the analyzer."""

    def test_returns_sizes(self) -> None:
        self.assertEqual(require_line_sizes("3-5-2"), [3, 5, 2])

    def test_empty_result_is_structural_error(self) -> None:
        with self.assertRaises(EmptyFormationError) as ctx:
            require_line_sizes("abc")
        self.assertIsInstance(ctx.exception, FormationStructureError)
        self.assertEqual(ctx.exception.formation, "abc")


if __name__ == "__main__":
    unittest.main()
