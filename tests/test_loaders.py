"""Tests for the step and state file readers."""

import os
import tempfile
import unittest

from barcenas_world.errors import ConfigurationError
from barcenas_world.loaders import load_states, load_steps, parse_states, parse_steps

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


class TestSteps(unittest.TestCase):

    def test_parse(self):
        """A steps line parses into coordinates."""
        self.assertEqual(parse_steps("1,2 3,4  0,5\n"), [(1, 2), (3, 4), (0, 5)])

    def test_truncates_to_requested(self):
        """Only the requested number of steps is kept."""
        self.assertEqual(parse_steps("1,2 3,4 0,5", 2), [(1, 2), (3, 4)])

    def test_too_few_steps(self):
        """Asking for more steps than listed is an error."""
        with self.assertRaises(ConfigurationError):
            parse_steps("1,2 3,4", 3)

    def test_malformed(self):
        """Malformed coordinates are rejected."""
        for line in ("1;2", "1,2,3", "a,b", "1,"):
            with self.assertRaises(ConfigurationError):
                parse_steps(line)

    def test_load_fixture(self):
        """Fixture files load with the expected contents."""
        steps = load_steps(os.path.join(FIXTURES, "steps1.txt"), 5)
        self.assertEqual(steps, [(1, 2), (2, 2), (2, 3), (5, 3), (3, 3)])

    def test_only_first_line_used(self):
        """Lines after the first are ignored."""
        with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False) as f:
            f.write("1,2 2,2\n3,3 4,4\n")
        try:
            self.assertEqual(load_steps(f.name), [(1, 2), (2, 2)])
        finally:
            os.unlink(f.name)


class TestStates(unittest.TestCase):

    def test_parse_blocks(self):
        """States are read as blocks of D rows."""
        text = "X ?\nX X\n\n? X\nX X\n"
        states = parse_states(text, 2)
        self.assertEqual(len(states), 2)
        self.assertEqual(states[0].possible_cells(), [(2, 2)])
        self.assertEqual(states[1].possible_cells(), [(2, 1)])

    def test_wrong_row_count(self):
        """A block with the wrong number of rows is rejected."""
        with self.assertRaises(ConfigurationError):
            parse_states("X ?\nX X\n? ?\n", 2)

    def test_bad_symbol(self):
        """Symbols other than '?' and 'X' are rejected."""
        with self.assertRaises(ConfigurationError):
            parse_states("X ?\nX O\n", 2)

    def test_too_few_states(self):
        """Asking for more states than listed is an error."""
        with self.assertRaises(ConfigurationError):
            parse_states("X ?\nX X\n", 2, 2)

    def test_load_fixture(self):
        """Fixture files load with the expected contents."""
        states = load_states(os.path.join(FIXTURES, "states3.txt"), 5, 7)
        self.assertEqual(len(states), 7)
        self.assertEqual(states[-1].possible_cells(), [(3, 3)])


if __name__ == "__main__":
    unittest.main()
