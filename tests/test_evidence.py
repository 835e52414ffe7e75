"""Tests for sensor readings and their encoding."""

import unittest

from barcenas_world.errors import ContradictionError
from barcenas_world.evidence import EvidenceEncoder, Reading
from barcenas_world.formula import ABOVE, FUTURE, LEFT, RIGHT, FormulaBuilder
from barcenas_world.oracle import SatOracle


class TestReading(unittest.TestCase):

    def test_parse_all_nine(self):
        """Every reading parses from its own value."""
        for reading in Reading:
            self.assertIs(Reading.parse(reading.value), reading)

    def test_parse_ignores_order_and_case(self):
        """Direction order and case do not matter."""
        self.assertIs(Reading.parse("right,above"), Reading.ABOVE_RIGHT)
        self.assertIs(Reading.parse("LEFT, RIGHT, BELOW, ABOVE"), Reading.FOUND)

    def test_parse_rejects_unknown(self):
        """Unknown direction sets are rejected."""
        for text in ("", "UP", "ABOVE,BELOW", "LEFT,RIGHT"):
            with self.assertRaises(ValueError):
                Reading.parse(text)

    def test_directions(self):
        """Readings expose their lowercase directions."""
        self.assertEqual(Reading.BELOW_LEFT.directions, {"below", "left"})
        self.assertTrue(Reading.FOUND.is_found)
        self.assertFalse(Reading.ABOVE.is_found)


class TestEncoder(unittest.TestCase):

    def setUp(self):
        self.builder = FormulaBuilder(4, SatOracle())
        self.builder.build()
        self.encoder = EvidenceEncoder(self.builder)
        self.future = self.builder.bank(FUTURE)

    def tearDown(self):
        self.builder.oracle.close()

    def possible(self):
        oracle = self.builder.oracle
        return {(x, y) for x, y in self.builder.index.cells()
                if oracle.is_satisfiable([self.future.literal(x, y)])}

    def test_diagonal_asserts_two_sensors(self):
        """A diagonal reading asserts both sensor literals."""
        clauses = self.encoder.clauses_for(2, 3, Reading.ABOVE_RIGHT)
        self.assertEqual(clauses, [[self.builder.bank(ABOVE).literal(2, 3)],
                                   [self.builder.bank(RIGHT).literal(2, 3)]])

    def test_diagonal_leaves_quadrant(self):
        """Only the quadrant between two sensors stays possible."""
        self.encoder.add(2, 2, Reading.ABOVE_RIGHT)
        self.assertEqual(self.possible(), {(3, 3), (3, 4), (4, 3), (4, 4)})

    def test_single_direction_pins_line(self):
        """A single direction keeps only the cells on its line."""
        self.encoder.add(2, 2, Reading.ABOVE)
        self.assertEqual(self.possible(), {(2, 3), (2, 4)})

    def test_left_reading(self):
        """A LEFT reading keeps the cells to the left on the same row."""
        self.encoder.add(3, 2, Reading.LEFT)
        self.assertEqual(self.possible(), {(1, 2), (2, 2)})

    def test_left_off_line_cells(self):
        """LEFT excludes the cells in front that are off the line."""
        cells = list(self.encoder.off_line(LEFT, 3, 2))
        self.assertEqual(len(cells), 6)
        self.assertTrue(all(i < 3 and j != 2 for i, j in cells))

    def test_found_excludes_everything_else(self):
        """A found reading excludes every other cell."""
        added = self.encoder.add(3, 4, Reading.FOUND)
        self.assertEqual(added, 15)
        self.assertEqual(self.possible(), {(3, 4)})

    def test_conflicting_readings(self):
        """Readings that contradict each other are rejected."""
        self.encoder.add(2, 2, Reading.ABOVE)
        with self.assertRaises(ContradictionError) as ctx:
            self.encoder.add(2, 2, Reading.BELOW)
        self.assertIn("BELOW at (2,2)", str(ctx.exception))

    def test_two_found_cells(self):
        """Barcenas cannot be found in two places."""
        self.encoder.add(2, 2, Reading.FOUND)
        with self.assertRaises(ContradictionError):
            self.encoder.add(3, 3, Reading.FOUND)


if __name__ == "__main__":
    unittest.main()
