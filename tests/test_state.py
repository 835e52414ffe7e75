"""Tests for the knowledge grid."""

import unittest

from barcenas_world.state import CellState, KnowledgeGrid


class TestKnowledgeGrid(unittest.TestCase):

    def test_initially_possible(self):
        """A new grid has every cell possible."""
        grid = KnowledgeGrid(3)
        self.assertEqual(len(grid.possible_cells()), 9)
        self.assertEqual(grid.num_excluded, 0)

    def test_set_and_get(self):
        """Cells are addressed 1-based by (x, y)."""
        grid = KnowledgeGrid(3)
        grid.set(2, 3, CellState.EXCLUDED)
        self.assertEqual(grid.get(2, 3), CellState.EXCLUDED)
        self.assertEqual(grid.excluded_cells(), [(2, 3)])

    def test_exclusion_is_monotonic(self):
        """An excluded cell cannot be set back to possible."""
        grid = KnowledgeGrid(3)
        grid.set(1, 1, CellState.EXCLUDED)
        grid.set(1, 1, CellState.EXCLUDED)
        with self.assertRaises(ValueError):
            grid.set(1, 1, CellState.POSSIBLE)

    def test_render_layout(self):
        """Top line is x = D, columns are y = 1..D."""
        grid = KnowledgeGrid(3)
        grid.set(3, 1, CellState.EXCLUDED)
        grid.set(1, 2, CellState.EXCLUDED)
        self.assertEqual(grid.render(), "X ? ?\n? ? ?\n? X ?")

    def test_from_rows(self):
        """Rows parse back into the grid they render from."""
        grid = KnowledgeGrid.from_rows(["X ? ?", "? ? ?", "? X ?"])
        self.assertEqual(grid.excluded_cells(), [(1, 2), (3, 1)])

    def test_from_rows_rejects_bad_symbols(self):
        """Unknown symbols and ragged rows are rejected."""
        with self.assertRaises(ValueError):
            KnowledgeGrid.from_rows(["X ?", "? O"])
        with self.assertRaises(ValueError):
            KnowledgeGrid.from_rows(["X ? ?", "? ?"])

    def test_equality_and_copy(self):
        """Copies compare equal and are independent."""
        a = KnowledgeGrid(2)
        b = a.copy()
        self.assertTrue(a.equals(b))
        b.set(2, 2, CellState.EXCLUDED)
        self.assertNotEqual(a, b)
        self.assertEqual(a.get(2, 2), CellState.POSSIBLE)
        self.assertFalse(KnowledgeGrid(2).equals(KnowledgeGrid(3)))


if __name__ == "__main__":
    unittest.main()
