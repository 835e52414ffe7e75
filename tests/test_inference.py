"""Tests for the per-cell inference pass."""

import unittest

from barcenas_world.evidence import EvidenceEncoder, Reading
from barcenas_world.formula import PAST, FormulaBuilder
from barcenas_world.inference import InferenceDriver
from barcenas_world.oracle import SatOracle
from barcenas_world.state import KnowledgeGrid


class TestInferenceDriver(unittest.TestCase):

    def setUp(self):
        self.builder = FormulaBuilder(3, SatOracle())
        self.builder.build()
        self.driver = InferenceDriver(self.builder)
        self.grid = KnowledgeGrid(3)

    def tearDown(self):
        self.builder.oracle.close()

    def test_only_start_cell_initially(self):
        """Before evidence only the start cell is excluded."""
        staged = self.driver.run(self.grid)
        self.assertEqual(self.grid.excluded_cells(), [(1, 1)])
        self.assertEqual(staged, [[-self.builder.bank(PAST).literal(1, 1)]])
        self.assertEqual(self.driver.queries, 9)

    def test_staged_clauses_use_past_bank(self):
        """Staged conclusions are negative past literals."""
        EvidenceEncoder(self.builder).add(2, 1, Reading.ABOVE_RIGHT)
        staged = self.driver.run(self.grid)
        past = self.builder.bank(PAST)
        self.assertEqual(sorted(past.coord(c[0]) for c in staged),
                         self.grid.excluded_cells())
        self.assertTrue(all(len(c) == 1 and c[0] < 0 and c[0] in past for c in staged))
        self.assertEqual(self.grid.possible_cells(), [(3, 2), (3, 3)])

    def test_committed_conclusions_persist(self):
        """Committed conclusions survive new hypotheses."""
        EvidenceEncoder(self.builder).add(2, 1, Reading.ABOVE_RIGHT)
        staged = self.driver.run(self.grid)
        oracle = self.builder.oracle
        past = self.builder.bank(PAST)
        self.assertTrue(oracle.is_satisfiable([past.literal(2, 2)]))
        oracle.add_clauses(staged)
        self.assertFalse(oracle.is_satisfiable([past.literal(2, 2)]))


if __name__ == "__main__":
    unittest.main()
