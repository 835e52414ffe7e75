"""
Barcenas World: locating a hidden target with SAT inference.

A finder agent walks a D x D grid, asks a sound sensor in which direction
Barcenas is, encodes each answer as clauses of a boolean formula and asks
a SAT oracle, cell by cell, where he provably cannot be.
"""

from barcenas_world.errors import (
    BarcenasError, ConfigurationError, ContradictionError,
    FormulaError, SolverTimeoutError,
)
from barcenas_world.indexing import VariableBank, VariableIndex
from barcenas_world.oracle import SatOracle
from barcenas_world.state import CellState, KnowledgeGrid
from barcenas_world.formula import FormulaBuilder
from barcenas_world.evidence import EvidenceEncoder, Reading
from barcenas_world.inference import InferenceDriver
from barcenas_world.finder import BarcenasFinder, FinderConfig, Phase, StepLog

__version__ = "0.1.0"
__all__ = [
    "BarcenasError",
    "ConfigurationError",
    "ContradictionError",
    "FormulaError",
    "SolverTimeoutError",
    "VariableBank",
    "VariableIndex",
    "SatOracle",
    "CellState",
    "KnowledgeGrid",
    "FormulaBuilder",
    "EvidenceEncoder",
    "Reading",
    "InferenceDriver",
    "BarcenasFinder",
    "FinderConfig",
    "Phase",
    "StepLog",
]
