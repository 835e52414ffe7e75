"""
SAT oracle, the only place where logical deduction happens.

The finder never reasons about the grid geometry itself. It accumulates a
CNF formula in an oracle and asks one kind of question:

    "is the formula still satisfiable if I additionally assume these
     literals?"

The oracle wraps a PySAT solver so the concrete engine is swappable by
name ('g3' = Glucose 3, 'm22' = Minisat 2.2, 'mcb' = MapleChrono, ...).
A per-query timeout needs an engine that can be interrupted; engines that
cannot (CaDiCaL, Lingeling) are accepted only with timeout=None. One
oracle is created per run and owned by whoever created it; it is released
with close() or by using it as a context manager.

Clauses are only ever added, never removed. Unit clauses are remembered so
that a clause falsified by already-fixed literals is rejected at insertion
time with a ContradictionError instead of silently turning the formula
unsatisfiable.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional, Sequence, Set

from pysat.solvers import Solver, SolverNames

from barcenas_world.errors import (
    ConfigurationError,
    ContradictionError,
    FormulaError,
    SolverTimeoutError,
)

logger = logging.getLogger(__name__)


def known_solver_names() -> Set[str]:
    """Every name and alias PySAT accepts for Solver(name=...)."""
    names: Set[str] = set()
    for aliases in vars(SolverNames).values():
        if isinstance(aliases, tuple):
            names.update(aliases)
    return names


class SatOracle:
    """
    Incremental satisfiability checker over a growing clause set.

    Parameters
    ----------
    solver_name : str
        PySAT solver name. Default 'g3' (Glucose 3), which supports
        interruption and therefore timeouts.
    timeout : float or None
        Seconds allowed per satisfiability check. None means no limit.
        A limit needs an interruptible solver.

    Raises ConfigurationError for an unknown solver name, or for a solver
    that cannot be interrupted when a timeout is set.
    """

    def __init__(self, solver_name: str = "g3", timeout: Optional[float] = None):
        self.solver_name = solver_name
        self.timeout = timeout
        if solver_name not in known_solver_names():
            raise ConfigurationError(f"unknown SAT solver {solver_name!r}")
        self._solver = Solver(name=solver_name)
        self._num_vars = 0
        self._num_clauses = 0
        self._units: Set[int] = set()
        self._closed = False
        if timeout is not None:
            self._require_interrupt()

    def _require_interrupt(self) -> None:
        # Exercise the interrupt protocol once on the empty formula.
        try:
            self._solver.solve_limited(expect_interrupt=True)
            self._solver.interrupt()
            self._solver.clear_interrupt()
        except NotImplementedError as exc:
            self.close()
            raise ConfigurationError(
                f"solver {self.solver_name!r} cannot be interrupted, so it cannot "
                f"honour a timeout of {self.timeout}s; use timeout=None"
            ) from exc

    # ------------------------------------------------------------------
    # Formula construction
    # ------------------------------------------------------------------

    @property
    def num_vars(self) -> int:
        return self._num_vars

    @property
    def num_clauses(self) -> int:
        return self._num_clauses

    def new_vars(self, count: int) -> int:
        """Declare `count` more variables; returns the first new id."""
        if count < 1:
            raise FormulaError(f"cannot declare {count} variables")
        first = self._num_vars + 1
        self._num_vars += count
        return first

    def is_fixed(self, lit: int) -> bool:
        """True if `lit` has been asserted as a unit clause."""
        return lit in self._units

    def add_clause(self, clause: Sequence[int], context: Optional[str] = None) -> None:
        """
        Add one clause (a disjunction of signed variable ids).

        Raises FormulaError for undeclared variables and ContradictionError
        for an empty clause or one whose literals are all fixed false.
        """
        self._check_open()
        clause = [int(lit) for lit in clause]
        if not clause:
            raise ContradictionError(clause, context or "empty clause")
        for lit in clause:
            if lit == 0 or abs(lit) > self._num_vars:
                raise FormulaError(
                    f"literal {lit} out of range 1..{self._num_vars} in clause {clause}"
                )
        if all(-lit in self._units for lit in clause):
            raise ContradictionError(clause, context)

        if len(clause) == 1:
            self._units.add(clause[0])
        self._solver.add_clause(clause)
        self._num_clauses += 1

    def add_clauses(self, clauses: Iterable[Sequence[int]],
                    context: Optional[str] = None) -> None:
        for clause in clauses:
            self.add_clause(clause, context)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_satisfiable(self, assumptions: Sequence[int] = ()) -> bool:
        """
        Check satisfiability of the formula under unit `assumptions`.

        The assumptions are discarded afterwards; the formula is unchanged.
        Raises SolverTimeoutError if the check exceeds the timeout.
        """
        self._check_open()
        assumptions = [int(lit) for lit in assumptions]
        if self.timeout is None:
            return bool(self._solver.solve(assumptions=assumptions))

        timer = threading.Timer(self.timeout, self._solver.interrupt)
        timer.start()
        try:
            status = self._solver.solve_limited(
                assumptions=assumptions, expect_interrupt=True,
            )
        finally:
            timer.cancel()
            self._solver.clear_interrupt()

        if status is None:
            logger.error("solver %s timed out after %ss", self.solver_name, self.timeout)
            raise SolverTimeoutError(self.timeout, assumptions)
        return bool(status)

    def check_consistent(self, context: Optional[str] = None) -> None:
        """Raise ContradictionError if the formula itself is unsatisfiable."""
        if not self.is_satisfiable():
            raise ContradictionError([], context or "formula became unsatisfiable")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if not self._closed:
            self._solver.delete()
            self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise FormulaError("oracle has been closed")

    def __enter__(self) -> SatOracle:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return (f"SatOracle({self.solver_name}, vars={self._num_vars}, "
                f"clauses={self._num_clauses})")
