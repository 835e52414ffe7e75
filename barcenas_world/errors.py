"""
Exception hierarchy for the Barcenas World finder.

Every failure the finder can raise derives from BarcenasError, so callers
that only care about "the run aborted" can catch a single type:

    BarcenasError
    ├── ConfigurationError   bad dimensions, malformed step/state files
    ├── FormulaError         formula construction defects
    │   └── ContradictionError   clause conflicts with fixed literals
    └── SolverTimeoutError   the oracle exceeded its time budget
"""

from __future__ import annotations

from typing import Optional, Sequence


class BarcenasError(Exception):
    """Base class for all finder errors."""


class ConfigurationError(BarcenasError):
    """Invalid configuration or malformed input files."""


class FormulaError(BarcenasError):
    """Internal contract violation while building the formula."""


class ContradictionError(FormulaError):
    """A clause conflicts with literals already fixed as units."""

    def __init__(self, clause: Sequence[int], context: Optional[str] = None):
        self.clause = list(clause)
        self.context = context
        msg = f"clause {self.clause} contradicts fixed literals"
        if context:
            msg += f" ({context})"
        super().__init__(msg)


class SolverTimeoutError(BarcenasError):
    """The SAT oracle did not answer within its timeout."""

    def __init__(self, timeout: float, assumptions: Sequence[int] = ()):
        self.timeout = timeout
        self.assumptions = list(assumptions)
        super().__init__(
            f"satisfiability check exceeded {timeout:g}s "
            f"(assumptions={self.assumptions})"
        )
