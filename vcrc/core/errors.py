"""Exception hierarchy for VCRC.

All errors are raised fail-fast; nothing in the library recovers from them
internally.
"""

from __future__ import annotations


class VCRCError(Exception):
    """Base class for all VCRC errors."""


class ConstructionValidationError(VCRCError, ValueError):
    """Raised when a component or cycle argument violates a validation rule.

    The message contains every violated rule, one per line.
    """

    def __init__(self, messages: str | list[str]):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class SolverDivergenceError(VCRCError):
    """Raised when a root finder fails to converge within its bracket."""


class NoFeasibleRecuperatorPressureError(SolverDivergenceError):
    """Raised when no recuperator pressure satisfies the Zubadan constraints."""


class AnalysisPreconditionError(VCRCError, ValueError):
    """Raised for degenerate or infeasible entropy analysis source temperatures."""


class InputShapeError(VCRCError, ValueError):
    """Raised when batch analysis inputs have mismatched lengths."""
