"""
Port: RpnEvaluator
Responsibility: turn one whitespace-delimited RPN expression into an
EvaluationResult over signed 32-bit integers.
"""
from typing import Protocol, runtime_checkable

from contracts import EvaluationResult, OperatorSet


@runtime_checkable
class RpnEvaluator(Protocol):
    operator_set: OperatorSet

    def evaluate(self, text: str) -> EvaluationResult:
        """
        Evaluates an RPN expression such as "5 5 + 5 +".
        Leading/trailing whitespace is ignored; single spaces separate tokens.
        Returns Success(value) or the first error variant met scanning
        left to right. Never raises on malformed input; errors are encoded
        in the returned object.
        Holds no state between calls.
        """
        ...
