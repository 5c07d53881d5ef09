"""
result_formatter.py - human-readable messages for EvaluationResult variants.

Used by the CLI and the HTTP API; the evaluator itself never formats.
"""
from __future__ import annotations

from contracts import (
    DivByZero,
    EvaluationResult,
    FoundNonDigit,
    FoundNonOperator,
    InputEmpty,
    InputNotComplete,
    InputNumberOverflow,
    InvalidCharacterFound,
    Overflow,
    RpnOperator,
    Success,
    Underflow,
)

_OP_NAMES = {
    RpnOperator.ADDITION: "addition",
    RpnOperator.SUBTRACTION: "subtraction",
    RpnOperator.MULTIPLICATION: "multiplication",
    RpnOperator.DIVISION: "division",
}


def operation_name(op: RpnOperator) -> str:
    return _OP_NAMES[op]


def describe_result(result: EvaluationResult) -> str:
    """Return a one-line message for ``result``."""
    if isinstance(result, Success):
        return str(result.value)
    if isinstance(result, InputEmpty):
        return "Input is empty"
    if isinstance(result, InputNotComplete):
        return "Input is not a complete expression"
    if isinstance(result, InvalidCharacterFound):
        return f"Invalid character found: {result.char!r}"
    if isinstance(result, FoundNonOperator):
        return f"Expected an operator, found {result.char!r}"
    if isinstance(result, FoundNonDigit):
        return f"Expected a digit, found {result.char!r}"
    if isinstance(result, InputNumberOverflow):
        return "Input number does not fit in a 32-bit signed integer"
    if isinstance(result, DivByZero):
        return "Division by zero"
    if isinstance(result, (Overflow, Underflow)):
        word = "Overflow" if isinstance(result, Overflow) else "Underflow"
        op = result.attempted_operation
        return (
            f"{word} in {operation_name(op)}: "
            f"{result.last_valid_value1} {op.symbol} {result.last_valid_value2}"
        )
    raise TypeError(f"Unknown evaluation result: {type(result)}")
