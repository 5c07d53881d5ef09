"""
Adapter: StateMachineEvaluator
Implements the RpnEvaluator port as a single left-to-right pass.

Registers:
  value1 - running (left-hand) result, the only value ever returned
  value2 - right-hand operand currently being parsed, zeroed whenever
           the machine enters READING_VALUE2

Every space advances ParseStep (Value1 -> Value2 -> Operator -> Value2 -> ...),
runs of spaces advance it once per space. Per-character dispatch, first match wins:
  ' '             advance the step
  ASCII digit     value = value * 10 + digit (checked), only in value states
  operator symbol apply to (value1, value2) (checked), only in READING_OPERATOR
  anything else   InvalidCharacterFound

The first error short-circuits the pass.
"""
from __future__ import annotations

import logging

from adapters.evaluator.checked_int32 import (
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
)
from adapters.evaluator.operators import (
    OperatorConversionError,
    is_operator_symbol,
    to_rpn_operator,
)
from contracts import (
    DivByZero,
    EvaluationResult,
    FoundNonDigit,
    FoundNonOperator,
    InputNumberOverflow,
    InvalidCharacterFound,
    OperatorSet,
    Overflow,
    ParseStep,
    RpnOperator,
    Success,
    Underflow,
)

logger = logging.getLogger("rpncalc.evaluator")

_CHECKED_OPS = {
    RpnOperator.ADDITION: checked_add,
    RpnOperator.SUBTRACTION: checked_sub,
    RpnOperator.MULTIPLICATION: checked_mul,
    RpnOperator.DIVISION: checked_div,
}


class _AbortEvaluation(Exception):
    """Carries the terminal EvaluationResult out of the character loop."""

    def __init__(self, result: EvaluationResult) -> None:
        super().__init__(result.kind)
        self.result = result


# Unicode White_Space; str.strip() would also drop \x1c-\x1f.
_TRIM_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _push_digit(register: int, c: str) -> int:
    shifted = checked_mul(register, 10)
    if shifted is None:
        raise _AbortEvaluation(InputNumberOverflow())
    accumulated = checked_add(shifted, ord(c) - ord("0"))
    if accumulated is None:
        raise _AbortEvaluation(InputNumberOverflow())
    return accumulated


class StateMachineEvaluator:
    """Single-pass RPN evaluator over int32 with checked arithmetic."""

    def __init__(self, operator_set: OperatorSet = OperatorSet.FULL) -> None:
        self.operator_set = operator_set

    # -- RpnEvaluator protocol ---------------------------------------------

    def evaluate(self, text: str) -> EvaluationResult:
        try:
            value = self._run(text.strip(_TRIM_CHARS))
        except _AbortEvaluation as abort:
            logger.debug("Evaluation of %r stopped: %r", text, abort.result)
            return abort.result
        return Success(value=value)

    # -- Private -------------------------------------------------------------

    def _run(self, text: str) -> int:
        value1 = 0
        value2 = 0
        step = ParseStep.READING_VALUE1

        for c in text:
            if c == " ":
                step = step.advance()
                if step is ParseStep.READING_VALUE2:
                    value2 = 0
            elif _is_ascii_digit(c):
                if step is ParseStep.READING_VALUE1:
                    value1 = _push_digit(value1, c)
                elif step is ParseStep.READING_VALUE2:
                    value2 = _push_digit(value2, c)
                else:
                    raise _AbortEvaluation(FoundNonOperator(char=c))
            elif is_operator_symbol(c):
                if step.expects_digit:
                    raise _AbortEvaluation(FoundNonDigit(char=c))
                value1 = self._apply(c, value1, value2)
            else:
                # unvalidated: c may be a lone surrogate, which pydantic rejects as a str
                raise _AbortEvaluation(InvalidCharacterFound.model_construct(char=c))

        return value1

    def _apply(self, c: str, value1: int, value2: int) -> int:
        try:
            op = to_rpn_operator(c, self.operator_set)
        except OperatorConversionError as exc:
            raise _AbortEvaluation(exc.result) from exc

        result = _CHECKED_OPS[op](value1, value2)
        if result is not None:
            return result

        if op is RpnOperator.DIVISION and value2 == 0:
            raise _AbortEvaluation(DivByZero())
        failure = (
            Underflow
            if op is RpnOperator.SUBTRACTION and self.operator_set.reports_underflow
            else Overflow
        )
        raise _AbortEvaluation(failure(
            last_valid_value1=value1,
            last_valid_value2=value2,
            attempted_operation=op,
        ))


_EVALUATORS = {operator_set: StateMachineEvaluator(operator_set) for operator_set in OperatorSet}


def evaluate_rpn(text: str, operator_set: OperatorSet = OperatorSet.FULL) -> EvaluationResult:
    """Evaluates ``text`` with a shared (stateless) evaluator for ``operator_set``."""
    return _EVALUATORS[OperatorSet(operator_set)].evaluate(text)
