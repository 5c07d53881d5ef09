"""
contracts.py - single source of truth for every data type in rpncalc.
All modules import types ONLY from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Char = Annotated[str, Field(min_length=1, max_length=1)]


# ─────────────────────────── Operators ───────────────────────────────────

class RpnOperator(str, Enum):
    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"

    @property
    def symbol(self) -> str:
        return self.value


class OperatorSet(str, Enum):
    """Which operators an evaluator accepts.

    FULL   - ``+ - * /``; failed subtraction is reported as Overflow.
    NARROW - ``+ -`` only; failed subtraction is reported as Underflow.
    """
    FULL = "full"
    NARROW = "narrow"

    @property
    def operators(self) -> frozenset[RpnOperator]:
        if self is OperatorSet.NARROW:
            return frozenset({RpnOperator.ADDITION, RpnOperator.SUBTRACTION})
        return frozenset(RpnOperator)

    @property
    def reports_underflow(self) -> bool:
        return self is OperatorSet.NARROW


# ─────────────────────────── Parse state ─────────────────────────────────

class ParseStep(str, Enum):
    READING_VALUE1 = "reading_value1"
    READING_VALUE2 = "reading_value2"
    READING_OPERATOR = "reading_operator"

    def advance(self) -> ParseStep:
        """Next state after a space: Value1 -> Value2 -> Operator -> Value2 -> ..."""
        if self is ParseStep.READING_VALUE2:
            return ParseStep.READING_OPERATOR
        return ParseStep.READING_VALUE2

    @property
    def expects_digit(self) -> bool:
        return self is not ParseStep.READING_OPERATOR


# ─────────────────────────── EvaluationResult ────────────────────────────

class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_success(self) -> bool:
        return False


class Success(_Result):
    kind: Literal["success"] = "success"
    value: Int32

    @property
    def is_success(self) -> bool:
        return True


class InputEmpty(_Result):
    """Reserved; the evaluator never produces it (empty input is Success(0))."""
    kind: Literal["input_empty"] = "input_empty"


class InputNotComplete(_Result):
    """Reserved; a dangling trailing operand is silently ignored."""
    kind: Literal["input_not_complete"] = "input_not_complete"


class InvalidCharacterFound(_Result):
    kind: Literal["invalid_character_found"] = "invalid_character_found"
    char: Char


class FoundNonOperator(_Result):
    kind: Literal["found_non_operator"] = "found_non_operator"
    char: Char


class FoundNonDigit(_Result):
    kind: Literal["found_non_digit"] = "found_non_digit"
    char: Char


class InputNumberOverflow(_Result):
    kind: Literal["input_number_overflow"] = "input_number_overflow"


class DivByZero(_Result):
    kind: Literal["div_by_zero"] = "div_by_zero"


class Overflow(_Result):
    kind: Literal["overflow"] = "overflow"
    last_valid_value1: Int32
    last_valid_value2: Int32
    attempted_operation: RpnOperator


class Underflow(_Result):
    kind: Literal["underflow"] = "underflow"
    last_valid_value1: Int32
    last_valid_value2: Int32
    attempted_operation: RpnOperator


EvaluationResult = Annotated[
    Union[
        Success, InputEmpty, InputNotComplete, InvalidCharacterFound,
        FoundNonOperator, FoundNonDigit, InputNumberOverflow, DivByZero,
        Overflow, Underflow,
    ],
    Field(discriminator="kind"),
]
