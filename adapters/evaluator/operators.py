"""
Operator classification for RPN expressions.

Two questions are answered separately:
  is_operator_symbol(c)           - is c one of the four recognised symbols?
  is_rpn_operator(c, operator_set) - does the configured set accept c?

to_rpn_operator() converts a character into RpnOperator and raises
OperatorConversionError (carrying FoundNonOperator) when the set rejects it.
"""
from __future__ import annotations

from contracts import FoundNonOperator, OperatorSet, RpnOperator

_SYMBOLS: dict[str, RpnOperator] = {op.symbol: op for op in RpnOperator}


class OperatorConversionError(ValueError):
    """Raised when a character is not an operator of the configured set."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Not an RPN operator: {char!r}")
        self.result = FoundNonOperator(char=char)


def is_operator_symbol(c: str) -> bool:
    return c in _SYMBOLS


def is_rpn_operator(c: str, operator_set: OperatorSet = OperatorSet.FULL) -> bool:
    op = _SYMBOLS.get(c)
    return op is not None and op in operator_set.operators


def to_rpn_operator(c: str, operator_set: OperatorSet = OperatorSet.FULL) -> RpnOperator:
    if not is_rpn_operator(c, operator_set):
        raise OperatorConversionError(c)
    return _SYMBOLS[c]
