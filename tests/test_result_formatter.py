from adapters.result_formatter import describe_result
from contracts import (
    DivByZero,
    FoundNonDigit,
    InputEmpty,
    InvalidCharacterFound,
    Overflow,
    RpnOperator,
    Success,
    Underflow,
)


def test_success_is_printed_as_plain_value():
    assert describe_result(Success(value=-1_454_020)) == "-1454020"


def test_character_errors_name_the_character():
    assert describe_result(InvalidCharacterFound(char="x")) == "Invalid character found: 'x'"
    assert describe_result(FoundNonDigit(char="+")) == "Expected a digit, found '+'"


def test_overflow_messages_keep_operands_and_operation():
    overflow = Overflow(
        last_valid_value1=2147483647,
        last_valid_value2=1,
        attempted_operation=RpnOperator.ADDITION,
    )
    underflow = Underflow(
        last_valid_value1=-2147483647,
        last_valid_value2=2,
        attempted_operation=RpnOperator.SUBTRACTION,
    )

    assert describe_result(overflow) == "Overflow in addition: 2147483647 + 1"
    assert describe_result(underflow) == "Underflow in subtraction: -2147483647 - 2"


def test_reserved_and_simple_variants_have_messages():
    assert describe_result(InputEmpty()) == "Input is empty"
    assert describe_result(DivByZero()) == "Division by zero"
