import pytest

from crabdrill.solutions.errors import (
    CreationError,
    CreationErrorKind,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_pos_nonzero,
    remaining_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_remaining_tokens():
    assert remaining_tokens(100, "8") == 59


def test_remaining_tokens_unaffordable():
    with pytest.raises(ValueError, match="can't afford"):
        remaining_tokens(10, "8")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.kind is CreationErrorKind.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.kind is CreationErrorKind.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationErrorKind.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationErrorKind.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert info.value.parse_int is not None
    assert info.value.creation is None


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.creation.kind is CreationErrorKind.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.creation.kind is CreationErrorKind.ZERO


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)