import pytest

from crabdrill.solutions.people import ParsePersonError, ParsePersonErrorKind, Person


# Lenient conversion with a default fallback.


def test_default():
    person = Person.default()
    assert person.name == "John"
    assert person.age == 30


@pytest.mark.parametrize(
    "text",
    ["", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one"],
)
def test_bad_input_falls_back_to_default(text):
    person = Person.from_loose(text)
    assert person.name == "John"
    assert person.age == 30


def test_good_convert():
    person = Person.from_loose("Mark,20")
    assert person.name == "Mark"
    assert person.age == 20


def test_trailing_comma():
    person = Person.from_loose("Mike,32,")
    assert person.name == "Mike"
    assert person.age == 32


def test_trailing_comma_and_some_string():
    person = Person.from_loose("Mike,32,man")
    assert person.name == "Mike"
    assert person.age == 32


# Strict parsing with errors.


def test_empty_input():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("")
    assert info.value.kind is ParsePersonErrorKind.EMPTY


def test_good_input():
    person = Person.parse("John,32")
    assert person.name == "John"
    assert person.age == 32
    assert person == Person("John", 32)


def test_missing_age():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("John,")
    assert info.value.kind is ParsePersonErrorKind.PARSE_INT


def test_invalid_age():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("John,twenty")
    assert info.value.kind is ParsePersonErrorKind.PARSE_INT
    assert str(info.value) == "invalid digit found in string"


def test_missing_comma_and_age():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("John")
    assert info.value.kind is ParsePersonErrorKind.BAD_LEN


def test_missing_name():
    with pytest.raises(ParsePersonError) as info:
        Person.parse(",1")
    assert info.value.kind is ParsePersonErrorKind.NO_NAME


@pytest.mark.parametrize("text", [",", ",one"])
def test_missing_name_with_bad_age(text):
    with pytest.raises(ParsePersonError) as info:
        Person.parse(text)
    assert info.value.kind in (ParsePersonErrorKind.NO_NAME, ParsePersonErrorKind.PARSE_INT)


def test_trailing_comma_is_bad_len():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("John,32,")
    assert info.value.kind is ParsePersonErrorKind.BAD_LEN


def test_trailing_comma_and_some_string_is_bad_len():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("John,32,man")
    assert info.value.kind is ParsePersonErrorKind.BAD_LEN


def test_negative_age_is_parse_error():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("John,-1")
    assert info.value.kind is ParsePersonErrorKind.PARSE_INT