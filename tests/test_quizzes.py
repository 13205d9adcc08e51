import pytest

from crabdrill.solutions.quizzes import (
    AlphabeticalReportCard,
    Append,
    Command,
    NumericalReportCard,
    alphabetical_grade,
    calculate_price_of_apples,
    transformer,
)


@pytest.mark.parametrize("amount, price", [(35, 70), (40, 80), (41, 41), (65, 65)])
def test_verify(amount, price):
    assert calculate_price_of_apples(amount) == price


def test_transformer_it_works():
    output = transformer(
        [
            ("hello", Command.UPPERCASE),
            (" all roads lead to rome! ", Command.TRIM),
            ("foo", Append(1)),
            ("bar", Append(5)),
        ]
    )
    assert output == ["HELLO", "all roads lead to rome!", "foobar", "barbarbarbarbarbar"]


def test_transformer_rejects_unknown_command():
    with pytest.raises(TypeError):
        transformer([("x", "shout")])


def test_generate_numeric_report_card():
    card = NumericalReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = AlphabeticalReportCard(grade=5.5, student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


@pytest.mark.parametrize(
    "grade, letter",
    [(1.0, "F-"), (1.1, "F"), (2.0, "F+"), (3.5, "C"), (4.0, "B"), (5.0, "A"), (7.0, "Invalid Grade")],
)
def test_alphabetical_grade(grade, letter):
    assert alphabetical_grade(grade) == letter