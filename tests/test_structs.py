import dataclasses

import pytest

from crabdrill.solutions.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    Order,
    Package,
    Rectangle,
    UnitLikeStruct,
    create_order_template,
)


def test_classic_c_structs():
    green = ColorClassicStruct(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTupleStruct(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    message = f"{UnitLikeStruct()!r}s are fun!"
    assert message == "UnitLikeStructs are fun!"


def test_your_order():
    template = create_order_template()
    your_order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == template.year
    assert your_order.made_by_phone == template.made_by_phone
    assert your_order.made_by_mobile == template.made_by_mobile
    assert your_order.made_by_email == template.made_by_email
    assert your_order.item_number == template.item_number
    assert your_order.count == 1


def test_order_template_values():
    assert create_order_template() == Order("Bob", 2019, False, False, True, 123, 0)


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500
    assert package.get_fees(6) == 9000


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)