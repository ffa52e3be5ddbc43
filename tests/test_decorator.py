import pytest

from gamepatterns.decorator import Addon, Hawaiian, Mushrooms, Pepper, Pizza, main


def test_plain_pizza_has_base_price():
    assert Pizza().cost() == 10


def test_hawaiian_uses_given_price():
    assert Hawaiian(15).cost() == 15


def test_bare_addon_passes_price_through():
    assert Addon(Hawaiian(12)).cost() == 12


@pytest.mark.parametrize("topping", [Mushrooms, Pepper])
def test_topping_adds_five(topping):
    base = Hawaiian(7)
    assert topping(base).cost() - base.cost() == 5


def test_stacked_toppings():
    assert Pepper(Mushrooms(Hawaiian(15))).cost() == 25


def test_decorator_follows_wrapped_price():
    base = Hawaiian(15)
    wrapped = Mushrooms(base)
    base.price = 20
    assert wrapped.cost() == base.cost() + 5


def test_main_prints_total(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "25\n"