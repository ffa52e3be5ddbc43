"""Pizza pricing built from stacked add-on decorators."""

from __future__ import annotations

BASE_PRICE = 10
TOPPING_PRICE = 5


class Pizza:
    """A plain pizza with a fixed price."""

    def __init__(self, price: float = BASE_PRICE) -> None:
        self.price = price

    def cost(self) -> float:
        return self.price


class Hawaiian(Pizza):
    """A Hawaiian pizza with a price chosen at creation."""

    def __init__(self, price: float) -> None:
        super().__init__(price)


class Addon(Pizza):
    """A pizza wrapping another pizza; by itself it adds nothing to the price."""

    def __init__(self, pizza: Pizza) -> None:
        super().__init__()
        self.pizza = pizza

    def cost(self) -> float:
        return self.pizza.cost()


class Mushrooms(Addon):
    """Mushroom topping."""

    def cost(self) -> float:
        return self.pizza.cost() + TOPPING_PRICE


class Pepper(Addon):
    """Pepper topping."""

    def cost(self) -> float:
        return self.pizza.cost() + TOPPING_PRICE


def _format_price(value: float) -> str:
    return f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    """Price a Hawaiian pizza with mushrooms and pepper."""
    pizza = Pepper(Mushrooms(Hawaiian(15)))
    print(_format_price(pizza.cost()))
    return 0