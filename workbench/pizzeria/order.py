"""A customer's order of pizzas with its running total and status."""

from __future__ import annotations

import dataclasses
from typing import Any

from workbench.pizzeria.pizza import Pizza

POINT_VALUE = 0.05
POINTS_PER_UNIT = 20


def _copy_pizza(pizza: Pizza) -> Pizza:
    return dataclasses.replace(pizza, toppings=list(pizza.toppings))


class Order:
    """An order holding copies of the pizzas added to it."""

    def __init__(self, order_id: int, customer: Any) -> None:
        self.order_id = order_id
        self.customer = customer
        self.pizzas: list[Pizza] = []
        self.total_price = 0.0
        self.status = "Pending"

    def add_pizza(self, pizza: Pizza) -> None:
        """Add a copy of the pizza and recompute the total."""
        self.pizzas.append(_copy_pizza(pizza))
        self.calculate_total_price()

    def calculate_total_price(self) -> float:
        """Reset the total to the sum of the pizza prices and return it."""
        self.total_price = sum((p.price for p in self.pizzas), 0.0)
        return self.total_price

    def remove_pizza(self, pizza: Pizza) -> None:
        """Remove the first pizza equal to the given one, if any."""
        try:
            self.pizzas.remove(pizza)
        except ValueError:
            return
        self.calculate_total_price()

    def update_pizza(self, old_pizza: Pizza, new_pizza: Pizza) -> None:
        """Replace the first pizza equal to old_pizza with new_pizza."""
        try:
            index = self.pizzas.index(old_pizza)
        except ValueError:
            return
        self.pizzas[index] = _copy_pizza(new_pizza)
        self.calculate_total_price()

    def apply_discount(self, discount_rate: float) -> None:
        """Reduce the total by the given fraction."""
        self.total_price -= self.total_price * discount_rate

    def apply_loyalty_points(self, points: int) -> int:
        """Spend points at 0.05 each against the total; return points used."""
        if POINT_VALUE * points >= self.total_price:
            applied = int(self.total_price * POINTS_PER_UNIT)
            self.total_price = 0.0
            return applied
        self.total_price -= POINT_VALUE * points
        return points

    def __repr__(self) -> str:
        return f"Order({self.order_id!r}, status={self.status!r}, total={self.total_price!r})"