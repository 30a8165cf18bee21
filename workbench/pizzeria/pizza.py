"""A pizza with a size, crust, price and list of toppings."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Pizza:
    """A pizza; two pizzas are equal when every attribute matches."""

    size: str
    crust_type: str
    price: float
    toppings: list[str] = field(default_factory=list)

    def add_topping(self, topping: str) -> None:
        """Append a topping."""
        self.toppings.append(topping)