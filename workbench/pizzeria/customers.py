"""People who buy pizza, and the loyalty programmes that reward them."""

from __future__ import annotations

from workbench.pizzeria.order import Order
from workbench.pizzeria.payments import Payment


class Person:
    """Anyone known to the pizzeria by name and age."""

    def __init__(self, name: str, age: int) -> None:
        self.name = name
        self.age = age

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.age!r})"


class LoyaltyProgram:
    """A programme granting a fractional discount on prices."""

    def __init__(self, program_id: int, discount_rate: float) -> None:
        self.program_id = program_id
        self.discount_rate = discount_rate

    def apply_discount(self, price: float) -> float:
        """Return the price reduced by the programme's discount rate."""
        return price - price * self.discount_rate

    def __repr__(self) -> str:
        return f"LoyaltyProgram({self.program_id!r}, {self.discount_rate!r})"


class Customer(Person):
    """A customer who places orders, pays for them and collects points."""

    def __init__(self, name: str, age: int, customer_id: int, loyalty_points: int) -> None:
        super().__init__(name, age)
        self.customer_id = customer_id
        self.loyalty_points = loyalty_points

    def place_order(self, order: Order) -> None:
        """Announce the order and mark it as placed."""
        print(f"Оформляется заказ с ID: {order.order_id}.")
        order.status = "Placed"

    def make_payment(self, payment: Payment) -> None:
        """Process an approved payment and earn its amount in points."""
        if payment.was_successful():
            payment.process_payment()
            self.loyalty_points = int(self.loyalty_points + payment.amount)
        else:
            print("Платёж не одобрен.")

    def use_loyalty_points(self, points: int, order: Order) -> None:
        """Spend points against an order if the customer has enough."""
        if points <= self.loyalty_points:
            order.apply_loyalty_points(points)
            self.loyalty_points -= points
            print(
                f"{points} бонусных баллов. Новая цена: {order.total_price:g}. "
                f"Оставшиеся бонусные баллы: {self.loyalty_points}."
            )
        else:
            print("Неправильное значение бонусных очков")

    def use_loyalty_program(self, program: LoyaltyProgram, order: Order) -> None:
        """Apply a programme's discount to the order's total."""
        order.apply_discount(program.discount_rate)
        print(f"Скидка применена. Новая цена: {order.total_price:g}.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, customer_id={self.customer_id!r})"


class InStoreCustomer(Customer):
    """A customer who shops in person with a membership card."""

    def __init__(
        self,
        name: str,
        age: int,
        customer_id: int,
        loyalty_points: int,
        membership_card: str,
    ) -> None:
        super().__init__(name, age, customer_id, loyalty_points)
        self.membership_card = membership_card