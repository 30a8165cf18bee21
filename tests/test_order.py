import pytest

from workbench.pizzeria.order import Order
from workbench.pizzeria.pizza import Pizza


@pytest.fixture
def order():
    return Order(1, None)


def test_order_id(order):
    assert order.order_id == 1


def test_customer(order):
    assert order.customer is None


def test_new_order_is_pending_and_empty(order):
    assert order.status == "Pending"
    assert order.total_price == 0.0


def test_add_pizza(order):
    order.add_pizza(Pizza("Large", "Thin Crust", 16.0))
    order.add_pizza(Pizza("Medium", "Thick Crust", 12.0))
    assert order.total_price == pytest.approx(28.0)


def test_set_status(order):
    order.status = "Delivered"
    assert order.status == "Delivered"


def test_remove_pizza(order):
    pizza1 = Pizza("Large", "Thin Crust", 16.0)
    pizza2 = Pizza("Medium", "Thick Crust", 12.0)
    order.add_pizza(pizza1)
    order.add_pizza(pizza2)
    order.remove_pizza(pizza1)
    assert order.total_price == pytest.approx(12.0)


def test_remove_missing_pizza_changes_nothing(order):
    order.add_pizza(Pizza("Large", "Thin Crust", 16.0))
    order.remove_pizza(Pizza("Medium", "Thick Crust", 12.0))
    assert len(order.pizzas) == 1
    assert order.total_price == pytest.approx(16.0)


def test_update_pizza(order):
    pizza1 = Pizza("Large", "Thin Crust", 16.0)
    pizza2 = Pizza("Medium", "Thick Crust", 12.0)
    order.add_pizza(pizza1)
    order.update_pizza(pizza1, pizza2)
    assert order.total_price == pytest.approx(12.0)
    assert order.pizzas == [pizza2]


def test_apply_discount(order):
    order.add_pizza(Pizza("Large", "Thin Crust", 100.0))
    order.apply_discount(0.1)
    assert order.total_price == pytest.approx(90.0)


def test_apply_loyalty_points(order):
    order.add_pizza(Pizza("Large", "Thin Crust", 100.0))
    assert order.apply_loyalty_points(2000) == 2000
    assert order.total_price == pytest.approx(0.0)


def test_apply_loyalty_points_insufficient(order):
    order.add_pizza(Pizza("Large", "Thin Crust", 200.0))
    assert order.apply_loyalty_points(100) == 100
    assert order.total_price == pytest.approx(195.0)


def test_apply_loyalty_points_sufficient(order):
    order.add_pizza(Pizza("Large", "Thin Crust", 100.0))
    assert order.apply_loyalty_points(3000) == 2000
    assert order.total_price == pytest.approx(0.0)


def test_pizzas(order):
    order.add_pizza(Pizza("Large", "Thin Crust", 200.0))
    order.add_pizza(Pizza("Medium", "Thick Crust", 150.0))
    assert len(order.pizzas) == 2
    assert order.pizzas[0].size == "Large"
    assert order.pizzas[0].crust_type == "Thin Crust"
    assert order.pizzas[1].size == "Medium"
    assert order.pizzas[1].crust_type == "Thick Crust"


def test_order_keeps_its_own_copy(order):
    pizza = Pizza("Large", "Thin Crust", 16.0)
    order.add_pizza(pizza)
    pizza.add_topping("Cheese")
    assert order.pizzas[0].toppings == []