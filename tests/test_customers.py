import pytest

from workbench.pizzeria.customers import Customer, InStoreCustomer, LoyaltyProgram, Person
from workbench.pizzeria.order import Order
from workbench.pizzeria.payments import CashPayment
from workbench.pizzeria.pizza import Pizza


@pytest.fixture
def customer():
    return Customer("Ivan Ivanov", 30, 1001, 500)


def _order_of_100(owner):
    order = Order(1, owner)
    order.add_pizza(Pizza("Large", "Thin Crust", 100.0))
    return order


def test_person_fields():
    person = Person("Ivan", 30)
    assert person.name == "Ivan"
    assert person.age == 30


def test_customer_constructor(customer):
    assert customer.customer_id == 1001
    assert customer.loyalty_points == 500


def test_place_order(customer, capsys):
    order = Order(1, customer)
    customer.place_order(order)
    assert capsys.readouterr().out == "Оформляется заказ с ID: 1.\n"
    assert order.status == "Placed"


def test_make_payment_successful(customer, capsys):
    customer.make_payment(CashPayment(1, 200.0, 300.0))
    assert capsys.readouterr().out == "Платеж успешно обработан. Сдача: 100 рублей.\n"
    assert customer.loyalty_points == 700


def test_make_payment_unsuccessful(customer, capsys):
    customer.make_payment(CashPayment(1, 300.0, 100.0))
    assert capsys.readouterr().out == "Платёж не одобрен.\n"
    assert customer.loyalty_points == 500


def test_use_loyalty_points_successful(customer, capsys):
    order = _order_of_100(customer)
    customer.use_loyalty_points(200, order)
    assert capsys.readouterr().out == (
        "200 бонусных баллов. Новая цена: 90. Оставшиеся бонусные баллы: 300.\n"
    )
    assert order.total_price == 90
    assert customer.loyalty_points == 300


def test_use_loyalty_points_unsuccessful(capsys):
    poor = Customer("Ivan Ivanov", 30, 1001, 100)
    order = _order_of_100(poor)
    poor.use_loyalty_points(200, order)
    assert capsys.readouterr().out == "Неправильное значение бонусных очков\n"
    assert order.total_price == 100
    assert poor.loyalty_points == 100


def test_use_loyalty_program(customer, capsys):
    order = _order_of_100(customer)
    customer.use_loyalty_program(LoyaltyProgram(1, 0.1), order)
    assert capsys.readouterr().out == "Скидка применена. Новая цена: 90.\n"
    assert order.total_price == pytest.approx(90.0)


def test_loyalty_program_apply_discount():
    program = LoyaltyProgram(1, 0.1)
    assert program.apply_discount(100.0) == pytest.approx(90.0)
    assert program.discount_rate == 0.1


def test_in_store_customer_fields():
    shopper = InStoreCustomer("Ivan Ivanov", 30, 1001, 500, "12345-67890")
    assert shopper.name == "Ivan Ivanov"
    assert shopper.age == 30
    assert shopper.customer_id == 1001
    assert shopper.loyalty_points == 500
    assert shopper.membership_card == "12345-67890"


def test_in_store_customer_uses_points(capsys):
    shopper = InStoreCustomer("Ivan Ivanov", 30, 1001, 500, "12345-67890")
    order = _order_of_100(shopper)
    shopper.use_loyalty_points(200, order)
    assert capsys.readouterr().out == (
        "200 бонусных баллов. Новая цена: 90. Оставшиеся бонусные баллы: 300.\n"
    )
    assert shopper.loyalty_points == 300