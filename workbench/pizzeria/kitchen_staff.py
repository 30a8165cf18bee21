"""The pizzeria's staff: managers, chefs and delivery people."""

from __future__ import annotations

from abc import ABC, abstractmethod

from workbench.pizzeria.customers import Person
from workbench.pizzeria.order import Order


class Employee(Person, ABC):
    """A salaried member of staff."""

    def __init__(self, name: str, age: int, employee_id: int, salary: float) -> None:
        super().__init__(name, age)
        self.employee_id = employee_id
        self.salary = salary

    @abstractmethod
    def work(self) -> None:
        """Do this employee's job."""

    @abstractmethod
    def calculate_bonus(self) -> float:
        """Return the bonus this employee earns."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, employee_id={self.employee_id!r})"


class Manager(Employee):
    """An employee who manages other employees."""

    def __init__(self, name: str, age: int, employee_id: int, salary: float) -> None:
        super().__init__(name, age, employee_id, salary)
        self.managed_employees: list[Employee] = []

    def add_employee(self, employee: Employee) -> None:
        """Take an employee under management."""
        self.managed_employees.append(employee)

    def remove_employee(self, employee: Employee) -> None:
        """Stop managing this very employee, reporting whether it was found."""
        position = next(
            (i for i, managed in enumerate(self.managed_employees) if managed is employee),
            None,
        )
        if position is None:
            print("Работник не найден.")
            return
        del self.managed_employees[position]
        print("Работник устранён.")

    def calculate_bonus(self) -> float:
        return self.salary * 0.1

    def work(self) -> None:
        print("Менеджер работает.")


class Chef(Employee):
    """An employee who cooks orders and invents recipes."""

    def __init__(
        self, name: str, age: int, employee_id: int, salary: float, specialty: str
    ) -> None:
        super().__init__(name, age, employee_id, salary)
        self.specialty = specialty

    def prepare_order(self, order: Order) -> None:
        """Cook every pizza in the order and mark it completed."""
        order.status = "In Progress"
        for pizza in order.pizzas:
            toppings = "".join(f" {topping}" for topping in pizza.toppings)
            print(
                f"Шеф-повар {self.name} готовит пиццу с размером {pizza.size} "
                f"и типом корочки {pizza.crust_type} с топпингами:{toppings}."
            )
        order.status = "Completed"
        print(f"Все пиццы в заказе приготовлены. Статус заказа: {order.status}.")

    def create_recipe(self, recipe_name: str) -> None:
        """Announce a new recipe."""
        print(f"Шеф-повар {self.name} создал новый рецепт: {recipe_name}.")

    def calculate_bonus(self) -> float:
        return self.salary * 0.15

    def work(self) -> None:
        self.create_recipe("Специальное блюдо от шефа")
        print(f"Шеф-повар {self.name} готовит блюда и управляет кухней.")


class DeliveryPerson(Employee):
    """An employee who delivers orders by some vehicle."""

    def __init__(
        self, name: str, age: int, employee_id: int, salary: float, vehicle_type: str
    ) -> None:
        super().__init__(name, age, employee_id, salary)
        self.vehicle_type = vehicle_type

    def deliver_order(self, order: Order) -> None:
        """Deliver the order and mark it delivered."""
        print(f"Доставляем заказ с ID: {order.order_id} используя {self.vehicle_type}.")
        order.status = "Delivered"

    def track_order(self, order_id: str) -> None:
        """Report that an order is being tracked."""
        print(f"Отслеживаем заказ с ID: {order_id}.")

    def calculate_bonus(self) -> float:
        return self.salary * 0.05

    def work(self) -> None:
        print("Курьер работает над доставкой заказов")