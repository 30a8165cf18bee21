# workbench

Three small, self-contained object models for study and experiment:

- `workbench.salary`: a payroll office. `records` holds `Address`,
  `ContactInfo`, `BankAccount`, `Report`, `Role` and `Task`; `personnel`
  holds the hourly-paid `Employee` and the bonus-earning `Manager`;
  `projects` holds `Project` and `ProjectManager`; `tracking` holds
  `Attendance`, `TimeSheet` and `Payment`; `organization` holds `Department`,
  `Company` and `PayrollSystem`; `auth` holds an in-memory `LoginSystem`.
- `workbench.graph`: `digraph.Graph`, a directed graph container that keeps
  vertices in insertion order, with forward and reverse iteration over
  vertices and neighbours, and `digraph.GraphError`.
- `workbench.pizzeria`: `Pizza`, `Order`, the payments `CashPayment`,
  `CreditCardPayment` and `BankTransferPayment`, the customers `Customer` and
  `InStoreCustomer` with a `LoyaltyProgram`, and the staff `Manager`, `Chef`
  and `DeliveryPerson`. The messages these classes print are in Russian.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Two demonstration commands are installed with the package:

```
workbench-payroll-demo
workbench-graph-demo
```

`workbench-payroll-demo` builds a small company, prints the payroll report,
processes a payment, shows that a second registration of the same user fails
and that a wrong password is refused, prints a project summary and a few
records.

`workbench-graph-demo` builds a five-vertex directed graph, prints it, walks
its vertices and neighbours in both directions, removes an edge and a vertex,
and prints the result together with a copy.

## Payroll

```python
from workbench.salary.organization import Company, Department, PayrollSystem
from workbench.salary.personnel import Employee, Manager
from workbench.salary.records import Address, ContactInfo

john = Employee(1, "John", "Doe", "Developer", 50,
                ContactInfo("[phone]", "john.doe@example.com"),
                Address("Minsk", "Lenina", 10))
john.update_hours_worked(160)
john.calculate_salary()           # 8000

it = Department("IT")
it.add_employee(john)
company = Company("Tech Corp")
company.add_department(it)
PayrollSystem(company).generate_report()   # prints the total and returns it
```

A `Manager` earns `hourly_rate * hours_worked + bonus`. A `tracking.Payment`
with a negative amount raises `ValueError`.

## Directed graphs

```python
from workbench.graph.digraph import Graph, GraphError

graph = Graph()
for vertex in (1, 2, 3):
    graph.add_vertex(vertex)
graph.add_edge(1, 2)
graph.add_edge(2, 3)

print(graph, end="")        # "1: 2 \n2: 3 \n3: \n"
list(graph)                 # [1, 2, 3]
list(reversed(graph))       # [3, 2, 1]
list(graph.adjacent(2))     # [3]
graph.degree(1)             # 1
graph.has_edge(2, 1)        # False: edges are directed

try:
    graph.add_vertex(1)
except GraphError as error:
    print(error)            # Graph Exception: Vertex already exists: 1
```

Parallel edges are allowed: `remove_edge` removes every edge between two
vertices, `remove_first_edge` only the first. Graphs compare equal when they
hold the same vertices in the same order, each with the same neighbours in
any order. Ordering (`<`, `<=`, `>`, `>=`) compares vertex counts first and
edge counts second. `copy()` returns an independent graph.

## Pizzeria

```python
from workbench.pizzeria.customers import Customer
from workbench.pizzeria.order import Order
from workbench.pizzeria.payments import CashPayment
from workbench.pizzeria.pizza import Pizza

customer = Customer("Ivan Ivanov", 30, 1001, 500)
order = Order(1, customer)
order.add_pizza(Pizza("Large", "Thin Crust", 100.0))

customer.use_loyalty_points(200, order)   # each point is worth 0.05
order.total_price                         # 90.0
customer.loyalty_points                   # 300

customer.make_payment(CashPayment(1, 90.0, 100.0))
customer.loyalty_points                   # 390: the amount paid is earned as points
```

## Login system

```python
from workbench.salary.auth import LoginSystem

system = LoginSystem()
password = "password"
system.register_user("admin", password)
system.login("admin", password)     # True
system.login("admin", "secret")     # False
```

Registering the same user name twice raises `ValueError`.

## What the package does not do

- There is no pizzeria command; the pizzeria classes are used from Python only.
- There is no online customer with an e-mail address and a password; only
  `Customer` and `InStoreCustomer` exist.
- Nothing is stored: users, staff, orders and payments live in memory, and
  payments only print their outcome.