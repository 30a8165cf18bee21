"""Pizzas, orders, payments, customers and pizzeria staff."""

__all__ = ["pizza", "order", "payments", "customers", "kitchen_staff"]