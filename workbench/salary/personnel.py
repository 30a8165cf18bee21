"""Employees paid by the hour, and managers who also earn a bonus."""

from __future__ import annotations

import copy
from typing import Any

from workbench.salary.records import Address, ContactInfo


class Employee:
    """An hourly-paid employee."""

    def __init__(
        self,
        employee_id: int,
        first_name: str,
        last_name: str,
        position: str,
        hourly_rate: float,
        contact_info: ContactInfo,
        address: Address,
    ) -> None:
        self.employee_id = employee_id
        self.first_name = first_name
        self.last_name = last_name
        self.position = position
        self.hourly_rate = hourly_rate
        self.hours_worked = 0
        self.salary = 0.0
        self.projects: list[Any] = []
        self.contact_info = copy.copy(contact_info)
        self.address = copy.copy(address)

    def calculate_salary(self) -> float:
        """Compute, store and return the salary for the hours worked."""
        self.salary = self.hourly_rate * self.hours_worked
        return self.salary

    def update_hours_worked(self, hours: int) -> None:
        """Set the number of hours worked."""
        self.hours_worked = hours

    def add_project(self, project: Any) -> None:
        """Associate a project with this employee."""
        self.projects.append(project)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.employee_id!r}, "
            f"{self.first_name!r}, {self.last_name!r})"
        )


class Manager(Employee):
    """An employee whose salary includes a fixed bonus."""

    def __init__(
        self,
        employee_id: int,
        first_name: str,
        last_name: str,
        position: str,
        hourly_rate: float,
        bonus: float,
        contact_info: ContactInfo,
        address: Address,
    ) -> None:
        super().__init__(
            employee_id, first_name, last_name, position, hourly_rate, contact_info, address
        )
        self.bonus = bonus

    def calculate_salary(self) -> float:
        """Compute, store and return hourly pay plus the bonus."""
        self.salary = self.hourly_rate * self.hours_worked + self.bonus
        return self.salary