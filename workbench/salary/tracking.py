"""Attendance marks, time sheets and salary payments for employees."""

from __future__ import annotations

from dataclasses import dataclass

from workbench.salary.personnel import Employee


@dataclass
class Attendance:
    """Whether an employee was present on a given date."""

    employee: Employee
    date: str
    present: bool

    def update_attendance(self, present: bool) -> None:
        """Record whether the employee was present."""
        self.present = present


@dataclass
class TimeSheet:
    """Hours an employee logged for a given date."""

    employee: Employee
    date: str
    hours_worked: int

    def fill_time_sheet(self, hours: int) -> None:
        """Replace the logged hours."""
        self.hours_worked = hours


class Payment:
    """A salary payment made to an employee on a date."""

    def __init__(self, employee: Employee, amount: float, date: str) -> None:
        if amount < 0:
            raise ValueError("Payment amount cannot be negative")
        self.employee = employee
        self.amount = amount
        self.date = date

    def process_payment(self) -> None:
        """Announce the payment on standard output."""
        print(
            f"Processed payment of ${self.amount:g} to "
            f"{self.employee.first_name} {self.employee.last_name} on {self.date}"
        )

    def __repr__(self) -> str:
        return f"Payment({self.employee!r}, {self.amount!r}, {self.date!r})"