"""Departments, companies and the payroll system that reports on them."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass, field

from workbench.salary.personnel import Employee


@dataclass
class Department:
    """A named group of employees."""

    name: str
    employees: list[Employee] = field(default_factory=list)

    def add_employee(self, employee: Employee) -> None:
        """Add an employee to the department."""
        self.employees.append(employee)

    def remove_employee(self, employee_id: int) -> None:
        """Remove every employee with the given id."""
        self.employees = [e for e in self.employees if e.employee_id != employee_id]

    def calculate_total_salary(self) -> float:
        """Recompute and sum the salaries of all employees."""
        return sum((e.calculate_salary() for e in self.employees), 0.0)


class Company:
    """A named company made of departments."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.departments: list[Department] = []

    def add_department(self, department: Department) -> None:
        """Store a copy of the department; its employees are shared."""
        self.departments.append(
            dataclasses.replace(department, employees=list(department.employees))
        )

    def remove_department(self, name: str) -> None:
        """Remove every department with the given name."""
        self.departments = [d for d in self.departments if d.name != name]

    def calculate_total_salary(self) -> float:
        """Sum the salaries of every department."""
        return sum((d.calculate_total_salary() for d in self.departments), 0.0)


class PayrollSystem:
    """Reports salary totals for a company."""

    def __init__(self, company: Company) -> None:
        self.company = company
        self.initialized = False

    def initialize(self) -> str:
        """Mark payroll as ready for the company, announce it and return the notice."""
        self.initialized = True
        message = f"Payroll system initialized for company: {self.company.name}\n"
        sys.stdout.write(message)
        return message

    def generate_report(self) -> float:
        """Print the company's total salary and return it."""
        total = self.company.calculate_total_salary()
        sys.stdout.write(f"Generating payroll report...\nTotal salary: ${total:g}\n")
        return total