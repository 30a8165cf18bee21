"""Projects made of tasks and staff, and the managers who run them."""

from __future__ import annotations

import sys

from workbench.salary.personnel import Employee, Manager
from workbench.salary.records import Task


class Project:
    """A named project holding tasks and assigned employees."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.tasks: list[Task] = []
        self.employees: list[Employee] = []

    def add_task(self, task: Task) -> None:
        """Append a task to the project."""
        self.tasks.append(task)

    def add_employee(self, employee: Employee) -> None:
        """Assign an employee to the project."""
        self.employees.append(employee)

    def remove_task(self, description: str) -> None:
        """Remove every task with the given description."""
        self.tasks = [t for t in self.tasks if t.description != description]

    def remove_employee(self, employee_id: int) -> None:
        """Remove every employee with the given id."""
        self.employees = [e for e in self.employees if e.employee_id != employee_id]

    def _lines(self) -> list[str]:
        lines = [f"Project: {self.name}", "Tasks:"]
        for task in self.tasks:
            status = "Completed" if task.completed else "Not Completed"
            lines.append(f"- {task.description} (Due: {task.deadline}, Status: {status})")
        lines.append("Employees:")
        lines.extend(f"- {e.first_name} {e.last_name}" for e in self.employees)
        return lines

    def details(self) -> str:
        """Return a multi-line summary of the project's tasks and staff."""
        return "".join(f"{line}\n" for line in self._lines())

    def show_project_details(self) -> str:
        """Write the project summary to standard output and return it."""
        text = self.details()
        sys.stdout.write(text)
        return text


class ProjectManager(Manager):
    """A manager who oversees projects."""

    def manage_project(self, project: Project) -> str:
        """Show the details of the managed project and return them."""
        return project.show_project_details()